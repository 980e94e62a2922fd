import pytest

from fk_grade_level.calculator import (
    UnscorableTextError,
    analyze_text,
    calculate,
    count_sentences,
    count_syllables,
    count_text,
    count_words,
)
from fk_grade_level.models import TextCounts

SCENARIO = "The cat sat. It was happy!"


@pytest.mark.parametrize("text", [None, "", "   ", "\n\t  \n"])
def test_blank_text_scores_zero(text):
    """Blank or missing text scores the 0.0 sentinel."""
    assert calculate(text) == 0.0


def test_scenario_counts_and_score():
    """Two short sentences yield the expected counts and grade level."""
    assert count_sentences(SCENARIO) == 2
    assert count_words(SCENARIO) == 6
    # The(0) cat(1) sat(1) It(1) was(1) happy(2)
    assert count_syllables(SCENARIO) == 6
    assert calculate(SCENARIO) == pytest.approx(-2.62)


def test_single_word_without_punctuation():
    """A single unterminated word still counts as one sentence."""
    assert count_text("Hello") == TextCounts(sentences=1, words=1, syllables=2)
    assert calculate("Hello") == pytest.approx(8.4)


def test_calculate_is_repeatable():
    """Scoring the same text twice gives identical floats."""
    text = "Readability formulas estimate difficulty. Shorter sentences help."
    assert calculate(text) == calculate(text)


def test_numbers_count_as_words_but_not_syllables():
    """Digits count as words but are skipped by syllable counting."""
    assert count_words("42 apples") == 2
    assert count_syllables("42 apples") == 2


def test_word_count_not_below_sentence_count():
    text = "Dr. Jones arrived. She smiled! Did everyone see? Yes.\nThe end"
    sentences = count_sentences(text)
    assert sentences == 5
    assert count_words(text) >= sentences


def test_abbreviations_passed_through():
    """Custom abbreviations reach the sentence segmenter."""
    text = "Acme Inc. Makes things."
    assert count_sentences(text) == 2
    assert count_sentences(text, ["inc"]) == 1


def test_analyze_text_reports_averages():
    """analyze_text returns counts alongside derived averages."""
    report = analyze_text(SCENARIO)
    assert report.counts == TextCounts(sentences=2, words=6, syllables=6)
    assert report.words_per_sentence == 3.0
    assert report.syllables_per_word == 1.0
    assert report.grade_level == calculate(SCENARIO)


def test_analyze_blank_text_returns_empty_report():
    report = analyze_text("  ")
    assert report.counts == TextCounts(0, 0, 0)
    assert report.grade_level == 0.0
    assert report.words_per_sentence == 0.0


def test_punctuation_only_text_is_unscorable():
    """Text without words raises instead of dividing by zero."""
    with pytest.raises(UnscorableTextError) as excinfo:
        calculate("!!! ???")
    assert isinstance(excinfo.value, ZeroDivisionError)
    assert excinfo.value.counts.words == 0
    assert excinfo.value.counts.sentences >= 1
