from __future__ import annotations

import logging
from typing import Iterable

from .counting import count_items, is_alpha_word, is_word
from .formula import grade_level_score
from .models import BoundaryKind, GradeLevelReport, TextCounts
from .segmentation import BoundarySegmenter
from .syllables import syllables_in_word

LOGGER = logging.getLogger(__name__)


class UnscorableTextError(ZeroDivisionError):
    """Raised when non-blank text yields no sentences or no words."""

    def __init__(self, counts: TextCounts) -> None:
        super().__init__(
            f"Cannot score text with {counts.sentences} sentence(s) "
            f"and {counts.words} word(s)."
        )
        self.counts = counts


def count_sentences(text: str, abbreviations: Iterable[str] | None = None) -> int:
    """Count sentence segments in ``text``."""
    segmenter = BoundarySegmenter(BoundaryKind.SENTENCE, abbreviations)
    return count_items(segmenter.texts(text))


def count_words(text: str) -> int:
    """Count word segments that start with a letter or digit."""
    segmenter = BoundarySegmenter(BoundaryKind.WORD)
    return count_items(segmenter.texts(text), is_word, lambda _: 1)


def count_syllables(text: str) -> int:
    """Sum estimated syllables over word segments that start with a letter."""
    segmenter = BoundarySegmenter(BoundaryKind.WORD)
    return count_items(segmenter.texts(text), is_alpha_word, syllables_in_word)


def count_text(text: str, abbreviations: Iterable[str] | None = None) -> TextCounts:
    """Derive sentence, word and syllable counts for ``text``."""
    counts = TextCounts(
        sentences=count_sentences(text, abbreviations),
        words=count_words(text),
        syllables=count_syllables(text),
    )
    LOGGER.debug(
        "Counted %d sentences, %d words, %d syllables",
        counts.sentences,
        counts.words,
        counts.syllables,
    )
    return counts


def analyze_text(
    text: str | None, abbreviations: Iterable[str] | None = None
) -> GradeLevelReport:
    """Score ``text`` and return the grade level together with its counts."""
    if text is None or not text.strip():
        return GradeLevelReport(counts=TextCounts(0, 0, 0), grade_level=0.0)

    counts = count_text(text, abbreviations)
    if counts.sentences == 0 or counts.words == 0:
        raise UnscorableTextError(counts)
    score = grade_level_score(counts.sentences, counts.words, counts.syllables)
    return GradeLevelReport(counts=counts, grade_level=score)


def calculate(text: str | None) -> float:
    """Return the Flesch-Kincaid grade level of ``text`` (0.0 for blank text)."""
    return analyze_text(text).grade_level
