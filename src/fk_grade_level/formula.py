from __future__ import annotations

SENTENCE_LENGTH_WEIGHT = 0.39
SYLLABLE_DENSITY_WEIGHT = 11.8
GRADE_OFFSET = 15.59


def grade_level_score(sentence_count: int, word_count: int, syllable_count: int) -> float:
    """
    Apply the Flesch-Kincaid grade level formula.

    Callers must ensure both ``sentence_count`` and ``word_count`` are
    positive; zero raises ``ZeroDivisionError``.
    """
    return (
        SENTENCE_LENGTH_WEIGHT * (word_count / sentence_count)
        + SYLLABLE_DENSITY_WEIGHT * (syllable_count / word_count)
        - GRADE_OFFSET
    )
