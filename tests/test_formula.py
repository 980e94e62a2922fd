import pytest

from fk_grade_level.formula import grade_level_score


def test_grade_level_score():
    """Formula output matches hand-computed grade levels."""
    assert grade_level_score(2, 6, 6) == pytest.approx(-2.62)
    assert grade_level_score(1, 1, 2) == pytest.approx(8.4)


def test_grade_level_score_is_not_clamped():
    assert grade_level_score(1, 1, 10) == pytest.approx(102.8)


@pytest.mark.parametrize(("sentences", "words"), [(0, 5), (3, 0)])
def test_grade_level_score_rejects_zero_counts(sentences, words):
    """Zero sentences or words raise ZeroDivisionError."""
    with pytest.raises(ZeroDivisionError):
        grade_level_score(sentences, words, 4)
