from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class BoundaryKind(Enum):
    """Selects which boundary rules a segmenter applies."""

    SENTENCE = "sentence"
    WORD = "word"


@dataclass(frozen=True, slots=True)
class Segment:
    """Represents a substring and its inclusive-exclusive character offsets."""

    text: str
    start: int
    end: int


@dataclass(frozen=True, slots=True)
class TextCounts:
    """Sentence, word and syllable counts derived from one text."""

    sentences: int
    words: int
    syllables: int


@dataclass(slots=True)
class GradeLevelReport:
    """Flesch-Kincaid grade level for a text together with its counts."""

    counts: TextCounts
    grade_level: float

    @property
    def words_per_sentence(self) -> float:
        if not self.counts.sentences:
            return 0.0
        return self.counts.words / self.counts.sentences

    @property
    def syllables_per_word(self) -> float:
        if not self.counts.words:
            return 0.0
        return self.counts.syllables / self.counts.words


@dataclass(slots=True)
class Document:
    """Represents an input document."""

    doc_id: str
    text: str


@dataclass(slots=True)
class ConstraintViolation:
    """Represents a broken grade-level constraint."""

    doc_id: str
    grade_level: float
    reason: str
