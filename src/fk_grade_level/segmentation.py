"""
Sentence and word boundary detection.

Sentences come from NLTK's Punkt tokenizer run over each paragraph; words
come from a single compiled regex. Segments produced for one boundary kind
never overlap and, concatenated, reproduce the input text. Whitespace stays
attached to the sentence it follows, mirroring the usual locale
break-iteration conventions for English.
"""

from __future__ import annotations

import re
from typing import Iterable, Iterator

from nltk.tokenize.punkt import PunktParameters, PunktSentenceTokenizer

from .models import BoundaryKind, Segment

DEFAULT_ABBREVIATIONS = frozenset(
    {"mr", "mrs", "ms", "dr", "prof", "sr", "jr", "vs", "e.g", "i.e"}
)

WORD_SEGMENT_RE = re.compile(r"\w+(?:['’.:]\w+)*|\s+|.", re.UNICODE | re.DOTALL)
# Line and paragraph separators, plus the whitespace that trails them.
PARAGRAPH_BREAK_RE = re.compile(r"(?:\r\n|[\n\r\x85\u2028\u2029])\s*", re.UNICODE)


def normalize_abbreviations(abbreviations: Iterable[str] | None) -> frozenset[str]:
    """Lowercase abbreviations and drop their trailing periods."""
    if abbreviations is None:
        return DEFAULT_ABBREVIATIONS
    return frozenset(
        item.strip().rstrip(".").lower() for item in abbreviations if item.strip()
    )


def build_sentence_tokenizer(
    abbreviations: Iterable[str] | None = None,
) -> PunktSentenceTokenizer:
    """Create an untrained Punkt tokenizer that knows ``abbreviations``."""
    params = PunktParameters()
    params.abbrev_types = set(normalize_abbreviations(abbreviations))
    return PunktSentenceTokenizer(params)


def sentence_boundaries(
    text: str,
    abbreviations: Iterable[str] | None = None,
    tokenizer: PunktSentenceTokenizer | None = None,
) -> Iterator[int]:
    """Yield character offsets at which a new sentence may start."""
    if tokenizer is None:
        tokenizer = build_sentence_tokenizer(abbreviations)
    for para_start, para_end in _paragraph_spans(text):
        paragraph = text[para_start:para_end]
        previous_end: int | None = None
        for start, end in tokenizer.span_tokenize(paragraph):
            if previous_end is not None and not _continues_sentence(
                paragraph, previous_end, start
            ):
                yield para_start + start
            previous_end = end
        yield para_end


def word_boundaries(text: str) -> Iterator[int]:
    """Yield the end offset of every word-level segment."""
    for match in WORD_SEGMENT_RE.finditer(text):
        yield match.end()


def _paragraph_spans(text: str) -> Iterator[tuple[int, int]]:
    start = 0
    for match in PARAGRAPH_BREAK_RE.finditer(text):
        yield start, match.end()
        start = match.end()
    if start < len(text):
        yield start, len(text)


def _continues_sentence(paragraph: str, previous_end: int, next_start: int) -> bool:
    """Return True when a period-only break is followed by lowercase or a digit."""
    index = previous_end - 1
    if index < 0 or paragraph[index] != ".":
        return False
    while index >= 0 and paragraph[index] == ".":
        index -= 1
    if index >= 0 and paragraph[index] in "!?":
        return False
    char = paragraph[next_start]
    return char.islower() or char.isdigit()


class BoundarySegmenter:
    """Split text into successive sentence or word segments."""

    def __init__(
        self, kind: BoundaryKind, abbreviations: Iterable[str] | None = None
    ) -> None:
        self.kind = kind
        self.abbreviations = normalize_abbreviations(abbreviations)
        self._tokenizer = (
            build_sentence_tokenizer(self.abbreviations)
            if kind is BoundaryKind.SENTENCE
            else None
        )

    def segments(self, text: str) -> Iterator[Segment]:
        """
        Lazily yield segments covering ``text`` left to right.

        Each call starts a fresh iteration. Blank text yields no sentence
        segments; word segmentation still reports its whitespace runs.
        """
        if self.kind is BoundaryKind.SENTENCE:
            return self._sentence_segments(text)
        return self._word_segments(text)

    def texts(self, text: str) -> Iterator[str]:
        """Yield only the substring of each segment."""
        return (segment.text for segment in self.segments(text))

    def _sentence_segments(self, text: str) -> Iterator[Segment]:
        start = 0
        for end in sentence_boundaries(text, tokenizer=self._tokenizer):
            # Leading blank lines fold into the sentence that follows them.
            if end <= start or not text[start:end].strip():
                continue
            yield Segment(text=text[start:end], start=start, end=end)
            start = end
        if start < len(text) and text[start:].strip():
            yield Segment(text=text[start:], start=start, end=len(text))

    def _word_segments(self, text: str) -> Iterator[Segment]:
        start = 0
        for end in word_boundaries(text):
            yield Segment(text=text[start:end], start=start, end=end)
            start = end


def iter_segments(
    text: str, kind: BoundaryKind, abbreviations: Iterable[str] | None = None
) -> Iterator[str]:
    """Convenience wrapper yielding the segment strings for ``kind``."""
    return BoundarySegmenter(kind, abbreviations).texts(text)
