"""
fk_grade_level package exports convenience helpers for library consumers.
"""

from __future__ import annotations

from .calculator import (
    UnscorableTextError,
    analyze_text,
    calculate,
    count_sentences,
    count_syllables,
    count_text,
    count_words,
)
from .config import GradeLevelConfig, config_from_dict, config_from_yaml, load_config
from .counting import count_items
from .formula import grade_level_score
from .models import BoundaryKind, GradeLevelReport, Segment, TextCounts
from .pipeline import process_corpus, process_document
from .segmentation import BoundarySegmenter
from .syllables import syllables_in_word

__all__ = [
    "BoundaryKind",
    "BoundarySegmenter",
    "GradeLevelConfig",
    "GradeLevelReport",
    "Segment",
    "TextCounts",
    "UnscorableTextError",
    "analyze_text",
    "calculate",
    "config_from_dict",
    "config_from_yaml",
    "count_items",
    "count_sentences",
    "count_syllables",
    "count_text",
    "count_words",
    "grade_level_score",
    "load_config",
    "process_corpus",
    "process_document",
    "syllables_in_word",
]

__version__ = "0.1.0"
