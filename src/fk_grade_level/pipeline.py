from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List

from .calculator import UnscorableTextError, analyze_text
from .config import GradeLevelConfig
from .constraints import find_violations
from .models import ConstraintViolation, Document, GradeLevelReport

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class DocumentResult:
    """Outcome of scoring one document."""

    document: Document
    report: GradeLevelReport | None
    violations: List[ConstraintViolation] = field(default_factory=list)
    error: str | None = None


def process_document(doc: Document, config: GradeLevelConfig) -> DocumentResult:
    """Score a single document and check it against the configured bounds."""
    try:
        report = analyze_text(doc.text, config.abbreviations)
    except UnscorableTextError as exc:
        if not config.skip_unscorable:
            raise
        LOGGER.warning("Skipping unscorable document %s: %s", doc.doc_id, exc)
        return DocumentResult(document=doc, report=None, error=str(exc))
    violations = find_violations(doc.doc_id, report, config)
    return DocumentResult(document=doc, report=report, violations=violations)


def process_corpus(
    documents: List[Document], config: GradeLevelConfig
) -> Dict[str, DocumentResult]:
    """Process all documents and return the per-document outputs."""
    results: Dict[str, DocumentResult] = {}
    for document in documents:
        results[document.doc_id] = process_document(document, config)
    LOGGER.info("Scored %d document(s)", len(results))
    return results
