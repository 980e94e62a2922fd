from __future__ import annotations

from .config import GradeLevelConfig
from .models import ConstraintViolation, GradeLevelReport


def find_violations(
    doc_id: str, report: GradeLevelReport, config: GradeLevelConfig
) -> list[ConstraintViolation]:
    """Identify grade levels outside the configured bounds."""
    violations: list[ConstraintViolation] = []

    if report.grade_level > config.max_grade_level:
        violations.append(
            ConstraintViolation(
                doc_id=doc_id,
                grade_level=report.grade_level,
                reason=(
                    f"Grade level {report.grade_level:.1f} exceeds max "
                    f"{config.max_grade_level:.1f}"
                ),
            )
        )

    if config.min_grade_level is not None and report.grade_level < config.min_grade_level:
        violations.append(
            ConstraintViolation(
                doc_id=doc_id,
                grade_level=report.grade_level,
                reason=(
                    f"Grade level {report.grade_level:.1f} below min "
                    f"{config.min_grade_level:.1f}"
                ),
            )
        )

    return violations


def has_violations(violations: list[ConstraintViolation]) -> bool:
    """Return True if any constraint was broken."""
    return bool(violations)
