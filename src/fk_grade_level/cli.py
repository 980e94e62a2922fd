from __future__ import annotations

import json
from pathlib import Path
from typing import Dict, List, TypedDict

import typer
import yaml

from .calculator import UnscorableTextError, analyze_text
from .config import GradeLevelConfig, load_config
from .constraints import has_violations
from .models import ConstraintViolation, Document, GradeLevelReport
from .pipeline import DocumentResult, process_corpus

app = typer.Typer(help="Flesch-Kincaid grade level CLI.", no_args_is_help=True)


@app.command()
def score(
    text: str | None = typer.Argument(
        None, help="Text to score. Reads standard input when omitted."
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
    as_json: bool = typer.Option(
        False, "--json", help="Emit the counts and grade level as JSON."
    ),
) -> None:
    """Print the grade level of a single text."""
    cfg = load_config(config)
    if text is None:
        text = typer.get_text_stream("stdin").read()
    try:
        report = analyze_text(text, cfg.abbreviations)
    except UnscorableTextError as exc:
        raise typer.BadParameter(str(exc), param_hint="TEXT") from exc
    if as_json:
        typer.echo(json.dumps(_report_dict(report, cfg.precision), indent=2))
        return
    typer.echo(f"{round(report.grade_level, cfg.precision)}")


@app.command()
def analyze(
    input_path: Path = typer.Option(
        ..., exists=True, readable=True, dir_okay=True, file_okay=True
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
    max_grade_level: float | None = typer.Option(
        None, "--max-grade-level", help="Override max_grade_level config value."
    ),
    min_grade_level: float | None = typer.Option(
        None, "--min-grade-level", help="Override min_grade_level config value."
    ),
    skip_unscorable: bool | None = typer.Option(
        None,
        "--skip-unscorable/--fail-unscorable",
        help="Override config skip_unscorable flag.",
    ),
    strict: bool = typer.Option(
        False, "--strict", help="Exit with status 1 when any document violates a bound."
    ),
) -> None:
    """Score every document under the input path and emit a JSON summary."""
    cfg = load_config(config)
    _apply_overrides(cfg, max_grade_level, min_grade_level, skip_unscorable)
    documents = _load_documents(input_path)
    try:
        results = process_corpus(documents, cfg)
    except UnscorableTextError as exc:
        raise typer.BadParameter(str(exc), param_hint="--input-path") from exc
    summary = _build_summary(results, cfg.precision)
    typer.echo(json.dumps({"documents": summary}, indent=2))
    if strict and any(has_violations(result.violations) for result in results.values()):
        raise typer.Exit(code=1)


@app.command("print-config")
def print_config() -> None:
    """Print the default configuration as YAML."""
    cfg = GradeLevelConfig()
    typer.echo(yaml.safe_dump(cfg.to_dict(), sort_keys=False))


def main() -> None:
    app()


def _apply_overrides(
    config: GradeLevelConfig,
    max_grade_level: float | None,
    min_grade_level: float | None,
    skip_unscorable: bool | None,
) -> None:
    """Apply CLI overrides to config fields when provided."""
    if max_grade_level is not None:
        config.max_grade_level = max_grade_level
    if min_grade_level is not None:
        config.min_grade_level = min_grade_level
    if skip_unscorable is not None:
        config.skip_unscorable = skip_unscorable


# File types the CLI knows how to expand into Document instances.
SUPPORTED_INPUT_EXTENSIONS = {".txt"}


class CountsPayload(TypedDict):
    sentences: int
    words: int
    syllables: int


class ReportPayload(TypedDict):
    grade_level: float
    words_per_sentence: float
    syllables_per_word: float
    counts: CountsPayload


class ViolationPayload(TypedDict):
    grade_level: float
    reason: str


class DocumentSummary(TypedDict):
    doc_id: str
    report: ReportPayload | None
    violations: List[ViolationPayload]
    error: str | None


def _load_documents(input_path: Path) -> List[Document]:
    """Expand the input path into documents keyed by their relative path."""
    if input_path.is_file():
        return [
            Document(doc_id=input_path.name, text=input_path.read_text(encoding="utf-8"))
        ]

    # Directory input: gather all supported files so output order is deterministic.
    files = sorted(
        p
        for p in input_path.rglob("*")
        if p.is_file() and p.suffix.lower() in SUPPORTED_INPUT_EXTENSIONS
    )
    return [
        Document(
            doc_id=file.relative_to(input_path).as_posix(),
            text=file.read_text(encoding="utf-8"),
        )
        for file in files
    ]


def _build_summary(
    results: Dict[str, DocumentResult], precision: int
) -> List[DocumentSummary]:
    """Create a JSON-serializable summary for each processed document."""
    summary: List[DocumentSummary] = []
    for doc_id, result in sorted(results.items()):
        summary.append(
            {
                "doc_id": doc_id,
                "report": (
                    _report_dict(result.report, precision)
                    if result.report is not None
                    else None
                ),
                "violations": [_violation_dict(v, precision) for v in result.violations],
                "error": result.error,
            }
        )
    return summary


def _report_dict(report: GradeLevelReport, precision: int) -> ReportPayload:
    """Serialize a GradeLevelReport so it can be emitted in JSON."""
    return {
        "grade_level": round(report.grade_level, precision),
        "words_per_sentence": round(report.words_per_sentence, precision),
        "syllables_per_word": round(report.syllables_per_word, precision),
        "counts": {
            "sentences": report.counts.sentences,
            "words": report.counts.words,
            "syllables": report.counts.syllables,
        },
    }


def _violation_dict(violation: ConstraintViolation, precision: int) -> ViolationPayload:
    """Serialize a ConstraintViolation so it can be emitted in JSON."""
    return {
        "grade_level": round(violation.grade_level, precision),
        "reason": violation.reason,
    }


if __name__ == "__main__":
    main()
