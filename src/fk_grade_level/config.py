from __future__ import annotations

from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, List, Mapping, MutableMapping

import yaml

from .segmentation import DEFAULT_ABBREVIATIONS


def _default_abbreviations() -> List[str]:
    return sorted(DEFAULT_ABBREVIATIONS)


@dataclass(slots=True)
class GradeLevelConfig:
    """Configuration options for grade-level analysis."""

    abbreviations: List[str] = field(default_factory=_default_abbreviations)
    max_grade_level: float = 12.0
    min_grade_level: float | None = None
    precision: int = 2
    skip_unscorable: bool = True

    def to_dict(self) -> dict[str, Any]:
        """Return a mutable dictionary representation of the configuration."""
        return dict(asdict(self))


def _build_kwargs(data: Mapping[str, Any]) -> dict[str, Any]:
    allowed = {field.name for field in fields(GradeLevelConfig)}
    kwargs = {key: data[key] for key in data if key in allowed}
    if "abbreviations" in kwargs:
        value = kwargs["abbreviations"]
        if not isinstance(value, (list, tuple, set, frozenset)):
            raise ValueError("abbreviations must be a list of strings.")
        kwargs["abbreviations"] = [str(item) for item in value]
    return kwargs


def config_from_dict(data: Mapping[str, Any] | None) -> GradeLevelConfig:
    """Build a GradeLevelConfig from a dictionary-like input."""
    if data is None:
        return GradeLevelConfig()
    return GradeLevelConfig(**_build_kwargs(data))


def config_from_yaml(path: str | Path) -> GradeLevelConfig:
    """Load configuration from a YAML file."""
    contents = Path(path).read_text(encoding="utf-8")
    parsed = yaml.safe_load(contents) or {}
    if not isinstance(parsed, MutableMapping):
        raise ValueError("Configuration YAML must define a mapping.")
    return config_from_dict(parsed)


def load_config(path: str | Path | None = None) -> GradeLevelConfig:
    """Load configuration from YAML when provided, otherwise return defaults."""
    if path is None:
        return GradeLevelConfig()
    return config_from_yaml(path)
