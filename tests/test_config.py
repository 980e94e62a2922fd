from pathlib import Path

import pytest

from fk_grade_level.config import (
    GradeLevelConfig,
    config_from_dict,
    config_from_yaml,
    load_config,
)


def test_load_config_defaults():
    """load_config without a path returns defaults."""
    config = load_config()
    assert config == GradeLevelConfig()
    assert "mr" in config.abbreviations
    assert config.max_grade_level == 12.0


def test_config_from_dict_ignores_unknown_keys():
    """Unknown configuration keys are dropped silently."""
    config = config_from_dict({"max_grade_level": 8, "unknown_key": 500})
    assert config.max_grade_level == 8
    assert config_from_dict(None) == GradeLevelConfig()


def test_config_from_yaml(tmp_path: Path):
    """YAML values override the matching defaults."""
    path = tmp_path / "config.yaml"
    path.write_text(
        "abbreviations: [inc, ltd]\nmin_grade_level: 3\nprecision: 1\n",
        encoding="utf-8",
    )
    config = config_from_yaml(path)
    assert config.abbreviations == ["inc", "ltd"]
    assert config.min_grade_level == 3
    assert config.precision == 1


def test_config_from_yaml_requires_mapping(tmp_path: Path):
    """A YAML document that is not a mapping is rejected."""
    path = tmp_path / "config.yaml"
    path.write_text("- just\n- a list\n", encoding="utf-8")
    with pytest.raises(ValueError):
        config_from_yaml(path)


def test_abbreviations_must_be_a_list():
    with pytest.raises(ValueError):
        config_from_dict({"abbreviations": "mr"})
