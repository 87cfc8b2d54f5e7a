"""Tests for configuration loading, merging and validation."""

from pathlib import Path

import pytest
import yaml

from types_not_docs.errors import ConfigurationError
from types_not_docs.load_config import (
    DEFAULT_CONFIG,
    generator_options,
    load_config,
)
from types_not_docs.merge_config import merge_config
from types_not_docs.models import GeneratorOptions


def test_merge_config_scalars_replace() -> None:
    """Verify scalar replacement in merge."""
    merged = merge_config({"title": "A", "jobs": 1}, {"title": "B"})
    assert merged == {"title": "B", "jobs": 1}


def test_merge_config_exclude_is_additive() -> None:
    """Verify exclude patterns extend the base list without duplicates."""
    base = {"exclude": ["**/dist/**", "**/*.test.ts"]}
    update = {"exclude": ["**/*.test.ts", "**/__tests__/**"]}
    merged = merge_config(base, update)
    assert merged["exclude"] == ["**/dist/**", "**/*.test.ts", "**/__tests__/**"]
    assert base["exclude"] == ["**/dist/**", "**/*.test.ts"]


def test_load_config_defaults() -> None:
    """Verify defaults are returned when no file is provided."""
    config = load_config()
    assert config == DEFAULT_CONFIG
    assert generator_options(config) == GeneratorOptions(title="API Reference")


def test_load_config_from_file(tmp_path: Path) -> None:
    """Verify that settings are loaded from a YAML file."""
    config_file = tmp_path / "docs.yml"
    config_file.write_text(
        yaml.dump({"title": "Mosaic SDK", "exclude": ["**/generated/**"]}),
        encoding="utf-8",
    )
    config = load_config(str(config_file))
    assert config["title"] == "Mosaic SDK"
    assert "**/generated/**" in config["exclude"]
    assert "**/node_modules/**" in config["exclude"]


def test_overrides_win_over_file(tmp_path: Path) -> None:
    """Verify command-line overrides replace file values, None is ignored."""
    config_file = tmp_path / "docs.yml"
    config_file.write_text("title: From File\njobs: 2\n", encoding="utf-8")
    config = load_config(
        config_file,
        overrides={"title": "From Flag", "exclude": ["x/**"], "jobs": None},
    )
    assert config["title"] == "From Flag"
    assert config["exclude"] == ["x/**"]
    assert config["jobs"] == 2


def test_empty_config_file(tmp_path: Path) -> None:
    """Verify an empty YAML file leaves the defaults in place."""
    config_file = tmp_path / "docs.yml"
    config_file.write_text("", encoding="utf-8")
    assert load_config(config_file) == DEFAULT_CONFIG


@pytest.mark.parametrize(
    "overrides",
    [
        {"unknown": True},
        {"title": ""},
        {"title": 42},
        {"exclude": "**/dist/**"},
        {"jobs": 0},
        {"jobs": True},
    ],
)
def test_invalid_options_are_rejected(overrides: dict) -> None:
    """Verify bad options raise a configuration error."""
    with pytest.raises(ConfigurationError):
        load_config(overrides=overrides)


def test_invalid_yaml(tmp_path: Path) -> None:
    """Verify malformed YAML is reported as a configuration error."""
    config_file = tmp_path / "docs.yml"
    config_file.write_text("title: [unclosed\n", encoding="utf-8")
    with pytest.raises(ConfigurationError, match="Invalid YAML"):
        load_config(config_file)


def test_non_mapping_config(tmp_path: Path) -> None:
    """Verify a YAML list is rejected."""
    config_file = tmp_path / "docs.yml"
    config_file.write_text("- a\n- b\n", encoding="utf-8")
    with pytest.raises(ConfigurationError, match="mapping"):
        load_config(config_file)


def test_missing_config_file(tmp_path: Path) -> None:
    """Verify an explicit but missing config file is an error."""
    with pytest.raises(ConfigurationError, match="Cannot read"):
        load_config(tmp_path / "nope.yml")
