"""Logic for loading, merging and validating configuration."""

from pathlib import Path
from typing import Any

import yaml

from types_not_docs.errors import ConfigurationError
from types_not_docs.merge_config import merge_config
from types_not_docs.models import DEFAULT_TITLE, GeneratorOptions

DEFAULT_CONFIG: dict[str, Any] = {
    "title": DEFAULT_TITLE,
    "exclude": [
        "**/node_modules/**",
        "**/*.test.ts",
        "**/*.spec.ts",
        "**/dist/**",
    ],
    "jobs": 1,
}


def load_config(
    path: str | Path | None = None, overrides: dict[str, Any] | None = None
) -> dict[str, Any]:
    """Load configuration from a YAML file, merge it with defaults and validate.

    `overrides` (typically command-line flags) win over the file and replace
    rather than extend list values. `None` values in overrides are ignored.
    """
    config = DEFAULT_CONFIG.copy()
    if path:
        config = merge_config(config, _read_config_file(Path(path)))
    for key, value in (overrides or {}).items():
        if value is not None:
            config[key] = value
    validate_config(config)
    return config


def _read_config_file(path: Path) -> dict[str, Any]:
    try:
        user_config = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except OSError as exc:
        msg = f"Cannot read config file {path}: {exc.strerror or exc}"
        raise ConfigurationError(msg) from exc
    except yaml.YAMLError as exc:
        msg = f"Invalid YAML in config file {path}: {exc}"
        raise ConfigurationError(msg) from exc
    if not isinstance(user_config, dict):
        msg = f"Config file {path} must contain a mapping"
        raise ConfigurationError(msg)
    return user_config


def validate_config(config: dict[str, Any]) -> None:
    """Reject unknown keys and ill-typed values."""
    unknown = sorted(set(config) - set(DEFAULT_CONFIG))
    if unknown:
        msg = f"Unknown configuration option(s): {', '.join(unknown)}"
        raise ConfigurationError(msg)

    title = config["title"]
    if not isinstance(title, str) or not title.strip():
        msg = "Option 'title' must be a non-empty string"
        raise ConfigurationError(msg)

    exclude = config["exclude"]
    if not isinstance(exclude, list) or not all(isinstance(p, str) for p in exclude):
        msg = "Option 'exclude' must be a list of glob patterns"
        raise ConfigurationError(msg)

    jobs = config["jobs"]
    if isinstance(jobs, bool) or not isinstance(jobs, int) or jobs < 1:
        msg = "Option 'jobs' must be a positive integer"
        raise ConfigurationError(msg)


def generator_options(config: dict[str, Any]) -> GeneratorOptions:
    """Project a validated configuration onto the renderer's options."""
    return GeneratorOptions(title=config["title"])
