"""Logic for merging configuration dictionaries."""

from typing import Any

ADDITIVE_KEYS = frozenset({"exclude"})


def merge_config(base: dict[str, Any], update: dict[str, Any]) -> dict[str, Any]:
    """Merge user settings onto a base configuration.

    - Scalars in 'update' replace 'base' values.
    - 'exclude' is additive: patterns are appended, first occurrence wins.
    """
    result = base.copy()
    for key, value in update.items():
        if (
            key in ADDITIVE_KEYS
            and isinstance(value, list)
            and isinstance(result.get(key), list)
        ):
            result[key] = list(dict.fromkeys([*result[key], *value]))
        else:
            result[key] = value
    return result
