"""Expansion of glob patterns into the list of source files to document."""

import fnmatch
import glob
from collections.abc import Sequence
from pathlib import Path


def _match_forms(path: Path) -> list[str]:
    """POSIX forms of a path: absolute, plus relative to cwd when under it."""
    forms = [path.as_posix()]
    try:
        forms.append(path.relative_to(Path.cwd().resolve()).as_posix())
    except ValueError:
        pass
    return forms


def is_excluded(path: Path, exclude: Sequence[str]) -> bool:
    """Check a path against exclusion globs.

    Patterns match either the absolute path or the path relative to the
    working directory, so both `**/gen/**` and `src/gen/**` work.
    """
    forms = _match_forms(path)
    return any(
        fnmatch.fnmatch(form, pattern) for pattern in exclude for form in forms
    )


def discover_files(patterns: Sequence[str], exclude: Sequence[str] = ()) -> list[Path]:
    """Expand glob patterns to sorted, absolute, de-duplicated file paths."""
    found: set[Path] = set()
    for pattern in patterns:
        for match in glob.glob(pattern, recursive=True):
            p = Path(match).resolve()
            if p.is_file() and not is_excluded(p, exclude):
                found.add(p)
    return sorted(found)
