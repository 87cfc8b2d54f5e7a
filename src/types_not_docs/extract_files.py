"""Per-file extraction with failures downgraded to warnings."""

import logging
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from types_not_docs.errors import ExtractionFailure
from types_not_docs.models import ParsedFile
from types_not_docs.parse_file import parse_file

logger = logging.getLogger(__name__)


def _try_parse(path: Path) -> ParsedFile | None:
    try:
        return parse_file(path)
    except ExtractionFailure as exc:
        logger.warning("%s", exc)
        return None


def extract_files(paths: Sequence[Path], jobs: int = 1) -> list[ParsedFile]:
    """Extract every file, keeping input order and skipping failures.

    Files that fail to parse or export nothing are left out of the result.
    """
    if jobs > 1 and len(paths) > 1:
        with ThreadPoolExecutor(max_workers=jobs) as pool:
            results = list(pool.map(_try_parse, paths))
    else:
        results = [_try_parse(p) for p in paths]

    parsed: list[ParsedFile] = []
    for path, result in zip(paths, results, strict=True):
        if result is None:
            continue
        if result.is_empty:
            logger.debug("No exported declarations in %s", path)
            continue
        parsed.append(result)

    logger.info(
        "Parsed %d file(s): %d interfaces, %d types, %d functions",
        len(parsed),
        sum(len(f.interfaces) for f in parsed),
        sum(len(f.type_aliases) for f in parsed),
        sum(len(f.functions) for f in parsed),
    )
    return parsed
