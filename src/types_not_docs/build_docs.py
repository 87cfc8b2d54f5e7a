"""Orchestration of extraction and rendering for a list of source files."""

from collections.abc import Sequence
from pathlib import Path

from types_not_docs.errors import EmptyResultError
from types_not_docs.extract_files import extract_files
from types_not_docs.models import GeneratorOptions
from types_not_docs.render_markdown import generate_markdown


def build_docs(
    paths: Sequence[Path],
    options: GeneratorOptions | None = None,
    jobs: int = 1,
) -> str:
    """Extract all files and render them into one Markdown document.

    Raises:
        EmptyResultError: no file contributed any exported declaration.
    """
    parsed = extract_files(paths, jobs=jobs)
    if not parsed:
        msg = "No exported types found in any files"
        raise EmptyResultError(msg)
    return generate_markdown(parsed, options)
