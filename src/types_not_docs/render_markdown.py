"""Render parsed declarations as a single API reference Markdown document."""

from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Generic, TypeVar

from types_not_docs.collision import anchor_for, display_name, find_duplicate_names
from types_not_docs.md_codeblock import md_codeblock
from types_not_docs.md_table import escape_table_text, md_table
from types_not_docs.models import (
    GeneratorOptions,
    ParsedFile,
    ParsedFunction,
    ParsedInterface,
    ParsedParameter,
    ParsedProperty,
    ParsedTypeAlias,
)

T = TypeVar("T", ParsedInterface, ParsedTypeAlias, ParsedFunction)

REQUIRED_MARK = "✓"


@dataclass(frozen=True)
class SourcedItem(Generic[T]):
    """An item paired with the base name of the file it came from."""

    item: T
    source_file: str


def generate_markdown(
    files: Sequence[ParsedFile], options: GeneratorOptions | None = None
) -> str:
    """Generate the Markdown reference for all files, in the given order."""
    options = options or GeneratorOptions()

    interfaces: list[SourcedItem[ParsedInterface]] = []
    type_aliases: list[SourcedItem[ParsedTypeAlias]] = []
    functions: list[SourcedItem[ParsedFunction]] = []
    for f in files:
        source_file = Path(f.file_path).name
        interfaces.extend(SourcedItem(i, source_file) for i in f.interfaces)
        type_aliases.extend(SourcedItem(t, source_file) for t in f.type_aliases)
        functions.extend(SourcedItem(fn, source_file) for fn in f.functions)

    duplicates = find_duplicate_names(
        [s.item.name for s in interfaces]
        + [s.item.name for s in type_aliases]
        + [s.item.name for s in functions]
    )

    parts = [f"# {options.title}", ""]
    parts.extend(_render_toc(interfaces, type_aliases, functions, duplicates))

    for s in interfaces:
        parts.extend(_render_interface(s, duplicates))
        parts.append("")
    for s in type_aliases:
        parts.extend(_render_type_alias(s, duplicates))
        parts.append("")
    for s in functions:
        parts.extend(_render_function(s, duplicates))
        parts.append("")

    return "\n".join(parts)


def _render_toc(
    interfaces: list[SourcedItem[ParsedInterface]],
    type_aliases: list[SourcedItem[ParsedTypeAlias]],
    functions: list[SourcedItem[ParsedFunction]],
    duplicates: frozenset[str],
) -> list[str]:
    """Render the table of contents, or nothing when there are no items."""
    if not (interfaces or type_aliases or functions):
        return []

    parts = ["## Table of Contents", ""]
    groups: list[tuple[str, Sequence[SourcedItem], str]] = [
        ("Interfaces", interfaces, ""),
        ("Types", type_aliases, ""),
        ("Functions", functions, "()"),
    ]
    for heading, items, suffix in groups:
        if not items:
            continue
        parts += [f"### {heading}", ""]
        for s in items:
            label = display_name(s.item.name, s.source_file, duplicates)
            anchor = anchor_for(s.item.name, s.source_file, duplicates)
            parts.append(f"- [{label}{suffix}](#{anchor})")
        parts.append("")

    parts += ["---", ""]
    return parts


def _render_interface(
    s: SourcedItem[ParsedInterface], duplicates: frozenset[str]
) -> list[str]:
    iface = s.item
    parts = [f"## {display_name(iface.name, s.source_file, duplicates)}", ""]

    if iface.extends:
        parts += [f"*Extends: {', '.join(iface.extends)}*", ""]
    if iface.description:
        parts += [iface.description, ""]

    if iface.properties:
        parts.append(_member_table("Property", iface.properties))
    else:
        parts.append("*No properties*")

    parts += ["", "---"]
    return parts


def _render_type_alias(
    s: SourcedItem[ParsedTypeAlias], duplicates: frozenset[str]
) -> list[str]:
    alias = s.item
    parts = [f"## {display_name(alias.name, s.source_file, duplicates)}", ""]

    if alias.description:
        parts += [alias.description, ""]

    parts.append(md_codeblock(f"type {alias.name} = {alias.type}"))
    parts += ["", "---"]
    return parts


def function_signature(fn: ParsedFunction) -> str:
    """Reconstruct `[async ]function name(p: T, q?: U): R` for a function."""
    params = ", ".join(
        f"{p.name}{'' if p.required else '?'}: {p.type}" for p in fn.parameters
    )
    prefix = "async " if fn.is_async else ""
    return f"{prefix}function {fn.name}({params}): {fn.return_type}"


def _render_function(
    s: SourcedItem[ParsedFunction], duplicates: frozenset[str]
) -> list[str]:
    fn = s.item
    parts = [f"## {display_name(fn.name, s.source_file, duplicates)}()", ""]

    if fn.description:
        parts += [fn.description, ""]

    parts += [md_codeblock(function_signature(fn)), ""]

    if fn.parameters:
        parts += ["**Parameters:**", "", _member_table("Name", fn.parameters), ""]

    parts.append(f"**Returns:** `{escape_table_text(fn.return_type)}`")
    parts += ["", "---"]
    return parts


def _member_table(
    name_header: str, members: Sequence[ParsedProperty | ParsedParameter]
) -> str:
    """Render properties or parameters as a four-column table."""
    rows = [
        [
            m.name,
            f"`{escape_table_text(m.type)}`",
            REQUIRED_MARK if m.required else "",
            m.description or "",
        ]
        for m in members
    ]
    return md_table([name_header, "Type", "Required", "Description"], rows)
