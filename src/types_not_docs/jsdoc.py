"""Parsing of JSDoc comment blocks into a summary and tags."""

import re
from dataclasses import dataclass

TAG_LINE_RE = re.compile(r"^@(\w+)\s*(.*)$", re.DOTALL)
CLOSER_RE = re.compile(r"\*+/$")


@dataclass(frozen=True)
class JsDocTag:
    """A single `@tag` of a documentation block."""

    tag_name: str
    name: str | None  # declared parameter name, only for @param tags
    comment: str | None


@dataclass(frozen=True)
class JsDocBlock:
    """A parsed `/** ... */` documentation comment."""

    description: str | None
    tags: tuple[JsDocTag, ...] = ()


def is_jsdoc_comment(text: str) -> bool:
    """Check whether a raw comment is a documentation block."""
    return text.startswith("/**") and not text.startswith("/**/")


def _comment_lines(text: str) -> list[str]:
    body = CLOSER_RE.sub("", text[3:].rstrip())
    lines = []
    for line in body.splitlines():
        line = line.strip()
        if line.startswith("*"):
            line = line[1:]
            if line.startswith(" "):
                line = line[1:]
        lines.append(line.rstrip())
    return lines


def _split_braced_type(rest: str) -> str:
    """Drop a leading `{Type}` expression, honouring nested braces."""
    if not rest.startswith("{"):
        return rest
    depth = 0
    for i, ch in enumerate(rest):
        if ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
            if depth == 0:
                return rest[i + 1 :].lstrip()
    return ""


def _closing_bracket(rest: str) -> int:
    """Index of the `]` matching the `[` that opens `rest`, or -1."""
    depth = 0
    for i, ch in enumerate(rest):
        if ch == "[":
            depth += 1
        elif ch == "]":
            depth -= 1
            if depth == 0:
                return i
    return -1


def _parse_param_tag(rest: str) -> tuple[str | None, str | None]:
    rest = _split_braced_type(rest.strip())
    if not rest:
        return None, None
    if rest.startswith("["):
        end = _closing_bracket(rest)
        if end == -1:
            return None, None
        name = rest[1:end].split("=", 1)[0].strip()
        comment = rest[end + 1 :]
    else:
        parts = rest.split(None, 1)
        name = parts[0]
        comment = parts[1] if len(parts) > 1 else ""
    return name or None, comment.strip() or None


def _build_tag(tag_name: str, body: list[str]) -> JsDocTag:
    rest = "\n".join(body)
    if tag_name == "param":
        name, comment = _parse_param_tag(rest)
        return JsDocTag(tag_name=tag_name, name=name, comment=comment)
    return JsDocTag(tag_name=tag_name, name=None, comment=rest.strip() or None)


def parse_jsdoc(text: str) -> JsDocBlock:
    """Parse the raw text of a `/** ... */` comment."""
    summary: list[str] = []
    tags: list[JsDocTag] = []
    current: tuple[str, list[str]] | None = None

    for line in _comment_lines(text):
        m = TAG_LINE_RE.match(line.lstrip())
        if m:
            if current:
                tags.append(_build_tag(*current))
            current = (m.group(1), [m.group(2)])
        elif current:
            current[1].append(line)
        else:
            summary.append(line)
    if current:
        tags.append(_build_tag(*current))

    description = "\n".join(summary).strip()
    return JsDocBlock(description=description or None, tags=tuple(tags))
