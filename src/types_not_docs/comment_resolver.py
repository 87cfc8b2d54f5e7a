"""Resolve descriptions from the documentation blocks attached to a declaration.

Only the last block counts: it is the one immediately preceding the
declaration. Earlier blocks are file banners or belong to preceding code.
"""

import re
from collections.abc import Sequence

from types_not_docs.jsdoc import JsDocBlock

LEADING_DASH_RE = re.compile(r"^-\s*")


def resolve_description(blocks: Sequence[JsDocBlock]) -> str | None:
    """Return the trimmed summary of the last block, if any."""
    if not blocks:
        return None
    description = blocks[-1].description
    if not description or not description.strip():
        return None
    return description.strip()


def resolve_param_descriptions(blocks: Sequence[JsDocBlock]) -> dict[str, str]:
    """Map top-level parameter names to their `@param` descriptions."""
    descriptions: dict[str, str] = {}
    if not blocks:
        return descriptions

    for tag in blocks[-1].tags:
        if tag.tag_name != "param" or not tag.name or not tag.comment:
            continue
        # Fields of destructured parameters (input.authority) are not recorded
        if "." in tag.name:
            continue
        description = LEADING_DASH_RE.sub("", tag.comment.strip())
        if description:
            descriptions[tag.name] = description
    return descriptions
