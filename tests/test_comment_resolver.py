"""Tests for description and @param resolution."""

from types_not_docs.comment_resolver import (
    resolve_description,
    resolve_param_descriptions,
)
from types_not_docs.jsdoc import JsDocBlock, JsDocTag


def test_no_blocks() -> None:
    """Verify that missing documentation yields nothing."""
    assert resolve_description([]) is None
    assert resolve_param_descriptions([]) == {}


def test_last_block_wins() -> None:
    """Verify only the block closest to the declaration is used."""
    blocks = [
        JsDocBlock(description="File banner"),
        JsDocBlock(description="  The real description  "),
    ]
    assert resolve_description(blocks) == "The real description"


def test_empty_last_block_hides_earlier_ones() -> None:
    """Verify an empty last block does not fall back to earlier blocks."""
    blocks = [
        JsDocBlock(description="File banner"),
        JsDocBlock(description=None, tags=(JsDocTag("param", "x", "count"),)),
    ]
    assert resolve_description(blocks) is None
    assert resolve_description([JsDocBlock(description="   ")]) is None


def test_param_descriptions() -> None:
    """Verify dash stripping and skipping of dotted or empty params."""
    block = JsDocBlock(
        description=None,
        tags=(
            JsDocTag("param", "input", "- Transfer configuration"),
            JsDocTag("param", "input.authority", "- Nested field"),
            JsDocTag("param", "mode", None),
            JsDocTag("param", "count", "Plain text"),
            JsDocTag("returns", None, "Something"),
        ),
    )
    assert resolve_param_descriptions([block]) == {
        "input": "Transfer configuration",
        "count": "Plain text",
    }


def test_param_descriptions_use_last_block_only() -> None:
    """Verify @param tags of earlier blocks are ignored."""
    earlier = JsDocBlock(description=None, tags=(JsDocTag("param", "a", "old"),))
    last = JsDocBlock(description=None, tags=(JsDocTag("param", "b", "new"),))
    assert resolve_param_descriptions([earlier, last]) == {"b": "new"}
