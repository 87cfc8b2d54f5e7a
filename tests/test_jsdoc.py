"""Tests for JSDoc comment parsing."""

from types_not_docs.jsdoc import JsDocTag, is_jsdoc_comment, parse_jsdoc


def test_is_jsdoc_comment() -> None:
    """Only /** ... */ comments are documentation blocks."""
    assert is_jsdoc_comment("/** Docs */")
    assert is_jsdoc_comment("/**\n * Docs\n */")
    assert not is_jsdoc_comment("/* plain */")
    assert not is_jsdoc_comment("// line")
    assert not is_jsdoc_comment("/**/")


def test_single_line_block() -> None:
    """Verify the summary of a one-line block."""
    block = parse_jsdoc("/** The token's display name */")
    assert block.description == "The token's display name"
    assert block.tags == ()


def test_multi_line_summary_keeps_paragraphs() -> None:
    """Verify star prefixes are removed and blank lines preserved."""
    block = parse_jsdoc(
        "/**\n"
        " * Token metadata information.\n"
        " * \n"
        " * Second paragraph.\n"
        " */"
    )
    assert block.description == "Token metadata information.\n\nSecond paragraph."


def test_tags_end_the_summary() -> None:
    """Verify tags are split from the summary and parsed."""
    block = parse_jsdoc(
        "/**\n"
        " * Fetches token metadata from the chain.\n"
        " *\n"
        " * @param rpc - The RPC client instance\n"
        " * @param {string} mint - The mint address\n"
        " * @param [mode=allowlist] Optional mode\n"
        " * @returns Promise with the token metadata\n"
        " */"
    )
    assert block.description == "Fetches token metadata from the chain."
    assert block.tags == (
        JsDocTag("param", "rpc", "- The RPC client instance"),
        JsDocTag("param", "mint", "- The mint address"),
        JsDocTag("param", "mode", "Optional mode"),
        JsDocTag("returns", None, "Promise with the token metadata"),
    )


def test_param_tag_with_nested_braces_and_no_comment() -> None:
    """Verify braced types are skipped and empty comments become None."""
    block = parse_jsdoc("/**\n * @param {{a: string}} input\n */")
    assert block.description is None
    assert block.tags == (JsDocTag("param", "input", None),)


def test_tag_continuation_lines() -> None:
    """Verify a tag's comment spans following lines."""
    block = parse_jsdoc(
        "/**\n * @param x - first line\n *   second line\n * @returns nothing\n */"
    )
    comment = block.tags[0].comment
    assert comment is not None
    assert comment.startswith("- first line")
    assert "second line" in comment
    assert block.tags[1].tag_name == "returns"


def test_double_star_closer() -> None:
    """Verify a `**/` closer leaves no stray asterisk."""
    assert parse_jsdoc("/** foo **/").description == "foo"
    assert parse_jsdoc("/**\n * Bar.\n **/").description == "Bar."


def test_bracketed_default_containing_brackets() -> None:
    """Verify the optional-name bracket is matched, not cut at the first `]`."""
    block = parse_jsdoc("/** @param [arr=[1, [2]]] - The items */")
    assert block.tags == (JsDocTag("param", "arr", "- The items"),)
