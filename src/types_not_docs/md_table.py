"""Utility for generating Markdown tables."""


def escape_table_text(text: str) -> str:
    """Escape pipe characters so text can sit inside a table cell."""
    return text.replace("|", "\\|")


def md_table(headers: list[str], rows: list[list[str]]) -> str:
    """Generate a Markdown table.

    Each separator cell is two dashes wider than its header.
    """
    if not rows:
        return ""
    out = [
        "| " + " | ".join(headers) + " |",
        "|" + "|".join("-" * (len(h) + 2) for h in headers) + "|",
    ]
    out.extend("| " + " | ".join(r) + " |" for r in rows)
    return "\n".join(out)
