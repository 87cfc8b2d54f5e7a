"""Fenced code blocks for TypeScript snippets."""

import re

DEFAULT_LANG = "typescript"
_BACKTICK_RUN_RE = re.compile(r"`+")


def md_codeblock(code: str, lang: str = DEFAULT_LANG) -> str:
    """Wrap ``code`` in a fenced block tagged with ``lang``.

    The fence is at least three backticks and always longer than any backtick
    run inside ``code``, so template literal types cannot close it early.
    """
    longest = max((len(m) for m in _BACKTICK_RUN_RE.findall(code)), default=0)
    fence = "`" * max(3, longest + 1)
    return f"{fence}{lang}\n{code.rstrip()}\n{fence}"
