"""Utility for generating Markdown code blocks."""

import re

FENCE_RE = re.compile(r"^`{3,}", re.MULTILINE)


def md_codeblock(lang: str, code: str) -> str:
    """Generate a fenced code block, widening the fence if the code has one."""
    longest = max((len(m.group(0)) for m in FENCE_RE.finditer(code)), default=2)
    fence = "`" * max(3, longest + 1)
    return f"{fence}{lang}\n{code.rstrip()}\n{fence}"
