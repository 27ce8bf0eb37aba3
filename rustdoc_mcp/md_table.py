"""Utility for generating Markdown tables."""


def _cell(text: str) -> str:
    return " ".join(text.split()).replace("|", "\\|")


def md_table(headers: list[str], rows: list[list[str]]) -> str:
    """Generate a Markdown table; short rows are padded to the header width."""
    if not rows:
        return ""
    width = len(headers)
    out = [
        "| " + " | ".join(_cell(h) for h in headers) + " |",
        "| " + " | ".join(["---"] * width) + " |",
    ]
    for r in rows:
        cells = [_cell(c) for c in r[:width]] + [""] * (width - len(r))
        out.append("| " + " | ".join(cells) + " |")
    return "\n".join(out)
