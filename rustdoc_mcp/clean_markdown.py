"""Newline normalization for converted Markdown."""

MAX_NEWLINES = 2


def clean_markdown(markdown: str) -> str:
    """Collapse every run of three or more newlines down to two.

    All other characters, including whitespace, pass through untouched.
    """
    out: list[str] = []
    run = 0
    for c in markdown:
        if c == "\n":
            run += 1
            if run > MAX_NEWLINES:
                continue
        else:
            run = 0
        out.append(c)
    return "".join(out)
