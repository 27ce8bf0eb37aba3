"""Convert rustdoc HTML fragments to Markdown.

The converter walks the BeautifulSoup tree and emits Markdown for the block and
inline elements rustdoc uses. Block elements surround their output with
newlines and leave it to ``clean_markdown`` to collapse the surplus, so handlers
never need to know what came before them.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable

from bs4 import BeautifulSoup, ParserRejectedMarkup
from bs4.element import NavigableString, PageElement, PreformattedString, Tag

from rustdoc_mcp.errors import ConversionFailedError
from rustdoc_mcp.md_codeblock import md_codeblock
from rustdoc_mcp.md_table import md_table

DEFAULT_SKIP_TAGS = ("script", "style", "button")

BLOCK_TAGS = frozenset(
    {
        "article",
        "aside",
        "details",
        "div",
        "figcaption",
        "figure",
        "footer",
        "header",
        "main",
        "nav",
        "section",
        "summary",
    }
)

WHITESPACE_RE = re.compile(r"\s+")


def _collapse(text: str) -> str:
    return " ".join(text.split())


def _join(parts: Iterable[str]) -> str:
    """Concatenate rendered parts, dropping indentation at line starts."""
    out: list[str] = []
    at_line_start = True
    for part in parts:
        if at_line_start:
            part = part.lstrip(" ")
        if not part:
            continue
        out.append(part)
        at_line_start = part.endswith("\n")
    return "".join(out)


def _code_language(pre: Tag) -> str:
    code = pre.find("code")
    classes = list(pre.get("class") or [])
    if isinstance(code, Tag):
        classes.extend(code.get("class") or [])
    for cls in classes:
        if cls.startswith("language-"):
            return cls.removeprefix("language-")
        if cls == "rust":
            return "rust"
    return ""


class MarkdownConverter:
    """Render HTML as Markdown, skipping non-content tags entirely."""

    def __init__(self, skip_tags: Iterable[str] | None = None) -> None:
        """Initialize the converter with the tags whose subtree is dropped."""
        self.skip_tags = frozenset(
            DEFAULT_SKIP_TAGS if skip_tags is None else skip_tags
        )
        self._handlers: dict[str, Callable[[Tag], str]] = {
            "a": self._link,
            "b": self._strong,
            "blockquote": self._blockquote,
            "br": lambda _tag: "\n",
            "code": self._inline_code,
            "dd": self._definition,
            "dl": self._block,
            "dt": self._term,
            "em": self._emphasis,
            "hr": lambda _tag: "\n\n---\n\n",
            "i": self._emphasis,
            "img": self._image,
            "ol": self._list,
            "p": self._paragraph,
            "pre": self._preformatted,
            "strong": self._strong,
            "table": self._table,
            "ul": self._list,
        }
        for level in range(1, 7):
            self._handlers[f"h{level}"] = self._heading

    def convert(self, markup: str) -> str:
        """Convert an HTML fragment (or document) to Markdown."""
        try:
            soup = BeautifulSoup(markup, "html.parser")
            body = self._children(soup)
        except (ParserRejectedMarkup, RecursionError) as exc:
            msg = f"HTML to Markdown conversion failed: {exc}"
            raise ConversionFailedError(msg) from exc
        text = "\n".join(line.rstrip() for line in body.split("\n")).strip("\n")
        return f"{text}\n" if text else ""

    def _children(self, tag: Tag) -> str:
        parts: list[str] = []
        # Bare <li> siblings, e.g. from the inner markup of a list.
        items: list[Tag] = []
        for child in tag.children:
            if isinstance(child, Tag) and child.name == "li":
                items.append(child)
                continue
            if items and isinstance(child, NavigableString) and not child.strip():
                continue
            if items:
                parts.append(self._items(items, ordered=False, nested=False))
                items = []
            parts.append(self._node(child))
        if items:
            parts.append(self._items(items, ordered=False, nested=False))
        return _join(parts)

    def _node(self, node: PageElement) -> str:
        # Comments, CDATA, doctypes and processing instructions.
        if isinstance(node, PreformattedString):
            return ""
        if isinstance(node, NavigableString):
            return WHITESPACE_RE.sub(" ", str(node))
        if not isinstance(node, Tag) or node.name in self.skip_tags:
            return ""
        handler = self._handlers.get(node.name)
        if handler is not None:
            return handler(node)
        if node.name in BLOCK_TAGS:
            return self._block(node)
        return self._children(node)

    def _block(self, tag: Tag) -> str:
        inner = self._children(tag)
        return f"\n{inner}\n" if inner.strip() else ""

    def _paragraph(self, tag: Tag) -> str:
        text = self._children(tag).strip()
        return f"\n\n{text}\n\n" if text else ""

    def _heading(self, tag: Tag) -> str:
        text = _collapse(self._children(tag))
        if not text:
            return ""
        return f"\n\n{'#' * int(tag.name[1])} {text}\n\n"

    def _term(self, tag: Tag) -> str:
        return f"{_collapse(self._children(tag))}:\n"

    def _definition(self, tag: Tag) -> str:
        return f"{self._children(tag).strip()}\n"

    def _preformatted(self, tag: Tag) -> str:
        code = tag.get_text()
        if not code.strip():
            return ""
        return f"\n\n{md_codeblock(_code_language(tag), code)}\n\n"

    def _inline_code(self, tag: Tag) -> str:
        text = _collapse(tag.get_text())
        if not text:
            return ""
        if "`" in text:
            return f"`` {text} ``"
        return f"`{text}`"

    def _emphasis(self, tag: Tag) -> str:
        text = self._children(tag).strip()
        return f"*{text}*" if text else ""

    def _strong(self, tag: Tag) -> str:
        text = self._children(tag).strip()
        return f"**{text}**" if text else ""

    def _link(self, tag: Tag) -> str:
        text = _collapse(self._children(tag))
        href = tag.get("href")
        if not text or not href:
            return text
        return f"[{text}]({href})"

    def _image(self, tag: Tag) -> str:
        alt = _collapse(str(tag.get("alt") or ""))
        src = tag.get("src")
        return f"![{alt}]({src})" if src else alt

    def _blockquote(self, tag: Tag) -> str:
        inner = self._children(tag).strip("\n")
        if not inner.strip():
            return ""
        quoted = [f"> {line}" if line.strip() else ">" for line in inner.split("\n")]
        return "\n\n" + "\n".join(quoted) + "\n\n"

    def _list(self, tag: Tag) -> str:
        return self._items(
            tag.find_all("li", recursive=False),
            ordered=tag.name == "ol",
            nested=tag.find_parent("li") is not None,
        )

    def _items(self, items: list[Tag], *, ordered: bool, nested: bool) -> str:
        lines: list[str] = []
        index = 1
        for item in items:
            body = self._children(item).strip()
            if not body:
                continue
            marker = f"{index}. " if ordered else "- "
            indent = " " * len(marker)
            first, *rest = body.split("\n")
            lines.append(marker + first)
            lines.extend(indent + line if line.strip() else "" for line in rest)
            index += 1
        if not lines:
            return ""
        # Nested lists stay attached to their parent item.
        edge = "\n" if nested else "\n\n"
        return edge + "\n".join(lines) + edge

    def _table(self, tag: Tag) -> str:
        rows = [
            [_collapse(self._children(cell)) for cell in tr.find_all(["th", "td"])]
            for tr in tag.find_all("tr")
        ]
        rows = [r for r in rows if r]
        if not rows:
            return ""
        header, body = rows[0], rows[1:]
        table = md_table(header, body) or " | ".join(header)
        return f"\n\n{table}\n\n"


def html_to_markdown(markup: str, skip_tags: Iterable[str] | None = None) -> str:
    """Convert ``markup`` to Markdown with a one-off converter."""
    return MarkdownConverter(skip_tags).convert(markup)
