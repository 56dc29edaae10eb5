"""Recognition of raw HTML: inline tags and HTML blocks."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass

_ATTR_NAME = r"[a-zA-Z_:][a-zA-Z0-9:._-]*"
_UNQUOTED = r"""[^"'=<>`\x00-\x20]+"""
_SINGLE_QUOTED = r"'[^']*'"
_DOUBLE_QUOTED = r'"[^"]*"'
_ATTR_VALUE = f"(?:{_UNQUOTED}|{_SINGLE_QUOTED}|{_DOUBLE_QUOTED})"
_ATTRIBUTE = rf"(?:\s+{_ATTR_NAME}(?:\s*=\s*{_ATTR_VALUE})?)"
_OPEN_TAG = rf"<[A-Za-z][A-Za-z0-9\-]*{_ATTRIBUTE}*\s*/?>"
_CLOSE_TAG = r"</[A-Za-z][A-Za-z0-9\-]*\s*>"
_COMMENT = r"<!---->|<!--(?:-?[^>-])(?:-?[^-])*-->"
_PROCESSING = r"<[?][\s\S]*?[?]>"
_DECLARATION = r"<![A-Z]+\s+[^>]*>"
_CDATA = r"<!\[CDATA\[[\s\S]*?\]\]>"

HTML_TAG_RE = re.compile(
    rf"(?:{_OPEN_TAG}|{_CLOSE_TAG}|{_COMMENT}|{_PROCESSING}|{_DECLARATION}|{_CDATA})"
)
_OPEN_CLOSE_TAG = rf"^(?:{_OPEN_TAG}|{_CLOSE_TAG})"

_LINK_OPEN_RE = re.compile(r"<a[>\s]")
_LINK_CLOSE_RE = re.compile(r"</a\s*>")

HTML_BLOCKS = (
    "address", "article", "aside", "base", "basefont", "blockquote", "body",
    "caption", "center", "col", "colgroup", "dd", "details", "dialog", "dir",
    "div", "dl", "dt", "fieldset", "figcaption", "figure", "footer", "form",
    "frame", "frameset", "h1", "h2", "h3", "h4", "h5", "h6", "head", "header",
    "hr", "html", "iframe", "legend", "li", "link", "main", "menu", "menuitem",
    "nav", "noframes", "ol", "optgroup", "option", "p", "param", "section",
    "source", "summary", "table", "tbody", "td", "tfoot", "th", "thead",
    "title", "tr", "track", "ul",
)


@dataclass(frozen=True)
class HtmlSequence:
    """An opening pattern of an HTML block and the pattern that ends it."""

    open: re.Pattern[str]
    close: re.Pattern[str]
    can_terminate_paragraph: bool

    def opens(self, line: str) -> bool:
        """Whether ``line`` starts a block of this kind."""
        return self.open.search(line) is not None

    def closes(self, line: str) -> bool:
        """Whether ``line`` ends a block of this kind."""
        return self.close.search(line) is not None


_EMPTY_LINE = re.compile(r"\A\Z")

HTML_SEQUENCES: tuple[HtmlSequence, ...] = (
    HtmlSequence(
        re.compile(r"^<(script|pre|style|textarea)(\s|>|\Z)", re.IGNORECASE),
        re.compile(r"</(script|pre|style|textarea)>", re.IGNORECASE),
        True,
    ),
    HtmlSequence(re.compile(r"^<!--"), re.compile(r"-->"), True),
    HtmlSequence(re.compile(r"^<\?"), re.compile(r"\?>"), True),
    HtmlSequence(re.compile(r"^<![A-Z]"), re.compile(r">"), True),
    HtmlSequence(re.compile(r"^<!\[CDATA\["), re.compile(r"\]\]>"), True),
    HtmlSequence(
        re.compile(rf"^</?({'|'.join(HTML_BLOCKS)})(\s|/?>|\Z)", re.IGNORECASE),
        _EMPTY_LINE,
        True,
    ),
    HtmlSequence(re.compile(rf"{_OPEN_CLOSE_TAG}\s*\Z"), _EMPTY_LINE, False),
)


def match_html_tag(src: str) -> str | None:
    """Return the HTML tag, comment, declaration or CDATA at the start of ``src``."""
    match = HTML_TAG_RE.match(src)
    return match.group(0) if match else None


def scan_html_inline(src: str) -> str | None:
    """Return the inline HTML that ``src`` starts with, if any."""
    if len(src) < 2 or src[0] != "<":
        return None
    second = src[1]
    if not (second in "!?/" or "a" <= second <= "z" or "A" <= second <= "Z"):
        return None
    return match_html_tag(src)


def is_link_open(tag: str) -> bool:
    """Whether ``tag`` opens an ``<a>`` element."""
    return _LINK_OPEN_RE.match(tag) is not None


def is_link_close(tag: str) -> bool:
    """Whether ``tag`` closes an ``<a>`` element."""
    return _LINK_CLOSE_RE.match(tag) is not None


def find_html_block_sequence(line: str) -> HtmlSequence | None:
    """Return the first block sequence that ``line`` opens."""
    if not line.startswith("<"):
        return None
    return next((seq for seq in HTML_SEQUENCES if seq.opens(line)), None)


def html_block_length(lines: Iterable[str]) -> int | None:
    """Count the lines of the HTML block opened by the first of ``lines``.

    Returns None when the first line does not open an HTML block.
    """
    lines = list(lines)
    if not lines:
        return None
    sequence = find_html_block_sequence(lines[0])
    if sequence is None:
        return None

    count = 1
    if not sequence.closes(lines[0]):
        for line in lines[1:]:
            if sequence.closes(line):
                if line:
                    count += 1
                break
            count += 1
    return count