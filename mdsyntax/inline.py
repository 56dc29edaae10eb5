"""Inline recognisers: entities, backslash escapes and autolinks."""

from __future__ import annotations

import re
from dataclasses import dataclass
from html.entities import html5

_REPLACEMENT_CHARACTER = "\ufffd"

_DIGITAL_RE = re.compile(r"&#((?:x[a-f0-9]{1,6}|[0-9]{1,7}));", re.IGNORECASE)
_NAMED_RE = re.compile(r"&([a-z][a-z0-9]{1,31});", re.IGNORECASE)

_AUTOLINK_RE = re.compile(r"([a-zA-Z][a-zA-Z0-9+.\-]{1,31}):([^<>\x00-\x20]*)")
_EMAIL_RE = re.compile(
    r"([a-zA-Z0-9.!#$%&'*+/=?^_`{|}~-]+@[a-zA-Z0-9]"
    r"(?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?"
    r"(?:\.[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?)*)"
)

_ESCAPABLE = frozenset("\\!\"#$%&'()*+,./:;<=>?@[]^_`{|}~-")


@dataclass(frozen=True)
class InlineMatch:
    """A piece of inline syntax found at the start of the input.

    ``kind`` is one of ``entity``, ``escape``, ``hardbreak`` or ``autolink``;
    ``content`` is the text it stands for, ``markup`` the source text, and
    ``length`` the number of characters consumed. ``url`` is set for
    autolinks only.
    """

    kind: str
    content: str
    markup: str
    length: int
    url: str | None = None


def _is_valid_entity_code(code: int) -> bool:
    if 0xD800 <= code <= 0xDFFF or 0xFDD0 <= code <= 0xFDEF:
        return False
    if code & 0xFFFF in (0xFFFE, 0xFFFF):
        return False
    if code <= 0x08 or code == 0x0B or 0x0E <= code <= 0x1F or 0x7F <= code <= 0x9F:
        return False
    return code <= 0x10FFFF


def _parse_digital_entity(src: str) -> InlineMatch | None:
    match = _DIGITAL_RE.match(src)
    if match is None:
        return None
    entity = match.group(1)
    if entity[0] in "xX":
        code = int(entity[1:], 16)
    else:
        code = int(entity, 10)
    content = chr(code) if _is_valid_entity_code(code) else _REPLACEMENT_CHARACTER
    markup = match.group(0)
    return InlineMatch("entity", content, markup, len(markup))


def _parse_named_entity(src: str) -> InlineMatch | None:
    match = _NAMED_RE.match(src)
    if match is None:
        return None
    markup = match.group(0)
    content = html5.get(markup[1:])
    if content is None:
        return None
    return InlineMatch("entity", content, markup, len(markup))


def parse_entity(src: str) -> InlineMatch | None:
    """Parse a named or numeric character reference at the start of ``src``."""
    if not src.startswith("&"):
        return None
    if src.startswith("&#"):
        return _parse_digital_entity(src)
    return _parse_named_entity(src)


def parse_escape(src: str) -> InlineMatch | None:
    """Parse a backslash escape, or a backslash hard break, at the start of ``src``."""
    if len(src) < 2 or src[0] != "\\":
        return None

    ch = src[1]
    if ch == "\n":
        # skip leading whitespace on the next line
        rest = src[2:]
        length = 2 + len(rest) - len(rest.lstrip(" \t"))
        return InlineMatch("hardbreak", "", src[:length], length)

    markup = "\\" + ch
    content = ch if ch in _ESCAPABLE else markup
    return InlineMatch("escape", content, markup, len(markup))


def parse_autolink(src: str) -> InlineMatch | None:
    """Parse ``<scheme:...>`` or ``<address@host>`` at the start of ``src``."""
    if not src.startswith("<"):
        return None

    for end, ch in enumerate(src[1:], start=1):
        if ch == "<":
            return None
        if ch == ">":
            break
    else:
        return None

    url = src[1:end]
    if _AUTOLINK_RE.fullmatch(url):
        full_url = url
    elif _EMAIL_RE.fullmatch(url):
        full_url = "mailto:" + url
    else:
        return None

    return InlineMatch("autolink", url, url, end + 1, full_url)