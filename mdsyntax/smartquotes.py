"""Replacement of straight quotes with typographic ones.

The document is seen as a flat sequence of tokens in walk order. Text tokens
carry their nesting level; HTML tokens only lend their characters to the
neighbourhood checks; line breaks act as whitespace; everything else is
skipped. Replacements are computed over the whole sequence first and applied
afterwards, since closing a quote may change an earlier token.
"""

from __future__ import annotations

import dataclasses
import enum
import string
import unicodedata
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import Union

APOSTROPHE = "\u2019"
_SPACE = " "
_SINGLE_QUOTE = "'"
_DOUBLE_QUOTE = '"'

_WHITESPACE = frozenset(
    "\t\n\x0b\x0c\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)
_ASCII_PUNCTUATION = frozenset(string.punctuation)


class QuoteType(enum.Enum):
    """Kind of a straight quote."""

    SINGLE = _SINGLE_QUOTE
    DOUBLE = _DOUBLE_QUOTE


@dataclass(frozen=True)
class QuoteSet:
    """The characters that replace opening and closing quotes."""

    open_single: str = "\u2018"
    close_single: str = "\u2019"
    open_double: str = "\u201c"
    close_double: str = "\u201d"

    def opening(self, quote_type: QuoteType) -> str:
        return self.open_single if quote_type is QuoteType.SINGLE else self.open_double

    def closing(self, quote_type: QuoteType) -> str:
        return self.close_single if quote_type is QuoteType.SINGLE else self.close_double


@dataclass(frozen=True)
class TextToken:
    """Plain text whose quotes may be replaced."""

    content: str
    level: int


@dataclass(frozen=True)
class HtmlToken:
    """Inline HTML: read for neighbouring characters, never changed."""

    content: str


@dataclass(frozen=True)
class LineBreak:
    """A paragraph boundary or line break, seen as a space."""


@dataclass(frozen=True)
class Irrelevant:
    """Any other node, kept so indexes match the walk order."""


Token = Union[TextToken, HtmlToken, LineBreak, Irrelevant]


@dataclass
class _QuoteMarker:
    token_index: int
    position: int
    quote_type: QuoteType
    level: int


def _is_whitespace(ch: str) -> bool:
    return ch in _WHITESPACE


def _is_punctuation(ch: str) -> bool:
    return ch in _ASCII_PUNCTUATION or unicodedata.category(ch).startswith("P")


def find_quotes(content: str) -> Iterator[tuple[int, QuoteType]]:
    """Yield the position and kind of every straight quote in ``content``."""
    for position, ch in enumerate(content):
        if ch in (_SINGLE_QUOTE, _DOUBLE_QUOTE):
            yield position, QuoteType(ch)


def can_open_or_close(
    quote_type: QuoteType, last_char: str, next_char: str
) -> tuple[bool, bool]:
    """Decide whether a quote between two characters can open and/or close a pair."""
    # 1"" -> the first quote is an inch mark
    if quote_type is QuoteType.DOUBLE and next_char == _DOUBLE_QUOTE and "0" <= last_char <= "9":
        return False, False

    last_punct = _is_punctuation(last_char)
    next_punct = _is_punctuation(next_char)
    last_space = _is_whitespace(last_char)
    next_space = _is_whitespace(next_char)

    can_open = not next_space and (not next_punct or last_space or last_punct)
    can_close = not last_space and (not last_punct or next_space or next_punct)

    if can_open and can_close:
        # Replace inside punctuation runs, not inside words.
        return last_punct, next_punct
    return can_open, can_close


def _content_of(token: Token) -> str | None:
    if isinstance(token, (TextToken, HtmlToken)):
        return token.content
    return None


def _last_char_before(tokens: Sequence[Token], index: int, position: int) -> str:
    for idx in range(index, -1, -1):
        token = tokens[idx]
        if isinstance(token, LineBreak):
            return _SPACE
        content = _content_of(token)
        if content is None:
            continue
        end = position if idx == index else len(content)
        if end:
            return content[end - 1]
    return _SPACE


def _first_char_after(tokens: Sequence[Token], index: int, position: int) -> str:
    for idx in range(index, len(tokens)):
        token = tokens[idx]
        if isinstance(token, LineBreak):
            return _SPACE
        content = _content_of(token)
        if content is None:
            continue
        start = position + 1 if idx == index else 0
        if start < len(content):
            return content[start]
    return _SPACE


def _try_close(
    stack: list[_QuoteMarker], level: int, quote_type: QuoteType
) -> int | None:
    """Return the stack index of the quote that the current one closes."""
    for j in range(len(stack) - 1, -1, -1):
        other = stack[j]
        if other.level < level:
            return None
        if other.quote_type is quote_type and other.level == level:
            return j
    return None


def compute_replacements(
    tokens: Sequence[Token], quotes: QuoteSet | None = None
) -> dict[int, dict[int, str]]:
    """Map token index to a map of character position to replacement character."""
    quotes = quotes or QuoteSet()
    stack: list[_QuoteMarker] = []
    result: dict[int, dict[int, str]] = {}

    def put(token_index: int, position: int, ch: str) -> None:
        result.setdefault(token_index, {})[position] = ch

    for index, token in enumerate(tokens):
        if not isinstance(token, TextToken):
            continue
        level = token.level
        while stack and stack[-1].level > level:
            stack.pop()

        for position, quote_type in find_quotes(token.content):
            last_char = _last_char_before(tokens, index, position)
            next_char = _first_char_after(tokens, index, position)
            can_open, can_close = can_open_or_close(quote_type, last_char, next_char)

            if not can_open and not can_close:
                if quote_type is QuoteType.SINGLE:
                    put(index, position, APOSTROPHE)
                continue

            if can_close:
                j = _try_close(stack, level, quote_type)
                if j is not None:
                    opener = stack[j]
                    del stack[j:]
                    put(opener.token_index, opener.position, quotes.opening(quote_type))
                    put(index, position, quotes.closing(quote_type))
                    continue

            if can_open:
                stack.append(_QuoteMarker(index, position, quote_type, level))
            elif quote_type is QuoteType.SINGLE:
                put(index, position, APOSTROPHE)

    return result


def apply_replacements(content: str, replacements: dict[int, str]) -> str:
    """Replace the characters of ``content`` at the given positions."""
    return "".join(replacements.get(i, ch) for i, ch in enumerate(content))


def smarten(tokens: Sequence[Token], quotes: QuoteSet | None = None) -> list[Token]:
    """Return the tokens with straight quotes in text tokens made typographic."""
    replacements = compute_replacements(tokens, quotes)
    result: list[Token] = []
    for index, token in enumerate(tokens):
        ops = replacements.get(index)
        if ops and isinstance(token, TextToken):
            token = dataclasses.replace(
                token, content=apply_replacements(token.content, ops)
            )
        result.append(token)
    return result