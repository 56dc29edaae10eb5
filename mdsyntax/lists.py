"""Recognition of bullet and ordered list markers."""

from __future__ import annotations

from dataclasses import dataclass

_BLANK = " \t"
_BULLETS = "*-+"
_ORDERED_DELIMITERS = ".)"
_MAX_ORDERED_DIGITS = 9


@dataclass(frozen=True)
class ListMarker:
    """A list marker found at the start of a line.

    ``pos_after_marker`` is the index just past the marker, ``value`` is the
    number of an ordered marker (None for bullets) and ``marker`` is the
    character that identifies the list style (``-``, ``+``, ``*``, ``.`` or
    ``)``).
    """

    pos_after_marker: int
    value: int | None
    marker: str

    @property
    def ordered(self) -> bool:
        return self.value is not None


def _followed_by_blank_or_end(src: str, pos: int) -> bool:
    return pos >= len(src) or src[pos] in _BLANK


def skip_bullet_list_marker(src: str) -> int | None:
    """Match ``[-+*]`` followed by a space, a tab or the end of line.

    Returns the position after the marker, or None.
    """
    if not src or src[0] not in _BULLETS:
        return None
    if not _followed_by_blank_or_end(src, 1):
        # "-test" is not a list item
        return None
    return 1


def skip_ordered_list_marker(src: str) -> int | None:
    """Match up to nine digits, then ``.`` or ``)``, then a blank or end of line.

    Returns the position after the marker, or None.
    """
    digits = len(src) - len(src.lstrip("0123456789"))
    if digits == 0 or digits > _MAX_ORDERED_DIGITS:
        return None
    if digits >= len(src) or src[digits] not in _ORDERED_DELIMITERS:
        return None
    pos = digits + 1
    if not _followed_by_blank_or_end(src, pos):
        # "1.test" is not a list item
        return None
    return pos


def find_list_marker(line: str, terminating_paragraph: bool = False) -> ListMarker | None:
    """Find the list marker that ``line`` starts with.

    When ``terminating_paragraph`` is true the list would interrupt a
    paragraph, so an ordered list must start at 1 and the item must not be
    empty.
    """
    pos = skip_ordered_list_marker(line)
    if pos is not None:
        value: int | None = int(line[: pos - 1])
        if terminating_paragraph and value != 1:
            return None
    else:
        pos = skip_bullet_list_marker(line)
        if pos is None:
            return None
        value = None

    if terminating_paragraph and not line[pos:].strip(_BLANK):
        return None

    return ListMarker(pos, value, line[pos - 1])