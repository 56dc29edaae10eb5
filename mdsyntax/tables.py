"""Cell splitting and alignment detection for GFM tables."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field


class ColumnAlignment(enum.IntEnum):
    """Alignment of a table column, as declared in the delimiter row."""

    NONE = 0
    LEFT = 1
    RIGHT = 2
    CENTER = 3

    def style(self) -> str | None:
        """Return the CSS ``style`` value for this alignment, or None."""
        if self is ColumnAlignment.NONE:
            return None
        return f"text-align:{self.name.lower()}"


@dataclass
class RowContent:
    """Text of one cell, with its mapping back into the source line.

    ``srcmap`` holds ``(position in text, position in line)`` pairs, one for
    each place where the text and the line stop lining up.
    """

    text: str
    srcmap: list[tuple[int, int]] = field(default_factory=list)


def scan_row(line: str) -> list[RowContent]:
    """Split a table row into cells, handling ``\\|`` escapes and trimming."""
    result: list[RowContent] = []
    text = ""
    srcmap: list[tuple[int, int]] = [(0, 0)]
    is_escaped = False
    is_leading = True

    for pos, ch in enumerate(line):
        if ch in " \t" and is_leading:
            dst, src = srcmap[0]
            srcmap[0] = (dst, src + 1)
        elif ch == "|":
            is_leading = False
            if is_escaped:
                text += line[srcmap[-1][1]:pos - 1]
                srcmap.append((len(text), pos))
            else:
                text += line[srcmap[-1][1]:pos]
                result.append(RowContent(text, srcmap))
                text = ""
                srcmap = [(0, pos + 1)]
                is_escaped = False
                is_leading = True
        elif ch == "\\":
            is_leading = False
            is_escaped = True
        else:
            is_leading = False
            is_escaped = False

    text += line[srcmap[-1][1]:]
    result.append(RowContent(text, srcmap))

    for content in result:
        content.text = content.text.rstrip(" \t")

    if result and not result[-1].text:
        result.pop()
    if result and not result[0].text:
        result.pop(0)

    return result


def scan_alignment_row(line: str) -> list[ColumnAlignment] | None:
    """Parse a delimiter row like ``| :-- | --: |``; None if it is not one."""
    has_delimiter = False
    for ch in line:
        if ch in "|:":
            has_delimiter = True
        elif ch not in "- \t":
            return None
    if not has_delimiter:
        return None

    # A leading "- " would be ambiguous with a list item.
    if line.startswith("- "):
        return None

    alignments: list[ColumnAlignment] = []
    for content in scan_row(line):
        bits = 0
        cell = content.text
        if cell.startswith(":"):
            bits |= 1
            cell = cell[1:]
        if cell.endswith(":"):
            bits |= 2
            cell = cell[:-1]
        if not cell or cell.strip("-"):
            return None
        alignments.append(ColumnAlignment(bits))
    return alignments