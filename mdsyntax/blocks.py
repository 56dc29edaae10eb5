"""Line-level recognisers for headings, thematic breaks and code fences.

Each function looks at one line whose leading indentation has already been
removed, as the block parser hands lines to its rules.
"""

from __future__ import annotations

from dataclasses import dataclass

_BLANK = " \t"
_MAX_HEADING_LEVEL = 6
_MIN_MARKERS = 3


@dataclass(frozen=True)
class FenceOpen:
    """The opening line of a fenced code block."""

    marker: str
    length: int
    info: str


def parse_atx_heading(line: str) -> tuple[int, str] | None:
    """Parse ``# title``-style headings into ``(level, text)``.

    Closing ``#`` runs preceded by whitespace are removed, as is the space
    around the text. Returns None if the line is not an ATX heading.
    """
    if not line.startswith("#"):
        return None

    level = len(line) - len(line.lstrip("#"))
    if level > _MAX_HEADING_LEVEL:
        return None

    rest = line[level:]
    if rest and rest[0] not in _BLANK:
        return None

    body = rest[1:]
    without_hashes = body.rstrip(_BLANK).rstrip("#")
    if not without_hashes:
        text = ""
    elif without_hashes[-1] in _BLANK:
        text = without_hashes
    else:
        # "## foo##": the trailing hashes belong to the text
        text = body
    return level, text.strip(_BLANK)


def parse_thematic_break(line: str) -> tuple[str, int] | None:
    """Parse ``***``, ``---`` or ``___`` into ``(marker, count)``.

    Markers may be separated by spaces or tabs; at least three are needed.
    """
    if not line or line[0] not in "*-_":
        return None

    marker = line[0]
    count = 1
    for ch in line[1:]:
        if ch == marker:
            count += 1
        elif ch not in _BLANK:
            return None

    if count < _MIN_MARKERS:
        return None
    return marker, count


def parse_fence_open(line: str) -> FenceOpen | None:
    """Parse the opening line of a ````` or ``~~~`` code fence."""
    if not line or line[0] not in "`~":
        return None

    marker = line[0]
    length = len(line) - len(line.lstrip(marker))
    if length < _MIN_MARKERS:
        return None

    info = line[length:]
    if marker == "`" and marker in info:
        return None
    return FenceOpen(marker, length, info)


def is_fence_close(line: str, marker: str, length: int) -> bool:
    """Whether ``line`` closes a fence opened with ``length`` ``marker`` characters."""
    if not line.startswith(marker):
        return False

    run = len(line) - len(line.lstrip(marker))
    if run < length:
        return False
    return not line[run:].strip(_BLANK)


def setext_underline_level(line: str) -> int | None:
    """Return 1 for an ``===`` underline, 2 for ``---``, None otherwise."""
    if not line or line[0] not in "=-":
        return None

    marker = line[0]
    if line.lstrip(marker).strip(_BLANK):
        return None
    return 1 if marker == "=" else 2