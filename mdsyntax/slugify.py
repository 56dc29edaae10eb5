"""A minimal slug generator for heading anchors."""

from __future__ import annotations


def simple_slugify(text: str) -> str:
    """Lower-case ASCII letters and turn every non-alphanumeric character into '-'."""
    return "".join(
        (ch.lower() if ch.isascii() else ch) if ch.isalnum() else "-" for ch in text
    )