"""Typographic replacements: dashes, ellipses, and the ©, ® and ™ symbols."""

from __future__ import annotations

import re

_REPLACEMENTS: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"\+-"), "\u00b1"),
    (re.compile(r"\.{2,}"), "\u2026"),
    (re.compile(r"([?!])\u2026"), r"\1.."),
    (re.compile(r"([?!]){4,}"), r"\1\1\1"),
    (re.compile(r",{2,}"), ","),
    (
        re.compile(r"(?m)(?P<pre>^|[^-])---(?P<post>[^-]|$)"),
        "\\g<pre>\u2014\\g<post>",
    ),
    (
        re.compile(r"(?m)(?P<pre>^|\s)--(?P<post>\s|$)"),
        "\\g<pre>\u2013\\g<post>",
    ),
    (
        re.compile(r"(?m)(?P<pre>^|[^-\s])--(?P<post>[^-\s]|$)"),
        "\\g<pre>\u2013\\g<post>",
    ),
)

_SCOPED_RE = re.compile(r"\((c|tm|r)\)", re.IGNORECASE)
_RARE_RE = re.compile(r"\+-|\.\.|\?\?\?\?|!!!!|,,|--")

_ABBREVIATIONS = {"(c)": "\u00a9", "(r)": "\u00ae", "(tm)": "\u2122"}


def replace_abbreviations(text: str) -> str:
    """Replace ``(c)``, ``(r)`` and ``(tm)`` in any case with their symbols."""
    return _SCOPED_RE.sub(lambda m: _ABBREVIATIONS[m.group(0).lower()], text)


def typographize(text: str) -> str:
    """Apply all typographic replacements to a piece of text."""
    text = replace_abbreviations(text)
    if not _RARE_RE.search(text):
        return text
    for pattern, replacement in _REPLACEMENTS:
        text, count = pattern.subn(replacement, text)
        if count:
            # The dash patterns consume their neighbours, so overlapping
            # matches need a second pass.
            text = pattern.sub(replacement, text)
    return text