"""Independent scanners for Markdown syntax: raw HTML, GFM tables, smart quotes,
typographic replacements, heading slugs, block and list markers, and inline
entities, escapes and autolinks."""

__version__ = "0.1.0"