# mdsyntax

This package provides small building blocks for recognising Markdown syntax. Each module handles one part of CommonMark or GitHub-flavoured Markdown. The modules do not depend on each other, so you can use any one of them on its own. The package has no runtime dependencies.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

### `mdsyntax.html`: raw HTML

- `match_html_tag(src)` returns the tag at the start of `src`, or `None`. It recognises an open tag, a close tag, a comment, a processing instruction, a declaration or a CDATA section.
- `scan_html_inline(src)` does the same check for inline HTML. It first requires `<` followed by `!`, `?`, `/` or an ASCII letter.
- `is_link_open(tag)` and `is_link_close(tag)` tell whether a tag opens or closes an `<a>` element.
- `HtmlSequence` describes one kind of HTML block:
  - `open` and `close` are its patterns.
  - `can_terminate_paragraph` says whether this kind of block may interrupt a paragraph.
  - The methods `opens(line)` and `closes(line)` test a line against the two patterns.
- `HTML_SEQUENCES` lists the seven block kinds in the order they are tried, and `HTML_BLOCKS` holds the block-level tag names.
- `find_html_block_sequence(line)` returns the first sequence that the line opens, or `None`.
- `html_block_length(lines)` counts how many lines the HTML block opened by the first line covers. It returns `None` when the first line opens no block.

### `mdsyntax.typographer`: typographic replacements

- `replace_abbreviations(text)` turns `(c)`, `(r)` and `(tm)` into `©`, `®` and `™`. The match ignores case.
- `typographize(text)` applies the abbreviations and the following replacements:
  - `..` or more becomes `…`, except that `?...` becomes `?..` and `!...` becomes `!..`.
  - `+-` becomes `±`.
  - Runs of four or more `?` or `!` are cut to three.
  - Repeated commas become one comma.
  - `---` becomes an em dash and `--` becomes an en dash.

### `mdsyntax.slugify`: heading anchors

- `simple_slugify(text)` lower-cases ASCII letters, keeps other alphanumeric characters as they are, and replaces every other character with `-`.

### `mdsyntax.tables`: GFM tables

- `scan_row(line)` splits a table row into a list of `RowContent` cells. It also:
  - handles `\|` escapes;
  - trims spaces and tabs around each cell;
  - drops an empty first cell and an empty last cell.
- Each `RowContent` cell has two fields:
  - `text` is the cell's content.
  - `srcmap` holds `(position in text, position in line)` pairs that map the text back to the source line.
- `scan_alignment_row(line)` parses a delimiter row into a list of `ColumnAlignment` values (`NONE`, `LEFT`, `RIGHT`, `CENTER`). It returns `None` if the line is not a delimiter row.
- `ColumnAlignment.style()` gives the CSS value for an alignment, such as `"text-align:left"`. It returns `None` for `NONE`.

### `mdsyntax.smartquotes`: curly quotes

Describe the document as a flat sequence of tokens in document order:

- `TextToken(content, level)` is text whose quotes may be replaced.
- `HtmlToken(content)` is inline HTML. Its characters are read when deciding about neighbouring quotes, but it is never changed.
- `LineBreak()` stands for a paragraph boundary or a line break, and counts as a space.
- `Irrelevant()` is any other node. It is skipped.

Functions:

- `smarten(tokens, quotes=None)` returns the tokens with the quotes in text tokens replaced.
  - Unpaired single quotes inside words become `’`.
  - A `QuoteSet` chooses the opening and closing characters. The default is `‘ ’ “ ”`.
- The two steps are also available separately:
  - `compute_replacements(tokens, quotes=None)` returns a map from token index to `{character position: replacement}`.
  - `apply_replacements(content, replacements)` applies one such map to a string.
- `find_quotes(content)` yields the position and `QuoteType` of every straight quote.
- `can_open_or_close(quote_type, last_char, next_char)` decides whether a quote between two characters can open or close a pair.

### `mdsyntax.blocks`: block markers

These functions take a line whose leading indentation has already been removed.

- `parse_atx_heading(line)` returns `(level, text)` for `#` headings, with closing `#` runs removed.
- `parse_thematic_break(line)` returns `(marker, count)` for `***`, `---` or `___`. Spaces and tabs may appear between the markers.
- `parse_fence_open(line)` returns a `FenceOpen` with `marker`, `length` and `info`.
- `is_fence_close(line, marker, length)` checks for a matching closing fence.
- `setext_underline_level(line)` returns 1 for an `===` underline, 2 for `---`, and `None` otherwise.

### `mdsyntax.lists`: list markers

- `skip_bullet_list_marker(src)` returns the position after a `-`, `+` or `*` marker, or `None`.
- `skip_ordered_list_marker(src)` does the same for an ordered marker: up to nine digits followed by `.` or `)`.
- `find_list_marker(line, terminating_paragraph=False)` returns a `ListMarker`:
  - Its fields are `pos_after_marker`, `value` and `marker`. `value` is `None` for bullets.
  - The property `ordered` tells whether the marker is an ordered one.
  - When `terminating_paragraph` is true, an ordered list must start at 1 and the item must not be empty.

### `mdsyntax.inline`: inline constructs

Each parser looks at the start of `src` and returns an `InlineMatch` (`kind`, `content`, `markup`, `length`, `url`), or `None`.

- `parse_entity(src)` handles named and numeric character references. Invalid code points become U+FFFD.
- `parse_escape(src)` handles backslash escapes. A backslash before a newline gives a `hardbreak` match.
- `parse_autolink(src)` handles `<scheme:...>` and `<address@host>`. E-mail addresses get a `mailto:` URL.

## Example

```python
from mdsyntax.typographer import typographize
from mdsyntax.tables import scan_alignment_row
from mdsyntax.slugify import simple_slugify
from mdsyntax.smartquotes import TextToken, smarten

typographize("Wait... (c) 2024 -- done")  # "Wait… © 2024 – done"
scan_alignment_row("| :--- | ---: | :-: |")   # [LEFT, RIGHT, CENTER]
simple_slugify("An example heading")        # "an-example-heading"
smarten([TextToken("'hello' \"world\"", 0)])  # [TextToken("‘hello’ “world”", 0)]
```

## What this package does not do

This package is not a Markdown parser or renderer. It does not:

- build a document tree from Markdown text;
- produce HTML output;
- handle paragraphs, block quotes, emphasis, links or images;
- keep link reference definitions.

It also has no command-line tool. Its functions recognise individual constructs, and the caller combines the results.