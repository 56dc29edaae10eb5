import pytest

from mdsyntax.html import (
    HTML_BLOCKS,
    HTML_SEQUENCES,
    find_html_block_sequence,
    html_block_length,
    is_link_close,
    is_link_open,
    match_html_tag,
    scan_html_inline,
)


@pytest.mark.parametrize(
    "tag",
    [
        '<a href="x">',
        "<a href='x' title=y>",
        "<br/>",
        "<input disabled >",
        "</div >",
        "<!---->",
        "<!-- comment -->",
        "<?php echo 1; ?>",
        "<!DOCTYPE html>",
        "<![CDATA[ x < y ]]>",
    ],
)
def test_match_html_tag_returns_leading_tag(tag):
    assert match_html_tag(tag + " trailing text") == tag


@pytest.mark.parametrize(
    "src",
    ["<1a>", "<a", "< a>", "<!-- a -- b -->", "<a href=>", "plain"],
)
def test_match_html_tag_rejects(src):
    assert match_html_tag(src) is None


def test_scan_html_inline_from_paragraph():
    src = "<br>world"
    assert scan_html_inline(src) == src[:4]


@pytest.mark.parametrize("src", ["a<br>", "<", "<1>", "< br>", ""])
def test_scan_html_inline_quick_fail(src):
    assert scan_html_inline(src) is None


def test_link_open_and_close():
    assert is_link_open("<a href='x'>")
    assert is_link_open("<a>")
    assert not is_link_open("<abbr>")
    assert is_link_close("</a>")
    assert is_link_close("</a >")
    assert not is_link_close("</abbr>")


@pytest.mark.parametrize(
    "line, index",
    [
        ("<script>", 0),
        ("<TEXTAREA", 0),
        ("<!-- note", 1),
        ("<?xml", 2),
        ("<!DOCTYPE html>", 3),
        ("<![CDATA[", 4),
        ("<div>", 5),
        ("<DIV class='x'>", 5),
        ("</table>", 5),
        ("<span>", 6),
        ("</span>  ", 6),
    ],
)
def test_find_html_block_sequence(line, index):
    assert find_html_block_sequence(line) is HTML_SEQUENCES[index]


@pytest.mark.parametrize("line", ["text", "<span> text", "<1>", " <div>"])
def test_find_html_block_sequence_none(line):
    assert find_html_block_sequence(line) is None


@pytest.mark.parametrize(
    "line, can_interrupt",
    [
        ("<script>", True),
        ("<!-- note", True),
        ("<?xml", True),
        ("<!DOCTYPE html>", True),
        ("<![CDATA[", True),
        ("<div>", True),
        ("<span>", False),
        ("</span>", False),
    ],
)
def test_only_generic_tags_cannot_interrupt_paragraph(line, can_interrupt):
    sequence = find_html_block_sequence(line)
    assert sequence.can_terminate_paragraph is can_interrupt


def test_block_names_in_sequence():
    for name in HTML_BLOCKS:
        assert find_html_block_sequence(f"<{name}>") is HTML_SEQUENCES[5]


def test_block_ends_before_empty_line():
    lines = ["<div>", "hello", "", "after"]
    assert html_block_length(lines) == lines.index("")


def test_block_ends_on_closing_line_inclusive():
    lines = ["<!-- a", "b -->", "c"]
    assert html_block_length(lines) == len(lines) - 1


def test_block_closed_on_first_line():
    lines = ["<script>x</script>", "after"]
    assert html_block_length(lines) == len(lines) - 1


def test_unclosed_block_runs_to_end():
    lines = ["<pre>", "x", "y"]
    assert html_block_length(lines) == len(lines)


def test_block_length_without_block():
    assert html_block_length(["not html"]) is None
    assert html_block_length([]) is None