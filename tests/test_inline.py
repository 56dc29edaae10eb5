import pytest

from mdsyntax.inline import InlineMatch, parse_autolink, parse_entity, parse_escape


def test_named_entity():
    match = parse_entity("&amp; rest")
    assert match == InlineMatch("entity", "&", "&amp;", len("&amp;"))


def test_named_entity_unknown():
    assert parse_entity("&nosuchentity;") is None


def test_named_entity_needs_semicolon():
    assert parse_entity("&amp rest") is None


def test_decimal_entity():
    match = parse_entity("&#35;")
    assert match.content == "#"
    assert match.markup == "&#35;"
    assert match.length == len("&#35;")


@pytest.mark.parametrize("src", ["&#x22;", "&#X22;"])
def test_hex_entity(src):
    assert parse_entity(src).content == '"'


@pytest.mark.parametrize("src", ["&#0;", "&#xD800;", "&#x110000;"])
def test_invalid_code_gives_replacement_character(src):
    assert parse_entity(src).content == "\ufffd"


@pytest.mark.parametrize("src", ["&#12345678;", "&#x1234567;", "&#;", "amp;", ""])
def test_entity_rejected(src):
    assert parse_entity(src) is None


@pytest.mark.parametrize("ch", list("\\!\"#*[]_`~-"))
def test_escape_punctuation(ch):
    match = parse_escape("\\" + ch + "tail")
    assert match.kind == "escape"
    assert match.content == ch
    assert match.markup == "\\" + ch
    assert match.length == 2


def test_escape_other_char_keeps_backslash():
    match = parse_escape("\\a")
    assert match.content == "\\a"
    assert match.markup == "\\a"


def test_escape_newline_is_hardbreak():
    match = parse_escape("\\\n  \tnext")
    assert match.kind == "hardbreak"
    assert match.length == len("\\\n  \t")


@pytest.mark.parametrize("src", ["\\", "", "x\\*"])
def test_escape_rejected(src):
    assert parse_escape(src) is None


def test_autolink_url():
    match = parse_autolink("<https://example.com/path> after")
    assert match.kind == "autolink"
    assert match.url == "https://example.com/path"
    assert match.content == "https://example.com/path"
    assert match.length == len("<https://example.com/path>")


def test_autolink_email():
    match = parse_autolink("<user@example.com>")
    assert match.url == "mailto:user@example.com"
    assert match.content == "user@example.com"


@pytest.mark.parametrize(
    "src",
    ["<foo bar>", "<https://example.com", "<a<b>", "<m:abc>", "<>", "https://example.com>"],
)
def test_autolink_rejected(src):
    assert parse_autolink(src) is None