"""Tests for path sanitization."""

import pytest

from spalink.core.sanitize import sanitize


@pytest.mark.parametrize("raw", [None, "", "   ", "\t\n", '""', "''", " / "])
def test_sanitize_empty_values(raw):
    """Test empty or separator-only input becomes None."""
    assert sanitize(raw) is None


def test_sanitize_trims_whitespace():
    """Test surrounding whitespace is removed."""
    assert sanitize("  /home/dev/lib  ") == "/home/dev/lib"


def test_sanitize_strips_matching_quotes_and_trailing_separator():
    """Test a quoted Windows path with a trailing backslash."""
    assert sanitize('"C:\\a\\b\\"') == "C:\\a\\b"
    assert sanitize("'C:\\a\\b'") == "C:\\a\\b"


def test_sanitize_keeps_mismatched_quotes():
    """Test quotes of different kinds are left in place."""
    assert sanitize("\"C:\\a\\b'") == "\"C:\\a\\b'"


def test_sanitize_keeps_single_quote_character():
    """Test a lone quote is not treated as a pair."""
    assert sanitize('"') == '"'


def test_sanitize_smart_double_quotes():
    """Test smart double quotes behave like plain ones."""
    assert sanitize("\u201cC:\\dev\\lib\u201d") == sanitize('"C:\\dev\\lib"')
    assert sanitize("\u201cC:\\dev\\lib\u201d") == "C:\\dev\\lib"


def test_sanitize_smart_single_quotes():
    """Test smart single quotes behave like plain ones."""
    assert sanitize("\u2018/srv/app\u2019") == "/srv/app"


def test_sanitize_strips_trailing_separators():
    """Test any run of trailing slashes and backslashes is removed."""
    assert sanitize("/home/dev/lib//\\/") == "/home/dev/lib"
    assert sanitize("C:\\dev\\lib\\ ") == "C:\\dev\\lib"


def test_sanitize_keeps_inner_separators():
    """Test only trailing separators are removed."""
    assert sanitize("//server/share/dir") == "//server/share/dir"


@pytest.mark.parametrize(
    "raw",
    [
        '"C:\\a\\b\\"',
        "\"C:\\a\\b'",
        "\"'nested'\"",
        "'\"a\"/'",
        "\u201c ~/src/infinity/ \u201d",
        "  plain  ",
        "/x/ \\",
        '"',
    ],
)
def test_sanitize_idempotent(raw):
    """Test cleaning an already clean value changes nothing."""
    once = sanitize(raw)
    assert sanitize(once) == once
