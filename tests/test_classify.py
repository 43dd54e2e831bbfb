"""
Line classification.

Asserts:
  • blank and whitespace-only lines are BLANK
  • lines whose first non-blank character is a comment marker are COMMENT
  • any run or mix of whitespace separates tokens
  • exactly two tokens make an EDGE line, in source/target order
  • one or three-plus tokens make a MALFORMED line
"""
import pytest

from gnormalizer.config import DEFAULT_COMMENT_CHARS
from gnormalizer.parsers.classify import LineKind, classify_line, is_comment


@pytest.mark.parametrize("line", ["", " ", "\t", "  \t \r\n", "\x0b\x0c"])
def test_blank_lines(line):
    result = classify_line(line, DEFAULT_COMMENT_CHARS)
    assert result.kind is LineKind.BLANK
    assert result.is_ignored
    assert result.endpoints is None


@pytest.mark.parametrize("marker", DEFAULT_COMMENT_CHARS)
@pytest.mark.parametrize("body", ["", "a b", "a b c", "   1 2"])
def test_comment_lines(marker, body):
    result = classify_line(f"  {marker}{body}", DEFAULT_COMMENT_CHARS)
    assert result.kind is LineKind.COMMENT
    assert result.is_ignored


def test_comment_marker_only_counts_at_line_start():
    result = classify_line("a#b c", DEFAULT_COMMENT_CHARS)
    assert result.kind is LineKind.EDGE
    assert result.endpoints == ("a#b", "c")


def test_custom_comment_markers_replace_defaults():
    assert classify_line("; note", (";",)).kind is LineKind.COMMENT
    # '#' is not a marker here, so this is a 2-token edge
    assert classify_line("#a b", (";",)).endpoints == ("#a", "b")


@pytest.mark.parametrize(
    "line",
    ["A B", "A  B", "A\tB", "  A \t  B  ", "A\x0b\x0cB", "A\u00a0B", "A B\r\n"],
)
def test_whitespace_runs_collapse(line):
    result = classify_line(line, DEFAULT_COMMENT_CHARS)
    assert result.kind is LineKind.EDGE
    assert result.endpoints == ("A", "B")


def test_labels_are_opaque_tokens():
    result = classify_line("東京 -42.5e3", DEFAULT_COMMENT_CHARS)
    assert result.endpoints == ("東京", "-42.5e3")


@pytest.mark.parametrize(
    "line,count",
    [("a", 1), ("a b c", 3), ("1 2 3 4", 4), ("  lonely  ", 1)],
)
def test_malformed_lines(line, count):
    result = classify_line(line, DEFAULT_COMMENT_CHARS)
    assert result.kind is LineKind.MALFORMED
    assert not result.is_ignored
    assert len(result.tokens) == count
    assert result.endpoints is None


def test_is_comment_needs_a_marker():
    assert is_comment("#x", ("#",))
    assert not is_comment("x#", ("#",))
    assert not is_comment("#x", ())
