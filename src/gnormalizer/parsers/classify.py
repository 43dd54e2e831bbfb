from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, Tuple


class LineKind(Enum):
    BLANK = "blank"
    COMMENT = "comment"
    EDGE = "edge"
    MALFORMED = "malformed"


@dataclass(frozen=True)
class ClassifiedLine:
    """
    Outcome of classifying one raw input line.

    `tokens` holds the whitespace-split tokens for EDGE and MALFORMED
    lines and is empty otherwise.
    """

    kind: LineKind
    tokens: Tuple[str, ...] = ()

    @property
    def is_ignored(self) -> bool:
        return self.kind in (LineKind.BLANK, LineKind.COMMENT)

    @property
    def endpoints(self) -> Optional[Tuple[str, str]]:
        if self.kind is not LineKind.EDGE:
            return None
        return self.tokens[0], self.tokens[1]


_BLANK = ClassifiedLine(LineKind.BLANK)
_COMMENT = ClassifiedLine(LineKind.COMMENT)


def is_comment(trimmed: str, comment_chars: Iterable[str]) -> bool:
    """
    Check whether an already-trimmed, non-empty line is a comment.

    Args:
        trimmed (str): Line with surrounding whitespace removed.
        comment_chars (Iterable[str]): Single-character comment markers.

    Returns:
        bool: True if the line starts with one of the markers.
    """
    return any(trimmed.startswith(c) for c in comment_chars)


def classify_line(line: str, comment_chars: Iterable[str]) -> ClassifiedLine:
    """
    Classify a raw edge-list line and extract its endpoint tokens.

    The line is trimmed first. Empty lines are BLANK and lines starting
    with a comment marker are COMMENT; both are meant to be skipped.
    Anything else is split on runs of whitespace (spaces, tabs, vertical
    tabs, form feeds and other blank characters). Exactly two tokens make
    an EDGE line; any other count is MALFORMED.

    Args:
        line (str): Raw input line, with or without its terminator.
        comment_chars (Iterable[str]): Single-character comment markers.

    Returns:
        ClassifiedLine: Line kind plus its tokens.
    """
    trimmed = line.strip()
    if not trimmed:
        return _BLANK
    if is_comment(trimmed, comment_chars):
        return _COMMENT

    # str.split() with no separator collapses any mix of whitespace
    tokens = tuple(trimmed.split())
    if len(tokens) == 2:
        return ClassifiedLine(LineKind.EDGE, tokens)
    return ClassifiedLine(LineKind.MALFORMED, tokens)
