"""
Edge-list parsing.

This package turns raw edge-list lines into normalized edges:
- `classify_line` decides whether a line is blank, a comment, an edge
  or malformed, and extracts its endpoint tokens
- `EdgeListParser` owns the label -> identifier mapping for a session
  and hands out lazy edge streams (sync and async) over line sources
"""

from gnormalizer.parsers.classify import ClassifiedLine, LineKind, classify_line, is_comment
from gnormalizer.parsers.edge_list import AsyncEdgeStream, EdgeListParser, EdgeStream

__all__ = [
    "ClassifiedLine",
    "LineKind",
    "classify_line",
    "is_comment",
    "EdgeListParser",
    "EdgeStream",
    "AsyncEdgeStream",
]
