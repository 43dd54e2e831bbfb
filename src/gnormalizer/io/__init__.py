"""
I/O utilities around the edge-list parser.

This package provides the boundary collaborators of the parser:
- Line sources (files, in-memory text, async adapters)
- Writers for normalized edge lists and label mapping tables
- (Optional) Construction of a NetworkX graph from normalized edges

Notes:
- The parser never imports line sources; any iterable of strings works.
- `__all__` defines the supported public surface.
"""

from gnormalizer.io.lines import aiter_lines, iter_file_lines, iter_text_lines
from gnormalizer.io.writers import mappings_to_frame, read_mappings, write_edges, write_mappings
from gnormalizer.io.graph_builder import build_graph

__all__ = [
    "aiter_lines",
    "iter_file_lines",
    "iter_text_lines",
    "mappings_to_frame",
    "read_mappings",
    "write_edges",
    "write_mappings",
    "build_graph",
]
