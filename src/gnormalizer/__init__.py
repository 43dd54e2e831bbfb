"""
gnormalizer: streaming edge-list normalization.

Reads edge lists whose node labels are arbitrary tokens and produces a
dense integer edge list plus the label -> identifier table that makes the
normalization reversible.

Typical use:

    parser = EdgeListParser()
    for edge in parser.to_edge_stream(iter_file_lines("graph.txt")):
        ...
    parser.snapshot_mappings()
"""

from gnormalizer.api import ACCEPTED_INPUT_FORMATS, GraphFormat
from gnormalizer.config import NormalizeConfig, ParserConfig, load_config
from gnormalizer.errors import ConfigError, GNormalizerError, MalformedLineError
from gnormalizer.io import build_graph, iter_file_lines, iter_text_lines, aiter_lines
from gnormalizer.parsers import AsyncEdgeStream, EdgeListParser, EdgeStream, classify_line
from gnormalizer.schema import Edge, MappingTable, SessionStats, Step, StepKind

__all__ = [
    "ACCEPTED_INPUT_FORMATS",
    "GraphFormat",
    "NormalizeConfig",
    "ParserConfig",
    "load_config",
    "ConfigError",
    "GNormalizerError",
    "MalformedLineError",
    "build_graph",
    "iter_file_lines",
    "iter_text_lines",
    "aiter_lines",
    "AsyncEdgeStream",
    "EdgeListParser",
    "EdgeStream",
    "classify_line",
    "Edge",
    "MappingTable",
    "SessionStats",
    "Step",
    "StepKind",
]
