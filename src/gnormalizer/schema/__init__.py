"""
Core data model for normalized graphs.

This package holds the records produced by parsing (edges, stream steps,
session counters) and the mapping table that assigns dense integer
identifiers to node labels. Nothing here performs I/O; the parser and
pipeline layers drive these objects.
"""

from gnormalizer.schema.models import Edge, SessionStats, Step, StepKind
from gnormalizer.schema.mapping import MappingTable

__all__ = [
    "Edge",
    "SessionStats",
    "Step",
    "StepKind",
    "MappingTable",
]
