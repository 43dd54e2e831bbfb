"""
Static declarations of the graph formats the library accepts.
"""

from gnormalizer.api.formats import ACCEPTED_INPUT_FORMATS, GraphFormat

__all__ = [
    "GraphFormat",
    "ACCEPTED_INPUT_FORMATS",
]
