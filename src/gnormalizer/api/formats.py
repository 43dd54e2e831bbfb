from __future__ import annotations

from enum import Enum
from typing import FrozenSet


class GraphFormat(Enum):
    """Graph exchange formats known to the library."""

    EDGE_LIST = "edge_list"


# formats the parsers can read
ACCEPTED_INPUT_FORMATS: FrozenSet[GraphFormat] = frozenset({GraphFormat.EDGE_LIST})
