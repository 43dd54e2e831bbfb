from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


@dataclass(frozen=True)
class Edge:
    """
    A normalized edge between two node identifiers.

    Source and target keep the order of the input line. Self-loops are
    allowed and simply carry the same identifier twice.
    """

    source: int
    target: int

    def as_tuple(self) -> Tuple[int, int]:
        return self.source, self.target


@dataclass
class SessionStats:
    """
    Running counters for one edge stream.

    `lines_read` counts every line pulled from the source, including the
    malformed one that ends a failed stream.
    """

    lines_read: int = 0
    lines_ignored: int = 0
    edges_emitted: int = 0


class StepKind(Enum):
    EDGE = "edge"
    END = "end"
    ERROR = "error"


@dataclass(frozen=True)
class Step:
    """
    Result of pulling once from an edge stream.

    Exactly one of the following holds:
      - kind is EDGE and `edge` is set
      - kind is END (input exhausted)
      - kind is ERROR and `error` is the terminal exception
    """

    kind: StepKind
    edge: Optional[Edge] = None
    error: Optional[BaseException] = None

    @classmethod
    def of_edge(cls, edge: Edge) -> "Step":
        return cls(StepKind.EDGE, edge=edge)

    @classmethod
    def end(cls) -> "Step":
        return cls(StepKind.END)

    @classmethod
    def failed(cls, error: BaseException) -> "Step":
        return cls(StepKind.ERROR, error=error)

    @property
    def is_terminal(self) -> bool:
        return self.kind is not StepKind.EDGE
