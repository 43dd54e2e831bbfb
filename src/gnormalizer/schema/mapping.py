from __future__ import annotations

import threading
from typing import Dict, Iterator, List, Optional, Tuple

from gnormalizer.schema.models import Edge


class MappingTable:
    """
    Insertion-ordered bijection between node labels and dense identifiers.

    Labels receive identifiers in order of first sight, starting at
    `base` and increasing by one per new label. Entries are only ever
    added; an identifier is never reassigned. Resolution is guarded by a
    lock so that concurrent callers never allocate two identifiers for
    the same label.
    """

    def __init__(self, base: int = 0) -> None:
        self.base = base
        self._ids: Dict[str, int] = {}
        self._labels: List[str] = []
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._labels)

    def __contains__(self, label: object) -> bool:
        return label in self._ids

    def resolve(self, label: str) -> int:
        """
        Return the identifier for a label, allocating one on first sight.

        Args:
            label (str): Node label as read from the input.

        Returns:
            int: Stable identifier for the label.
        """
        existing = self._ids.get(label)
        if existing is not None:
            return existing
        with self._lock:
            # re-check: another thread may have inserted while we waited
            existing = self._ids.get(label)
            if existing is not None:
                return existing
            new_id = self.base + len(self._labels)
            # list first, so a reader never sees an id without its label
            self._labels.append(label)
            self._ids[label] = new_id
            return new_id

    def process_edge_line(self, source: str, target: str) -> Edge:
        """
        Resolve both endpoints of a well-formed line into an Edge.

        The source is resolved before the target, so when both labels are
        new and distinct the source receives the lower identifier.

        Args:
            source (str): Source label.
            target (str): Target label.

        Returns:
            Edge: Normalized edge.
        """
        src_id = self.resolve(source)
        dst_id = self.resolve(target)
        return Edge(src_id, dst_id)

    def get(self, label: str) -> Optional[int]:
        """
        Look up a label without allocating an identifier.

        Args:
            label (str): Node label.

        Returns:
            Optional[int]: Its identifier, or None if the label is unseen.
        """
        return self._ids.get(label)

    def label_for(self, identifier: int) -> str:
        """
        Reverse lookup from identifier to label.

        Args:
            identifier (int): Assigned identifier.

        Returns:
            str: The label that received this identifier.

        Raises:
            KeyError: If the identifier has not been assigned.
        """
        idx = identifier - self.base
        if idx < 0 or idx >= len(self._labels):
            raise KeyError(f"Identifier {identifier} is not assigned")
        return self._labels[idx]

    def snapshot(self) -> List[Tuple[str, int]]:
        """
        Return the current (label, identifier) pairs in identifier order.

        The snapshot is a copy; later resolutions do not change it.
        """
        labels = list(self._labels)
        return [(label, self.base + i) for i, label in enumerate(labels)]

    def __iter__(self) -> Iterator[Tuple[str, int]]:
        """Iterate over a snapshot, so concurrent resolution cannot invalidate it."""
        return iter(self.snapshot())
