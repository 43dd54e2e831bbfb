from __future__ import annotations

from typing import Iterable, Optional, Sequence, Tuple

import networkx as nx

from gnormalizer.schema.models import Edge


def build_graph(
    edges: Iterable[Edge],
    mappings: Optional[Sequence[Tuple[str, int]]] = None,
) -> nx.MultiDiGraph:
    """
    Construct an in-memory NetworkX graph from normalized edges.

    Nodes are the normalized identifiers. When a mapping snapshot is
    given, every mapped identifier becomes a node carrying its original
    `label` attribute, including labels whose edges were not passed in.
    Parallel edges and self-loops are preserved.

    Args:
        edges (Iterable[Edge]): Normalized edges.
        mappings (Optional[Sequence[Tuple[str, int]]]): (label, identifier)
            pairs, e.g. from EdgeListParser.snapshot_mappings().

    Returns:
        nx.MultiDiGraph: Graph over normalized identifiers.
    """
    G = nx.MultiDiGraph()

    if mappings:
        for label, node_id in mappings:
            G.add_node(node_id, label=label)

    for edge in edges:
        G.add_edge(edge.source, edge.target)

    return G
