from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from gnormalizer.config import NormalizeConfig
from gnormalizer.io.lines import iter_file_lines
from gnormalizer.io.writers import write_edges, write_mappings
from gnormalizer.parsers.edge_list import EdgeListParser
from gnormalizer.schema.models import SessionStats


@dataclass
class NormalizeResult:
    """
    Summary of one file normalization run.
    """

    edges_path: str
    mappings_path: str
    edge_count: int
    mapping_count: int
    stats: SessionStats


# ============================================================
# Logging helper
# ============================================================

def _p(verbose: bool, *args, **kwargs):
    """
    Conditional print helper for verbose progress output.

    Args:
        verbose (bool): Whether output is enabled.
    """
    if verbose:
        print(*args, **kwargs)


# ============================================================
# Entry point
# ============================================================

def run_normalize(
    input_path: str,
    edges_out: str,
    mappings_out: str,
    config: Optional[NormalizeConfig] = None,
    parser: Optional[EdgeListParser] = None,
) -> NormalizeResult:
    """
    Normalize an edge-list file into an integer edge list plus mapping table.

    The input is streamed line by line through a single parser session;
    edges are written as they are produced and the mapping snapshot is
    written once the input is exhausted. Passing an existing parser lets
    several files share one identifier space.

    On a malformed line, the edges produced before it are already on disk,
    no mapping file is written, and the MalformedLineError propagates. A
    mapping file left at `mappings_out` by an earlier run is removed before
    streaming starts, so it can never be mistaken for this run's output.

    Args:
        input_path (str): Edge-list file to read.
        edges_out (str): Destination for the normalized edge list.
        mappings_out (str): Destination for the `label,id` table.
        config (Optional[NormalizeConfig]): Pipeline tunables.
        parser (Optional[EdgeListParser]): Parser session to reuse.

    Returns:
        NormalizeResult: Output paths and counts.
    """
    cfg = config or NormalizeConfig()
    if parser is None:
        parser = EdgeListParser(cfg.parser)

    if not os.path.isfile(input_path):
        raise FileNotFoundError(f"Edge list '{input_path}' does not exist")

    _p(cfg.verbose, f"--- Normalizing edge list: {input_path} ---")

    if os.path.exists(mappings_out):
        os.remove(mappings_out)

    stream = parser.to_edge_stream(iter_file_lines(input_path, encoding=cfg.encoding))
    with stream:
        edge_count = write_edges(stream, edges_out, encoding=cfg.output_encoding)

    _p(
        cfg.verbose,
        f"   Lines read: {stream.stats.lines_read} "
        f"(ignored {stream.stats.lines_ignored}), edges written: {edge_count}",
    )

    snapshot = parser.snapshot_mappings()
    mapping_count = write_mappings(
        snapshot,
        mappings_out,
        delimiter=cfg.mappings_delimiter,
        encoding=cfg.output_encoding,
    )
    _p(cfg.verbose, f"   Distinct labels: {mapping_count}")
    _p(cfg.verbose, f"   Edges    -> {edges_out}")
    _p(cfg.verbose, f"   Mappings -> {mappings_out}")

    return NormalizeResult(
        edges_path=edges_out,
        mappings_path=mappings_out,
        edge_count=edge_count,
        mapping_count=mapping_count,
        stats=stream.stats,
    )
