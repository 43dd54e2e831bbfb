from __future__ import annotations

from typing import Iterable, Sequence, Tuple

import pandas as pd

from gnormalizer.schema.models import Edge
from gnormalizer.utils.paths import ensure_parent_dir

MAPPING_COLUMNS = ["label", "id"]


def mappings_to_frame(pairs: Sequence[Tuple[str, int]]) -> pd.DataFrame:
    """
    Convert a mapping snapshot into a two-column dataframe.

    Labels are kept as strings (no numeric coercion), so "007" and "7"
    stay distinct rows.

    Args:
        pairs (Sequence[Tuple[str, int]]): (label, identifier) pairs in
            identifier order.

    Returns:
        pd.DataFrame: Columns `label` (str) and `id` (int64).
    """
    df = pd.DataFrame(list(pairs), columns=MAPPING_COLUMNS)
    return df.astype({"label": str, "id": "int64"})


def write_edges(edges: Iterable[Edge], file_path: str, *, encoding: str = "utf-8") -> int:
    """
    Write normalized edges as a whitespace-separated edge list.

    Edges are written as they are pulled, so a lazy edge stream is never
    materialized. If the stream fails midway, the lines written before
    the failure stay in the file and the error propagates.

    Args:
        edges (Iterable[Edge]): Edges to write, typically an EdgeStream.
        file_path (str): Destination path.
        encoding (str): Output encoding.

    Returns:
        int: Number of edges written.
    """
    ensure_parent_dir(file_path)
    count = 0
    with open(file_path, "w", encoding=encoding, newline="\n") as f:
        for edge in edges:
            f.write(f"{edge.source} {edge.target}\n")
            count += 1
    return count


def write_mappings(
    pairs: Sequence[Tuple[str, int]],
    file_path: str,
    *,
    delimiter: str = ",",
    encoding: str = "utf-8",
) -> int:
    """
    Write a mapping snapshot as a delimited `label,id` table.

    Args:
        pairs (Sequence[Tuple[str, int]]): Mapping snapshot.
        file_path (str): Destination path.
        delimiter (str): Column delimiter.
        encoding (str): Output encoding.

    Returns:
        int: Number of mapping rows written.
    """
    ensure_parent_dir(file_path)
    df = mappings_to_frame(pairs)
    df.to_csv(file_path, sep=delimiter, index=False, encoding=encoding)
    return len(df)


def read_mappings(file_path: str, *, delimiter: str = ",") -> pd.DataFrame:
    """
    Read a mapping table written by write_mappings.

    Labels are read back as strings with NA detection disabled, so labels
    such as "NA", "null" or "007" round-trip unchanged.

    Args:
        file_path (str): Mapping table path.
        delimiter (str): Column delimiter.

    Returns:
        pd.DataFrame: Columns `label` (str) and `id` (int64).
    """
    df = pd.read_csv(
        file_path,
        sep=delimiter,
        dtype={"label": str, "id": "int64"},
        keep_default_na=False,
    )
    return df
