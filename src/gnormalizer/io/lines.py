from __future__ import annotations

import asyncio
import io
from typing import AsyncIterator, Iterable, Iterator


def iter_file_lines(file_path: str, encoding: str = "utf-8-sig") -> Iterator[str]:
    """
    Lazily iterate over the lines of a text file.

    This generator reads one line at a time so that arbitrarily large
    edge lists can be streamed without materializing them. Line
    terminators are removed; other whitespace is left to the parser.
    The file is closed when the generator is exhausted or closed.

    Args:
        file_path (str): Path to the edge-list file.
        encoding (str): Text encoding. The default also strips a UTF-8 BOM.

    Returns:
        Iterator[str]: Lines without their terminators.
    """
    with open(file_path, "r", encoding=encoding, newline=None) as f:
        for line in f:
            yield line.rstrip("\r\n")


def iter_text_lines(text: str) -> Iterator[str]:
    """
    Iterate over the lines of an in-memory string.

    Lines are split exactly as iter_file_lines splits a file (on \\n, \\r
    and \\r\\n only), so a string and a file with the same content yield
    the same lines. Other control characters stay inside the line.

    Args:
        text (str): Edge-list content.

    Returns:
        Iterator[str]: Lines without their terminators.
    """
    with io.StringIO(text, newline=None) as f:
        for line in f:
            yield line.rstrip("\r\n")


async def aiter_lines(lines: Iterable[str]) -> AsyncIterator[str]:
    """
    Adapt a synchronous line iterable into an async line source.

    Control is handed back to the event loop after every line, so a
    consumer sharing the loop with other tasks never starves them.

    Args:
        lines (Iterable[str]): Lines to forward.

    Returns:
        AsyncIterator[str]: Async iterator over the same lines.
    """
    for line in lines:
        yield line
        await asyncio.sleep(0)
