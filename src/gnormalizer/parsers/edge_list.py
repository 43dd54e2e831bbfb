from __future__ import annotations

import logging
from typing import AsyncIterable, Iterable, Iterator, List, Optional, Tuple

import pandas as pd

from gnormalizer.api.formats import GraphFormat
from gnormalizer.config import ParserConfig
from gnormalizer.errors import MalformedLineError
from gnormalizer.io.writers import mappings_to_frame
from gnormalizer.parsers.classify import LineKind, classify_line
from gnormalizer.schema.mapping import MappingTable
from gnormalizer.schema.models import Edge, SessionStats, Step, StepKind

LOG = logging.getLogger(__name__)


# ============================================================
# Edge streams
# ============================================================

class _StreamCore:
    """
    State shared by the sync and async edge streams.

    A stream owns its line source and its counters, but not the mapping
    table: that belongs to the parser and outlives every stream created
    from it.
    """

    def __init__(self, parser: "EdgeListParser") -> None:
        self._parser = parser
        self._terminal: Optional[Step] = None
        self._error_tb = None
        self.stats = SessionStats()

    @property
    def finished(self) -> bool:
        return self._terminal is not None

    @property
    def error(self) -> Optional[BaseException]:
        if self._terminal is None:
            return None
        return self._terminal.error

    def _consume(self, line: str) -> Optional[Step]:
        """
        Turn one pulled line into a step, or None if the line is ignored.
        """
        self.stats.lines_read += 1
        classified = classify_line(line, self._parser.comment_chars)

        if classified.is_ignored:
            self.stats.lines_ignored += 1
            return None

        if classified.kind is LineKind.MALFORMED:
            err = MalformedLineError(
                line,
                line_number=self.stats.lines_read,
                token_count=len(classified.tokens),
            )
            LOG.warning("Malformed edge-list line %d (%d tokens)", self.stats.lines_read, len(classified.tokens))
            return Step.failed(err)

        source, target = classified.tokens
        edge = self._parser.process_edge_line(source, target)
        self.stats.edges_emitted += 1
        return Step.of_edge(edge)

    def _reraise(self, error: BaseException):
        # keep the traceback captured at failure time, not one frame per pull
        raise error.with_traceback(self._error_tb)

    def _finish(self, step: Step) -> Step:
        self._terminal = step
        if step.error is not None:
            self._error_tb = step.error.__traceback__
        LOG.debug(
            "Edge stream finished (%s): lines_read=%d ignored=%d edges=%d mappings=%d",
            step.kind.value,
            self.stats.lines_read,
            self.stats.lines_ignored,
            self.stats.edges_emitted,
            self._parser.mapping_size,
        )
        return step


class EdgeStream(_StreamCore):
    """
    Lazy, read-once iterator of normalized edges over a line iterable.

    Each pull reads lines until one yields an edge, the input ends, or a
    fatal error occurs. Once terminal, every further pull returns the same
    terminal step; iterating re-raises the same error.
    """

    def __init__(self, parser: "EdgeListParser", lines: Iterable[str]) -> None:
        super().__init__(parser)
        self._lines: Iterator[str] = iter(lines)

    def __iter__(self) -> "EdgeStream":
        return self

    def __next__(self) -> Edge:
        step = self.pull()
        if step.kind is StepKind.EDGE:
            return step.edge
        if step.kind is StepKind.END:
            raise StopIteration
        self._reraise(step.error)

    def pull(self) -> Step:
        """
        Advance the stream by at most one edge.

        Returns:
            Step: An EDGE step, the END step, or the terminal ERROR step.
            Errors raised by the line source are captured unchanged.
        """
        if self._terminal is not None:
            return self._terminal

        while True:
            try:
                line = next(self._lines)
            except StopIteration:
                return self._finish(Step.end())
            except Exception as e:
                return self._finish(Step.failed(e))

            step = self._consume(line)
            if step is None:
                continue
            if step.is_terminal:
                return self._finish(step)
            return step

    def close(self) -> None:
        """
        Stop the stream early and release the line source.

        Edges already produced, and the mappings they created, stay valid.
        """
        if self._terminal is None:
            self._finish(Step.end())
        close = getattr(self._lines, "close", None)
        if close is not None:
            close()

    def __enter__(self) -> "EdgeStream":
        return self

    def __exit__(self, *exc) -> None:
        self.close()


class AsyncEdgeStream(_StreamCore):
    """
    Async counterpart of EdgeStream for asynchronous line sources.

    The stream only awaits the line source; classification and identifier
    resolution run synchronously between awaits, so cancelling the
    consuming task can never leave a half-inserted mapping.
    """

    def __init__(self, parser: "EdgeListParser", lines: AsyncIterable[str]) -> None:
        super().__init__(parser)
        self._lines = lines.__aiter__()

    def __aiter__(self) -> "AsyncEdgeStream":
        return self

    async def __anext__(self) -> Edge:
        step = await self.pull()
        if step.kind is StepKind.EDGE:
            return step.edge
        if step.kind is StepKind.END:
            raise StopAsyncIteration
        self._reraise(step.error)

    async def pull(self) -> Step:
        """
        Await the next step of the stream; see EdgeStream.pull.
        """
        if self._terminal is not None:
            return self._terminal

        while True:
            try:
                line = await self._lines.__anext__()
            except StopAsyncIteration:
                return self._finish(Step.end())
            except Exception as e:
                return self._finish(Step.failed(e))

            step = self._consume(line)
            if step is None:
                continue
            if step.is_terminal:
                return self._finish(step)
            return step

    async def aclose(self) -> None:
        """
        Stop the stream early and close the async line source.
        """
        if self._terminal is None:
            self._finish(Step.end())
        aclose = getattr(self._lines, "aclose", None)
        if aclose is not None:
            await aclose()


# ============================================================
# Parser
# ============================================================

class EdgeListParser:
    """
    Edge-list parser that normalizes node labels into dense identifiers.

    One parser instance is one session: its mapping table starts empty,
    grows as edge streams are consumed, and is shared by every stream the
    parser creates. Identifiers are therefore stable across calls, e.g.
    parsing two files with the same parser maps a label found in both to
    the same identifier.

    Args:
        config (Optional[ParserConfig]): Comment markers and identifier base.
            Defaults to ParserConfig().
    """

    format = GraphFormat.EDGE_LIST

    def __init__(self, config: Optional[ParserConfig] = None) -> None:
        self.config = (config or ParserConfig()).validate()
        self._table = MappingTable(base=self.config.id_base)

    @property
    def comment_chars(self) -> Tuple[str, ...]:
        return self.config.comment_chars

    @property
    def mapping_size(self) -> int:
        return len(self._table)

    # ---------- streaming ----------

    def to_edge_stream(self, lines: Iterable[str]) -> EdgeStream:
        """
        Create a lazy edge stream over a line iterable.

        Nothing is read until the stream is pulled.

        Args:
            lines (Iterable[str]): Raw edge-list lines.

        Returns:
            EdgeStream: Read-once iterator of normalized edges.
        """
        return EdgeStream(self, lines)

    def to_edge_stream_async(self, lines: AsyncIterable[str]) -> AsyncEdgeStream:
        """
        Create a lazy edge stream over an async line source.

        The stream shares this parser's mapping table with every other
        stream it creates, sync or async.

        Args:
            lines (AsyncIterable[str]): Raw edge-list lines.

        Returns:
            AsyncEdgeStream: Read-once async iterator of normalized edges.
        """
        return AsyncEdgeStream(self, lines)

    def parse(self, lines: Iterable[str]) -> List[Edge]:
        """
        Eagerly parse all lines into a list of edges.

        Raises:
            MalformedLineError: On the first malformed line.
        """
        return list(self.to_edge_stream(lines))

    # ---------- normalization ----------

    def resolve(self, label: str) -> int:
        return self._table.resolve(label)

    def process_edge_line(self, source: str, target: str) -> Edge:
        return self._table.process_edge_line(source, target)

    # ---------- mapping queries ----------

    def snapshot_mappings(self) -> List[Tuple[str, int]]:
        """
        Return the (label, identifier) pairs discovered so far.

        Pairs are ordered by identifier. The result reflects whatever the
        streams created by this parser have consumed at call time.
        """
        return self._table.snapshot()

    def mappings_stream(self) -> Iterator[Tuple[str, int]]:
        return iter(self._table.snapshot())

    def mappings_frame(self) -> pd.DataFrame:
        return mappings_to_frame(self._table.snapshot())

    def identifier_for(self, label: str) -> Optional[int]:
        return self._table.get(label)

    def label_for(self, identifier: int) -> str:
        return self._table.label_for(identifier)
