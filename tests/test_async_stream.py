"""
Asynchronous edge streams.

Asserts:
  • async line sources produce the same edges as sync ones
  • malformed lines and source failures end the stream, sticky on re-pull
  • cancelling the consuming task leaves a consistent prefix of mappings
  • aclose releases the async line source
"""
import asyncio
import traceback

import pytest

from gnormalizer.errors import MalformedLineError
from gnormalizer.io.lines import aiter_lines
from gnormalizer.parsers.edge_list import EdgeListParser
from gnormalizer.schema.models import Edge, StepKind

pytestmark = pytest.mark.asyncio


async def test_async_matches_sync():
    lines = ["# c", "a b", "", "b\tc", "c a"]
    sync_edges = EdgeListParser().parse(lines)

    parser = EdgeListParser()
    async_edges = [e async for e in parser.to_edge_stream_async(aiter_lines(lines))]

    assert async_edges == sync_edges
    assert parser.snapshot_mappings() == [("a", 0), ("b", 1), ("c", 2)]


async def test_async_empty_source():
    parser = EdgeListParser()
    stream = parser.to_edge_stream_async(aiter_lines([]))
    step = await stream.pull()
    assert step.kind is StepKind.END
    assert parser.mapping_size == 0


async def test_async_malformed_line_is_sticky():
    parser = EdgeListParser()
    stream = parser.to_edge_stream_async(aiter_lines(["x y", "a b c", "p q"]))

    assert await stream.__anext__() == Edge(0, 1)
    with pytest.raises(MalformedLineError) as first:
        await stream.__anext__()
    with pytest.raises(MalformedLineError) as second:
        await stream.__anext__()

    assert first.value is second.value
    assert parser.snapshot_mappings() == [("x", 0), ("y", 1)]


async def test_async_sticky_error_traceback_is_stable():
    stream = EdgeListParser().to_edge_stream_async(aiter_lines(["a b c"]))

    depths = []
    for _ in range(4):
        with pytest.raises(MalformedLineError) as exc_info:
            await stream.__anext__()
        depths.append(len(traceback.extract_tb(exc_info.value.__traceback__)))

    assert len(set(depths)) == 1


async def test_async_source_error_propagates():
    boom = ConnectionError("socket closed")

    async def source():
        yield "a b"
        raise boom

    parser = EdgeListParser()
    edges = []
    with pytest.raises(ConnectionError) as exc_info:
        async for edge in parser.to_edge_stream_async(source()):
            edges.append(edge)

    assert exc_info.value is boom
    assert edges == [Edge(0, 1)]


async def test_cancelled_consumer_leaves_prefix_of_mappings():
    gate = asyncio.Event()

    async def source():
        yield "a b"
        yield "c d"
        await gate.wait()
        yield "e f"

    parser = EdgeListParser()
    seen = []

    async def consume():
        async for edge in parser.to_edge_stream_async(source()):
            seen.append(edge)

    task = asyncio.create_task(consume())
    while len(seen) < 2:
        await asyncio.sleep(0)
    task.cancel()
    with pytest.raises(asyncio.CancelledError):
        await task

    assert seen == [Edge(0, 1), Edge(2, 3)]
    assert parser.snapshot_mappings() == [("a", 0), ("b", 1), ("c", 2), ("d", 3)]


async def test_aclose_releases_source():
    closed = []

    async def source():
        try:
            yield "a b"
            yield "c d"
        finally:
            closed.append(True)

    parser = EdgeListParser()
    stream = parser.to_edge_stream_async(source())
    assert await stream.__anext__() == Edge(0, 1)
    await stream.aclose()

    assert closed == [True]
    assert stream.finished
    assert [e async for e in stream] == []
    assert parser.mapping_size == 2
