# python/pnglib/layout.py
# Chunk layout planning, buffer priming and logical->physical pixel addressing
# Exists so the stored-block cadence is defined once and shared by every reader/writer
# RELEVANT FILES: python/pnglib/image.py, python/pnglib/finalize.py, tests/test_layout.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterator, Tuple

import numpy as np

from ._bytes import write2, write2lsb, write4, writeb

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"
PNG_IHDR = b"IHDR"
PNG_PLTE = b"PLTE"
PNG_TRNS = b"tRNS"
PNG_IDAT = b"IDAT"
PNG_IEND = b"IEND"

# zlib CMF/FLG: deflate, 32K window, no preset dictionary, fastest level
ZLIB_HEADER = 0x7801

# IHDR body tail: bit depth 8, color type 3 (indexed), deflate, adaptive filters, no interlace
BIT_DEPTH = 8
COLOR_TYPE_PALETTE = 3
IHDR_TAIL = bytes((BIT_DEPTH, COLOR_TYPE_PALETTE, 0, 0, 0))

MAX_BLOCK = 0xFFFF  # stored DEFLATE blocks carry at most 65535 bytes
BLOCK_HEADER_SIZE = 5
CHUNK_OVERHEAD = 4 + 4 + 4  # length, type, crc

MAX_PALETTE = 256

_TAGS: Dict[str, bytes] = {
    "ihdr": PNG_IHDR,
    "plte": PNG_PLTE,
    "trns": PNG_TRNS,
    "idat": PNG_IDAT,
    "iend": PNG_IEND,
}


@dataclass(frozen=True)
class ChunkSpan:
    offset: int
    size: int

    @property
    def body(self) -> int:
        """Offset of the first payload byte."""
        return self.offset + 8

    @property
    def end(self) -> int:
        return self.offset + self.size


@dataclass(frozen=True)
class Layout:
    """Byte-exact placement of every chunk for a given image geometry.

    Offsets are absolute into the output buffer, which begins with the
    8-byte PNG signature.
    """

    width: int
    height: int
    capacity: int
    pixel_size: int
    block_count: int
    data_size: int
    ihdr: ChunkSpan
    plte: ChunkSpan
    trns: ChunkSpan
    idat: ChunkSpan
    iend: ChunkSpan
    total_size: int

    @property
    def pixel_base(self) -> int:
        """Start of the zlib payload inside IDAT (just past the 2-byte zlib header)."""
        return self.idat.body + 2

    @property
    def adler_offset(self) -> int:
        return self.idat.end - 8

    def chunks(self) -> Iterator[Tuple[bytes, ChunkSpan]]:
        """Yield ``(type tag, span)`` in file order."""
        for name, tag in _TAGS.items():
            yield tag, getattr(self, name)


def block_count_for(pixel_size: int) -> int:
    # at least one block, so an empty stream still carries a final block
    return max(1, (MAX_BLOCK - 1 + pixel_size) // MAX_BLOCK)


def plan_layout(width: int, height: int, capacity: int) -> Layout:
    """Compute chunk offsets and sizes for a ``width`` x ``height`` image.

    Args:
        width: Image width in pixels
        height: Image height in pixels
        capacity: Number of palette slots reserved in PLTE and tRNS

    Returns:
        Immutable Layout
    """
    # one filter byte prepended per row
    pixel_size = height * (width + 1)
    block_count = block_count_for(pixel_size)
    # zlib header, pixel data, stored block headers, adler32 trailer
    data_size = 2 + pixel_size + BLOCK_HEADER_SIZE * block_count + 4

    sizes = (
        ("ihdr", CHUNK_OVERHEAD + 13),
        ("plte", CHUNK_OVERHEAD + 3 * capacity),
        ("trns", CHUNK_OVERHEAD + capacity),
        ("idat", CHUNK_OVERHEAD + data_size),
        ("iend", CHUNK_OVERHEAD),
    )
    spans: Dict[str, ChunkSpan] = {}
    offset = len(PNG_SIGNATURE)
    for name, size in sizes:
        spans[name] = ChunkSpan(offset, size)
        offset += size

    return Layout(
        width=width,
        height=height,
        capacity=capacity,
        pixel_size=pixel_size,
        block_count=block_count,
        data_size=data_size,
        total_size=offset,
        **spans,
    )


def stream_offset(layout: Layout, i):
    """Map logical pixel-stream position(s) ``i`` to buffer offset(s).

    Every block header that starts at or before ``i`` precedes it physically,
    which is ``i // 65535 + 1`` headers. Works on Python ints and on numpy
    integer arrays.
    """
    return layout.pixel_base + i + BLOCK_HEADER_SIZE * (i // MAX_BLOCK + 1)


def pixel_offset(layout: Layout, x: int, y: int) -> int:
    """Buffer offset of pixel ``(x, y)``; ``x == -1`` addresses the row filter byte."""
    return stream_offset(layout, y * (layout.width + 1) + x + 1)


def stream_offsets(layout: Layout) -> np.ndarray:
    """Buffer offsets of every logical stream byte, filter bytes included, in row-major order."""
    return stream_offset(layout, np.arange(layout.pixel_size, dtype=np.int64))


def block_headers(layout: Layout) -> Iterator[Tuple[int, int, bool]]:
    """Yield ``(header offset, payload length, final)`` for each stored block."""
    for k in range(layout.block_count):
        start = k * MAX_BLOCK
        length = min(MAX_BLOCK, layout.pixel_size - start)
        final = k == layout.block_count - 1
        yield stream_offset(layout, start) - BLOCK_HEADER_SIZE, length, final


def prime_buffer(layout: Layout) -> bytearray:
    """Allocate the output buffer and write every byte that does not depend on pixels or palette."""
    buf = bytearray(layout.total_size)

    writeb(buf, 0, PNG_SIGNATURE)
    for tag, span in layout.chunks():
        write4(buf, span.offset, span.size - CHUNK_OVERHEAD)
        writeb(buf, span.offset + 4, tag)

    offs = write4(buf, layout.ihdr.body, layout.width)
    offs = write4(buf, offs, layout.height)
    writeb(buf, offs, IHDR_TAIL)

    write2(buf, layout.idat.body, ZLIB_HEADER)

    for offs, length, final in block_headers(layout):
        offs = writeb(buf, offs, 1 if final else 0)
        offs = write2lsb(buf, offs, length)
        write2lsb(buf, offs, ~length)

    return buf
