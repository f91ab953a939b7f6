"""Checksum primitives for the PNG writer.

Both functions depend only on the bytes they are given: Adler-32 covers the
uncompressed zlib payload and CRC-32 covers a chunk's type tag plus body.
"""

from __future__ import annotations

import zlib

import numpy as np

from ._bytes import write4

ADLER_BASE = 65521  # largest prime smaller than 65536
# largest n such that 255n(n+1)/2 + (n+1)(BASE-1) <= 2^32-1
ADLER_NMAX = 5552


def adler32(data) -> int:
    """Compute the zlib Adler-32 checksum of ``data``.

    Bytes are consumed in batches of ``ADLER_NMAX``; within a batch the running
    sums are accumulated in closed form and both are reduced modulo
    ``ADLER_BASE`` at the end of every batch.

    Args:
        data: bytes-like object or 1-D uint8 numpy array

    Returns:
        Packed ``(s2 << 16) | s1`` checksum
    """
    if isinstance(data, np.ndarray):
        arr = data.astype(np.uint8, copy=False).reshape(-1)
    else:
        arr = np.frombuffer(bytes(data), dtype=np.uint8)

    s1, s2 = 1, 0
    for start in range(0, arr.size, ADLER_NMAX):
        block = arr[start:start + ADLER_NMAX].astype(np.int64)
        n = block.size
        # s2 picks up s1 once per byte, plus each byte weighted by how many
        # partial sums it contributes to
        weights = np.arange(n, 0, -1, dtype=np.int64)
        s2 += n * s1 + int(np.dot(block, weights))
        s1 += int(block.sum())
        s1 %= ADLER_BASE
        s2 %= ADLER_BASE
    return (s2 << 16) | s1


def crc32(data) -> int:
    return zlib.crc32(bytes(data)) & 0xFFFFFFFF


def write_crc32(buf: bytearray, offset: int, size: int) -> int:
    """Checksum a chunk in place.

    ``offset``/``size`` describe the whole chunk (length field through CRC
    field). The CRC covers the type tag and body and is written into the last
    four bytes of the chunk.
    """
    end = offset + size - 4
    value = crc32(buf[offset + 4:end])
    write4(buf, end, value)
    return value
