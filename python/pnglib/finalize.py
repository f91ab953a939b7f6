"""Checksum pass that turns the working buffer into a valid PNG."""

from __future__ import annotations

import logging

import numpy as np

from ._bytes import write4
from .checksum import adler32, write_crc32
from .layout import Layout, stream_offsets

logger = logging.getLogger(__name__)


def stream_bytes(buffer: bytearray, layout: Layout):
    """Gather the logical (unframed) pixel stream: filter byte + indices for every row."""
    view = np.frombuffer(buffer, dtype=np.uint8)
    return view[stream_offsets(layout)]


def finalize(buffer: bytearray, layout: Layout) -> bytearray:
    """Write the Adler-32 trailer and every chunk CRC in place.

    Only checksum fields are touched, so calling this repeatedly without
    intervening pixel or palette writes produces identical bytes.
    """
    checksum = adler32(stream_bytes(buffer, layout))
    write4(buffer, layout.adler_offset, checksum)

    for _, span in layout.chunks():
        write_crc32(buffer, span.offset, span.size)

    logger.debug("finalized %dx%d PNG: %d bytes, adler32=%08x",
                 layout.width, layout.height, layout.total_size, checksum)
    return buffer
