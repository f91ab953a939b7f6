# python/pnglib/_bytes.py
# Scalar writers for the pre-sized PNG output buffer
# Each writer returns the offset just past the bytes it wrote
# RELEVANT FILES: python/pnglib/layout.py, python/pnglib/checksum.py
from __future__ import annotations

import struct

_BE32 = struct.Struct(">I")
_BE16 = struct.Struct(">H")
_LE16 = struct.Struct("<H")


def write4(buf: bytearray, offset: int, value: int) -> int:
    _BE32.pack_into(buf, offset, value & 0xFFFFFFFF)
    return offset + 4


def write2(buf: bytearray, offset: int, value: int) -> int:
    _BE16.pack_into(buf, offset, value & 0xFFFF)
    return offset + 2


def write2lsb(buf: bytearray, offset: int, value: int) -> int:
    # ~len in stored block headers is negative in Python; mask to 16 bits
    _LE16.pack_into(buf, offset, value & 0xFFFF)
    return offset + 2


def writeb(buf: bytearray, offset: int, data) -> int:
    if isinstance(data, int):
        buf[offset] = data
        return offset + 1
    data = bytes(data)
    buf[offset:offset + len(data)] = data
    return offset + len(data)
