# tests/_png.py
# Minimal PNG chunk reader used to inspect writer output independently of pnglib
import struct
import zlib

SIGNATURE = b"\x89PNG\r\n\x1a\n"


def read_chunks(data: bytes):
    """Return a list of (type, body, crc_ok) tuples; asserts the signature."""
    assert data[:8] == SIGNATURE, "missing PNG signature"
    out = []
    pos = 8
    while pos < len(data):
        (length,) = struct.unpack(">I", data[pos:pos + 4])
        kind = data[pos + 4:pos + 8]
        body = data[pos + 8:pos + 8 + length]
        (crc,) = struct.unpack(">I", data[pos + 8 + length:pos + 12 + length])
        out.append((kind, body, crc == (zlib.crc32(kind + body) & 0xFFFFFFFF)))
        pos += 12 + length
    assert pos == len(data), "trailing bytes after last chunk"
    return out


def chunk(data: bytes, kind: bytes) -> bytes:
    for k, body, _ in read_chunks(data):
        if k == kind:
            return body
    raise KeyError(kind)


def stored_blocks(zdata: bytes):
    """Walk stored DEFLATE blocks after the 2-byte zlib header.

    Returns (list of (final, length), payload bytes, adler32 trailer).
    """
    blocks = []
    payload = bytearray()
    pos = 2
    while True:
        final = zdata[pos]
        length, nlength = struct.unpack("<HH", zdata[pos + 1:pos + 5])
        assert length ^ 0xFFFF == nlength, "bad one's complement length"
        blocks.append((final, length))
        payload += zdata[pos + 5:pos + 5 + length]
        pos += 5 + length
        if final & 1:
            break
    (adler,) = struct.unpack(">I", zdata[pos:pos + 4])
    assert pos + 4 == len(zdata), "IDAT has bytes after the adler32 trailer"
    return blocks, bytes(payload), adler
