import zlib

import numpy as np
import pytest

from pnglib.checksum import ADLER_NMAX, adler32, crc32, write_crc32


@pytest.mark.parametrize("n", [0, 1, 2, ADLER_NMAX - 1, ADLER_NMAX, ADLER_NMAX + 1, 3 * ADLER_NMAX + 17, 100_000])
def test_adler32_matches_zlib(n):
    rng = np.random.default_rng(n)
    data = rng.integers(0, 256, size=n, dtype=np.uint8)
    assert adler32(data) == zlib.adler32(data.tobytes())
    assert adler32(data.tobytes()) == zlib.adler32(data.tobytes())


def test_adler32_worst_case_all_ff():
    data = b"\xff" * (4 * ADLER_NMAX + 3)
    assert adler32(data) == zlib.adler32(data)


def test_adler32_empty_is_one():
    assert adler32(b"") == 1


def test_write_crc32_covers_type_and_body():
    body = b"IEND"
    buf = bytearray(b"\x00\x00\x00\x00" + body + b"\x00\x00\x00\x00")
    value = write_crc32(buf, 0, len(buf))
    assert value == zlib.crc32(b"IEND")
    assert bytes(buf[-4:]) == value.to_bytes(4, "big")
    # well-known IEND CRC
    assert bytes(buf[-4:]) == bytes.fromhex("ae426082")


def test_crc32_unsigned():
    assert 0 <= crc32(b"\xff" * 64) <= 0xFFFFFFFF
