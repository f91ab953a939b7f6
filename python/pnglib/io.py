"""File and array helpers around finished PNG buffers."""

from __future__ import annotations

import io
from pathlib import Path
from typing import Union

import numpy as np

PathLike = Union[str, Path]


def png_path(p: PathLike) -> str:
    s = str(p)
    if not s.lower().endswith(".png"):
        raise ValueError("path must end with .png")
    parent = Path(s).resolve().parent
    if not parent.exists():
        raise ValueError(f"directory does not exist: {parent}")
    return s


def write_png(path: PathLike, data: bytes) -> Path:
    """Write PNG bytes to ``path`` after validating the destination."""
    out = Path(png_path(path))
    out.write_bytes(bytes(data))
    return out


def png_to_numpy(source: Union[PathLike, bytes, bytearray]) -> np.ndarray:
    """Decode a PNG file or in-memory PNG into an (H, W, 4) uint8 RGBA array."""
    from PIL import Image

    if isinstance(source, (bytes, bytearray, memoryview)):
        img = Image.open(io.BytesIO(bytes(source)))
    else:
        img = Image.open(str(source))
    # Convert to RGBA for consistency; palette images pick up tRNS alpha here
    if img.mode != 'RGBA':
        img = img.convert('RGBA')

    return np.array(img, dtype=np.uint8)
