# python/pnglib/image.py
# Public palette PNG writer: build once, set pixels, read out a finished PNG
# Exists to tie layout, palette, pixel addressing and the checksum pass behind one object
# RELEVANT FILES: python/pnglib/layout.py, python/pnglib/palette.py, python/pnglib/finalize.py, tests/test_image.py
from __future__ import annotations

import base64
import logging
import math
from pathlib import Path
from typing import Any, List, Optional, Union

import numpy as np

from .config import ConfigSource, ImageConfig, load_image_config
from .finalize import finalize, stream_bytes
from .io import write_png
from .layout import Layout, pixel_offset, plan_layout, prime_buffer
from .palette import Palette
from .rgba import RGBA

logger = logging.getLogger(__name__)

# fully transparent black
DEFAULT_BACKGROUND = (0, 0, 0, 0)


class PNGImage:
    """Indexed-color PNG with a tRNS alpha table and an uncompressed zlib stream.

    The whole file is laid out at construction; pixel and palette writes go
    straight into the output buffer and only the checksums are filled in when
    the buffer is requested.

    Example:
        img = PNGImage(16, 16, capacity=4, background="white")
        img.set_pixel(3, 4, "red")
        data = img.get_buffer()
    """

    def __init__(self, width: int, height: int, capacity: Optional[int] = None,
                 background: Union[str, tuple, None] = None):
        """Lay out the PNG and register the background color at index 0.

        Args:
            width: Image width in pixels (> 0)
            height: Image height in pixels (> 0)
            capacity: Palette slots reserved in PLTE/tRNS, 1-256 (default 8)
            background: Color name or (r, g, b[, a]); fully transparent black if omitted

        Raises:
            ValueError: invalid dimensions or capacity
            InvalidColorError: background color not recognized
        """
        overrides = {"width": width, "height": height, "background": background}
        if capacity is not None:
            overrides["capacity"] = capacity
        self.config: ImageConfig = load_image_config(None, overrides)

        self.width = self.config.width
        self.height = self.config.height
        self.capacity = self.config.capacity
        self.layout: Layout = plan_layout(self.width, self.height, self.capacity)
        self.buffer = prime_buffer(self.layout)
        self.palette = Palette(self.buffer, self.layout)

        bg = self.config.background
        if bg is None:
            self.color(*DEFAULT_BACKGROUND)
        else:
            self.color(bg)

        logger.debug("PNG image %dx%d, %d palette slots, %d bytes",
                     self.width, self.height, self.capacity, self.layout.total_size)

    @classmethod
    def from_config(cls, config: ConfigSource = None, **overrides: Any) -> "PNGImage":
        cfg = load_image_config(config, overrides)
        return cls(cfg.width, cfg.height, cfg.capacity, cfg.background)

    def __repr__(self) -> str:
        return (f"PNGImage(width={self.width}, height={self.height}, "
                f"capacity={self.capacity}, colors={len(self.palette)})")

    def index(self, x: int, y: int) -> int:
        """Buffer offset of pixel (x, y). No bounds check; x == -1 is the row filter byte."""
        return pixel_offset(self.layout, x, y)

    def color(self, red, green=None, blue=None, alpha=None) -> int:
        """Register a color and return its palette index.

        Accepts a color string, an (r, g, b[, a]) sequence or separate
        components; alpha defaults to 255. Returns 0 with a logged warning
        when the palette is already full.
        """
        return self.palette.register(red, green, blue, alpha)

    def set_pixel(self, x, y, color) -> None:
        """Set pixel (x, y) to ``color``; coordinates outside the image are ignored."""
        if x < 0 or y < 0 or x >= self.width or y >= self.height:
            return
        self.buffer[self.index(math.floor(x), math.floor(y))] = self.color(color)

    def palette_colors(self) -> List[RGBA]:
        """Registered colors in index order."""
        return self.palette.colors()

    def indices(self) -> np.ndarray:
        """Palette index of every pixel as a (height, width) uint8 array."""
        rows = stream_bytes(self.buffer, self.layout).reshape(self.height, self.width + 1)
        # drop the filter byte column
        return rows[:, 1:].copy()

    def deflate(self) -> bytes:
        """Fill in the Adler-32 trailer and chunk CRCs and return the PNG bytes."""
        finalize(self.buffer, self.layout)
        return bytes(self.buffer)

    def get_buffer(self) -> bytes:
        """Return the finished PNG file contents."""
        return self.deflate()

    def get_base64(self) -> str:
        """Return the finished PNG, Base64 encoded."""
        return base64.b64encode(self.deflate()).decode("ascii")

    def save(self, path: Union[str, Path]) -> Path:
        """Write the finished PNG to a ``.png`` path whose directory already exists."""
        return write_png(path, self.deflate())

    # camelCase aliases
    setPixel = set_pixel
    getBuffer = get_buffer
    getBase64 = get_base64
