# python/pnglib/palette.py
# Palette manager backing the PLTE and tRNS chunk bodies
# Exists to keep color -> index assignment stable and bounded by the reserved slot count
# RELEVANT FILES: python/pnglib/image.py, python/pnglib/rgba.py, tests/test_palette.py
from __future__ import annotations

import logging
from typing import Dict, List

from .errors import InvalidColorError
from .layout import Layout
from .rgba import RGBA, to_rgba

logger = logging.getLogger(__name__)

# returned when the palette is full
FALLBACK_INDEX = 0


def color_key(rgba: RGBA) -> int:
    """Pack RGBA into the 32-bit ``0xAARRGGBB`` key used for dedup."""
    r, g, b, a = rgba
    return (a << 24) | (r << 16) | (g << 8) | b


class Palette:
    """Insertion-ordered color table written straight into the output buffer."""

    def __init__(self, buffer: bytearray, layout: Layout):
        self._buffer = buffer
        self._plte = layout.plte.body
        self._trns = layout.trns.body
        self.capacity = layout.capacity
        self._index: Dict[int, int] = {}
        self._colors: List[RGBA] = []

    def __len__(self) -> int:
        return len(self._colors)

    def __contains__(self, color) -> bool:
        try:
            rgba = to_rgba(color)
        except InvalidColorError:
            return False
        return color_key(rgba) in self._index

    @property
    def full(self) -> bool:
        return len(self._colors) >= self.capacity

    def colors(self) -> List[RGBA]:
        return list(self._colors)

    def register(self, red, green=None, blue=None, alpha=None) -> int:
        """Return the palette index for a color, assigning the next free slot if new.

        When every slot is taken the color is not added; a warning is logged
        and index 0 is returned, so the pixel takes whatever color occupies
        slot 0.

        Raises:
            InvalidColorError: color string not recognized or components invalid
        """
        rgba = to_rgba(red, green, blue, alpha)
        key = color_key(rgba)
        if key in self._index:
            return self._index[key]

        if self.full:
            logger.warning(
                "palette capacity %d exhausted; color %r mapped to index %d, "
                "raise capacity to keep it distinct",
                self.capacity, rgba, FALLBACK_INDEX,
            )
            return FALLBACK_INDEX

        index = len(self._colors)
        r, g, b, a = rgba
        ndx = self._plte + 3 * index
        self._buffer[ndx:ndx + 3] = bytes((r, g, b))
        self._buffer[self._trns + index] = a

        self._index[key] = index
        self._colors.append(rgba)
        return index
