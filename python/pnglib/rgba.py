"""Color string parsing.

Resolves CSS-style color strings (named colors, ``#rgb``, ``#rrggbbaa``,
``rgb()``, ``hsl()`` ...) to 8-bit RGBA tuples using Pillow's ImageColor.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Optional, Tuple

from PIL import ImageColor

from .errors import InvalidColorError

RGBA = Tuple[int, int, int, int]

# names Pillow does not know about
_EXTRA_COLORS = {
    "transparent": (0, 0, 0, 0),
}


def parse_color(name: str) -> Optional[RGBA]:
    """Parse a color string into ``(r, g, b, a)``.

    Returns:
        RGBA tuple with components in 0-255, or None if the string is not a
        recognized color
    """
    key = str(name).strip().lower()
    if key in _EXTRA_COLORS:
        return _EXTRA_COLORS[key]
    try:
        r, g, b, a = ImageColor.getcolor(key, "RGBA")
    except ValueError:
        return None
    return (int(r), int(g), int(b), int(a))


def _component(value, label: str, source) -> int:
    try:
        i = int(value)
    except (TypeError, ValueError) as e:
        raise InvalidColorError(source, f"{label} must be an integer") from e
    if i != value:
        raise InvalidColorError(source, f"{label} must be an integer")
    if not 0 <= i <= 255:
        raise InvalidColorError(source, f"{label} must be within [0, 255]")
    return i


def _is_negative(value, source) -> bool:
    try:
        return value < 0
    except TypeError as e:
        raise InvalidColorError(source, "alpha must be an integer") from e


def to_rgba(red, green=None, blue=None, alpha=None) -> RGBA:
    """Normalize any accepted color input to an RGBA tuple.

    Accepts a color string, an ``(r, g, b[, a])`` sequence, or separate
    components. Alpha defaults to 255 when omitted or negative.

    Raises:
        InvalidColorError: unrecognized color string or bad components
    """
    if isinstance(red, str):
        rgba = parse_color(red)
        if rgba is None:
            raise InvalidColorError(red)
        return rgba

    source = red
    if isinstance(red, Sequence) or hasattr(red, "__array__"):
        values = [v for v in red]
        if len(values) not in (3, 4):
            raise InvalidColorError(source, "expected 3 or 4 components")
        red, green, blue = values[:3]
        alpha = values[3] if len(values) == 4 else None
    else:
        source = (red, green, blue, alpha)
        green = 0 if green is None else green
        blue = 0 if blue is None else blue

    if alpha is None or _is_negative(alpha, source):
        alpha = 255
    return (
        _component(red, "red", source),
        _component(green, "green", source),
        _component(blue, "blue", source),
        _component(alpha, "alpha", source),
    )
