"""Exception types raised by pnglib."""

from __future__ import annotations


class PNGLibError(Exception):
    """Base class for pnglib errors."""


class InvalidColorError(PNGLibError, ValueError):
    """Raised when a color name or component tuple cannot be resolved to RGBA."""

    def __init__(self, color, reason: str | None = None):
        self.color = color
        msg = f"invalid color {color!r}"
        if reason:
            msg = f"{msg}: {reason}"
        super().__init__(msg)
