#!/usr/bin/env python3
"""
Palette Icon Demo

Draws a filled circle with a one-pixel outline into a small palette PNG and
writes it to disk (or prints it as a data URI).
"""
import argparse
import logging
from pathlib import Path

from pnglib import PNGImage


def draw_badge(size: int, fill: str, outline: str, capacity: int) -> PNGImage:
    img = PNGImage(size, size, capacity, background="transparent")
    c = (size - 1) / 2.0
    r = size * 0.45
    for y in range(size):
        for x in range(size):
            d2 = (x - c) ** 2 + (y - c) ** 2
            if d2 <= (r - 1) ** 2:
                img.set_pixel(x, y, fill)
            elif d2 <= r ** 2:
                img.set_pixel(x, y, outline)
    return img


def main() -> int:
    p = argparse.ArgumentParser()
    p.add_argument("--size", type=int, default=32)
    p.add_argument("--fill", default="#ff4d4d")
    p.add_argument("--outline", default="black")
    p.add_argument("--capacity", type=int, default=4)
    p.add_argument("--out", type=Path, default=Path("reports/badge.png"))
    p.add_argument("--data-uri", action="store_true", help="print a data: URI instead of writing a file")
    p.add_argument("-v", "--verbose", action="store_true")
    args = p.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    img = draw_badge(args.size, args.fill, args.outline, args.capacity)
    if args.data_uri:
        print("data:image/png;base64," + img.get_base64())
        return 0

    args.out.parent.mkdir(parents=True, exist_ok=True)
    path = img.save(args.out)
    print(f"Wrote {path} ({len(img.get_buffer())} bytes, {len(img.palette_colors())} colors)")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
