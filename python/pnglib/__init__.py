# python/pnglib/__init__.py
# Public surface of the palette PNG writer
# Exists to re-export the image class, config loader, color parsing and decode helpers
# RELEVANT FILES: python/pnglib/image.py, python/pnglib/config.py, tests/test_api.py
from .config import ImageConfig, load_image_config
from .errors import InvalidColorError, PNGLibError
from .image import PNGImage
from .io import png_to_numpy, write_png
from .layout import Layout, plan_layout
from .rgba import parse_color

__version__ = "0.1.0"

# short alias matching the historical module name
PNGlib = PNGImage

__all__ = [
    "PNGImage",
    "PNGlib",
    "ImageConfig",
    "load_image_config",
    "InvalidColorError",
    "PNGLibError",
    "Layout",
    "plan_layout",
    "parse_color",
    "png_to_numpy",
    "write_png",
    "__version__",
]
