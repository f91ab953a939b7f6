# python/pnglib/config.py
# Image parameter parsing and validation for palette PNG construction
# Exists to give mapping/JSON/keyword construction one validated entry point
# RELEVANT FILES: python/pnglib/image.py, python/pnglib/layout.py, tests/test_config.py
from __future__ import annotations

import copy
import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Tuple, Union

import numpy as np

from .layout import MAX_PALETTE

ConfigSource = Union["ImageConfig", Mapping[str, Any], str, Path, None]
Background = Union[str, Tuple[int, ...], None]

# historical default: the slot count used to be passed as "depth"
DEFAULT_CAPACITY = 8

_ALIASES: Dict[str, str] = {
    "width": "width",
    "w": "width",
    "height": "height",
    "h": "height",
    "capacity": "capacity",
    "depth": "capacity",
    "palettesize": "capacity",
    "colors": "capacity",
    "background": "background",
    "bg": "background",
    "backgroundcolor": "background",
}


def _normalize_key(value: Any) -> str:
    return "".join(
        c
        for c in str(value).strip().lower()
        if c not in {"-", "_", " ", "."}
    )


def _as_int(name: str, v) -> int:
    if isinstance(v, bool):
        raise ValueError(f"{name} must be an integer, got bool")
    try:
        i = int(v)
    except Exception as e:
        raise ValueError(f"{name} must be an integer, got {type(v).__name__}") from e
    if i != v:
        raise ValueError(f"{name} must be an integer, got {v!r}")
    return i


def _as_background(value: Any) -> Background:
    if value is None or isinstance(value, str):
        return value
    if hasattr(value, "__array__"):
        value = np.asarray(value).tolist()
    if isinstance(value, (list, tuple)) and len(value) in (3, 4):
        return tuple(value)
    raise ValueError("background must be a color string or a sequence of 3 or 4 components")


@dataclass
class ImageConfig:
    width: int = 1
    height: int = 1
    capacity: int = DEFAULT_CAPACITY
    background: Background = None

    def to_dict(self) -> dict:
        return {
            "width": self.width,
            "height": self.height,
            "capacity": self.capacity,
            "background": list(self.background) if isinstance(self.background, tuple) else self.background,
        }

    def copy(self) -> "ImageConfig":
        return copy.deepcopy(self)

    def validate(self) -> None:
        self.width = _as_int("width", self.width)
        self.height = _as_int("height", self.height)
        self.capacity = _as_int("capacity", self.capacity)
        self.background = _as_background(self.background)
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"width and height must be > 0, got {self.width}x{self.height}")
        if not 1 <= self.capacity <= MAX_PALETTE:
            raise ValueError(f"capacity must be within [1, {MAX_PALETTE}], got {self.capacity}")

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any], default: Optional["ImageConfig"] = None) -> "ImageConfig":
        base = copy.deepcopy(default) if default is not None else cls()
        for raw_key, value in data.items():
            key = _ALIASES.get(_normalize_key(raw_key))
            if key is None:
                raise ValueError(f"Unknown image config key: {raw_key!r}")
            if key == "background":
                base.background = _as_background(value)
            else:
                setattr(base, key, _as_int(key, value))
        return base


def _load_from_path(path: Path) -> Mapping[str, Any]:
    suffix = path.suffix.lower()
    text = path.read_text(encoding="utf-8")
    if suffix in {".json", ""}:
        data = json.loads(text)
        if not isinstance(data, Mapping):
            raise TypeError(f"image config file must contain a JSON object: {path}")
        return data
    raise ValueError(f"Unsupported image config file format: {path}")


def load_image_config(config: ConfigSource = None, overrides: Optional[Mapping[str, Any]] = None) -> ImageConfig:
    """Build a validated ImageConfig.

    Args:
        config: ImageConfig, mapping, path to a JSON file, or None for defaults
        overrides: Keyword-style values applied on top (aliases such as ``w``,
            ``depth`` or ``bg`` are accepted)

    Returns:
        Validated ImageConfig
    """
    if isinstance(config, ImageConfig):
        cfg = config.copy()
    elif isinstance(config, Mapping):
        cfg = ImageConfig.from_mapping(config)
    elif isinstance(config, (str, Path)):
        cfg = ImageConfig.from_mapping(_load_from_path(Path(config)))
    elif config is None:
        cfg = ImageConfig()
    else:
        raise TypeError("config must be ImageConfig, mapping, path, or None")

    if overrides:
        cfg = ImageConfig.from_mapping(overrides, cfg)
    cfg.validate()
    return cfg
