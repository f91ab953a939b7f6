# Make `import pnglib` work from a fresh clone without installing:
# put repo/python on sys.path before any test module is collected.
import sys
from pathlib import Path

import pytest


def _repo_root() -> Path:
    return Path(__file__).resolve().parents[1]


def _ensure_python_path():
    repo = _repo_root()
    pkg_dir = repo / "python"
    if str(pkg_dir) not in sys.path:
        sys.path.insert(0, str(pkg_dir))


_ensure_python_path()


def pytest_configure(config):
    config.addinivalue_line(
        "markers", "slow: tests that build multi-block (tall) images"
    )


@pytest.fixture
def black_white_2x2():
    """2x2 image, 2 palette slots, black background, white pixel at (0, 0)."""
    from pnglib import PNGImage

    img = PNGImage(2, 2, 2, "black")
    img.set_pixel(0, 0, "white")
    return img
