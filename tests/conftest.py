"""
Shared test fixtures and configuration for the quickscii test suite.

Synthetic images are written with OpenCV into pytest's tmp_path so tests
never depend on files shipped with the repo.
"""

import sys
from pathlib import Path

import cv2
import numpy as np
import pytest

# Add project root to path (web/ is not an installed package)
project_root = str(Path(__file__).resolve().parent.parent)
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from quickscii.ascii import renderer
from quickscii.errors import FontUnavailable


def _font_available() -> bool:
    try:
        renderer.load_font(renderer.DEFAULT_CELL_SIZE)
    except FontUnavailable:
        return False
    return True


requires_font = pytest.mark.skipif(
    not _font_available(),
    reason="no monospaced TrueType font installed",
)


# ---------------------------------------------------------------------------
# Image helpers
# ---------------------------------------------------------------------------


def make_gradient_frame(w=640, h=480) -> np.ndarray:
    """BGR frame with a horizontal brightness gradient."""
    gray = np.linspace(0, 255, w, dtype=np.uint8)
    gray = np.tile(gray, (h, 1))
    return cv2.cvtColor(gray, cv2.COLOR_GRAY2BGR)


def make_solid_frame(brightness: int, w=64, h=48) -> np.ndarray:
    return np.full((h, w, 3), brightness, dtype=np.uint8)


def make_checkerboard(w=4, h=2) -> np.ndarray:
    """Single-channel 0/255 checkerboard, one pixel per cell."""
    board = np.zeros((h, w), dtype=np.uint8)
    board[(np.indices((h, w)).sum(axis=0) % 2) == 1] = 255
    return board


def write_png(path: Path, frame: np.ndarray) -> Path:
    assert cv2.imwrite(str(path), frame)
    return path


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def gradient_png(tmp_path) -> Path:
    return write_png(tmp_path / "gradient.png", make_gradient_frame())


@pytest.fixture
def checkerboard_png(tmp_path) -> Path:
    return write_png(tmp_path / "checker.png", make_checkerboard())


@pytest.fixture
def gradient_jpeg() -> bytes:
    _, buf = cv2.imencode(".jpg", make_gradient_frame(), [cv2.IMWRITE_JPEG_QUALITY, 95])
    return buf.tobytes()


@pytest.fixture
def corrupt_file(tmp_path) -> Path:
    path = tmp_path / "corrupt.png"
    path.write_bytes(b"not an image at all")
    return path
