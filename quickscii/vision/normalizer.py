"""
quickscii Vision — Image Normalizer

Decodes an image, resizes it to the character grid with nearest-neighbour
interpolation and reduces it to a single uint8 intensity channel.
Every stage returns a new array; inputs are never modified in place.
"""

import logging
from pathlib import Path

import cv2
import numpy as np

from quickscii.errors import (
    ConversionFailure,
    DecodeFailure,
    InvalidInput,
    ResizeFailure,
)

logger = logging.getLogger("quickscii.vision.normalizer")


def validate_dimensions(width, height) -> None:
    """Raise InvalidInput unless width and height are positive integers."""
    for value in (width, height):
        if isinstance(value, bool) or not isinstance(value, (int, np.integer)) or value < 1:
            raise InvalidInput(
                "invalid dimensions: width and height must be positive integers "
                f"(got width={width!r}, height={height!r})"
            )


def normalize(path, width: int, height: int) -> np.ndarray:
    """Load an image file and reduce it to a (height, width) intensity buffer.

    Parameters
    ----------
    path : str or Path
        Image file readable by OpenCV (JPEG, PNG, BMP, ...).
    width, height : int
        Target character-grid dimensions.

    Returns
    -------
    np.ndarray
        uint8 array of shape (height, width).
    """
    if path is None or str(path) == "":
        raise InvalidInput("invalid path: path cannot be empty")
    validate_dimensions(width, height)

    try:
        data = Path(path).read_bytes()
    except OSError as e:
        raise DecodeFailure(f"failed to read image at path: {path} ({e})") from e

    frame = _decode(data, source=str(path))
    return normalize_frame(frame, width, height)


def normalize_bytes(data: bytes, width: int, height: int) -> np.ndarray:
    """Same as normalize() but for encoded image bytes already in memory."""
    if not data:
        raise InvalidInput("invalid image data: data cannot be empty")
    validate_dimensions(width, height)
    frame = _decode(data, source="<bytes>")
    return normalize_frame(frame, width, height)


def normalize_frame(frame: np.ndarray, width: int, height: int) -> np.ndarray:
    """Resize and grayscale an already-decoded frame.

    Accepts BGR (H, W, 3), BGRA (H, W, 4) or single-channel (H, W) arrays.
    """
    validate_dimensions(width, height)
    if frame is None or not isinstance(frame, np.ndarray) or frame.size == 0:
        raise InvalidInput("invalid frame: frame must be a non-empty array")
    if frame.dtype != np.uint8:
        raise InvalidInput(f"invalid frame: expected uint8 samples, got {frame.dtype}")

    small = _resize(frame, width, height)
    gray = _to_gray(small)
    logger.debug("Normalized %s frame to %dx%d", frame.shape, width, height)
    return gray


def _decode(data: bytes, source: str) -> np.ndarray:
    arr = np.frombuffer(data, dtype=np.uint8)
    frame = cv2.imdecode(arr, cv2.IMREAD_COLOR)
    if frame is None or frame.size == 0:
        raise DecodeFailure(f"failed to read image at path: {source}")
    logger.debug("Decoded %s: %dx%d", source, frame.shape[1], frame.shape[0])
    return frame


def _resize(frame: np.ndarray, width: int, height: int) -> np.ndarray:
    try:
        small = cv2.resize(frame, (width, height), interpolation=cv2.INTER_NEAREST)
    except cv2.error as e:
        raise ResizeFailure(f"failed to resize image to {width}x{height}: {e}") from e
    if small is None or small.size == 0 or small.shape[:2] != (height, width):
        raise ResizeFailure(f"failed to resize image to {width}x{height}")
    return small


def _to_gray(small: np.ndarray) -> np.ndarray:
    if small.ndim == 2:
        gray = small.copy()
    else:
        code = cv2.COLOR_BGRA2GRAY if small.shape[2] == 4 else cv2.COLOR_BGR2GRAY
        try:
            gray = cv2.cvtColor(small, code)
        except cv2.error as e:
            raise ConversionFailure(f"failed to convert image to grayscale: {e}") from e
    if gray is None or gray.size == 0:
        raise ConversionFailure("failed to convert image to grayscale")
    return gray.astype(np.uint8, copy=False)
