"""
quickscii ASCII — Glyph Mapper

Quantizes an intensity buffer onto a character ramp and assembles the
result row-major (top-to-bottom, left-to-right).

Line convention: every row, the last one included, is terminated by "\\n".
``AsciiArt.text.splitlines()`` gives exactly ``height`` rows, while
``text.split("\\n")`` ends with one empty segment.
"""

import logging
from dataclasses import dataclass

import numpy as np

from quickscii.ascii.charsets import get_ramp
from quickscii.errors import InvalidBuffer

logger = logging.getLogger("quickscii.ascii.glyph_mapper")

LINE_TERMINATOR = "\n"


@dataclass(frozen=True)
class AsciiArt:
    """Fully materialized text result, one string per buffer row."""

    lines: tuple[str, ...]
    width: int
    height: int
    charset: str

    @property
    def text(self) -> str:
        return "".join(line + LINE_TERMINATOR for line in self.lines)

    def __str__(self) -> str:
        return self.text

    def to_dict(self) -> dict:
        return {
            "ascii": self.text,
            "lines": list(self.lines),
            "width": self.width,
            "height": self.height,
            "charset": self.charset,
        }


def glyph_indices(buffer: np.ndarray, ramp_length: int, invert: bool = False) -> np.ndarray:
    """Map uint8 samples to ramp indices with floor(p * (N-1) / 255).

    Integer arithmetic keeps 0 -> 0 and 255 -> N-1 exact. With ``invert``
    the sample is flipped (255 - p) before quantizing.
    """
    if ramp_length < 2:
        raise ValueError("ramp must contain at least 2 glyphs")
    samples = buffer.astype(np.int32)
    if invert:
        samples = 255 - samples
    return (samples * (ramp_length - 1)) // 255


def map_to_text(buffer: np.ndarray, charset: str, invert: bool = False) -> AsciiArt:
    """Convert an intensity buffer to ASCII art using the named ramp.

    Raises InvalidCharset for an unknown ramp name and InvalidBuffer for
    anything other than a non-empty 2-D uint8 array. Nothing is returned
    on failure.
    """
    ramp = get_ramp(charset)
    _check_buffer(buffer)

    indices = glyph_indices(buffer, len(ramp), invert=invert)
    lines = tuple("".join(ramp[i] for i in row) for row in indices)
    rows, cols = buffer.shape
    logger.debug("Mapped %dx%d buffer with charset %s", cols, rows, charset)
    return AsciiArt(lines=lines, width=cols, height=rows, charset=charset)


def _check_buffer(buffer) -> None:
    if not isinstance(buffer, np.ndarray):
        raise InvalidBuffer(f"invalid buffer: expected numpy array, got {type(buffer).__name__}")
    if buffer.ndim != 2:
        raise InvalidBuffer(f"invalid buffer: expected 2-D grid, got shape {buffer.shape}")
    if buffer.dtype != np.uint8:
        raise InvalidBuffer(f"invalid buffer: expected uint8 samples, got {buffer.dtype}")
    if buffer.shape[0] == 0 or buffer.shape[1] == 0:
        raise InvalidBuffer("invalid image dimensions after processing: buffer is empty")
