"""
quickscii ASCII — Image Converter

Single pipeline entry point: normalize an image (file, bytes or BGR frame)
into an intensity buffer, map it onto a character ramp, and optionally
render the text as a PNG.
"""

import logging
from pathlib import Path
from typing import Optional, Sequence

import numpy as np

from quickscii.ascii import renderer
from quickscii.ascii.charsets import DEFAULT_CHARSET, get_ramp
from quickscii.ascii.glyph_mapper import AsciiArt, map_to_text
from quickscii.vision.normalizer import (
    normalize,
    normalize_bytes,
    normalize_frame,
    validate_dimensions,
)

logger = logging.getLogger("quickscii.ascii.converter")


class AsciiConverter:
    """Converts images to ASCII art.

    Parameters
    ----------
    width : int
        Number of characters per output row (default 80).
    height : int
        Number of rows in the output (default 40).
    charset : str
        Ramp name, one of quickscii.ascii.charsets.CHARSETS.
    invert : bool
        If True, intensity 0 maps to the last glyph instead of the first.
    """

    def __init__(
        self,
        width: int = 80,
        height: int = 40,
        charset: str = DEFAULT_CHARSET,
        invert: bool = False,
    ):
        validate_dimensions(width, height)
        get_ramp(charset)
        self.width = width
        self.height = height
        self.charset = charset
        self.invert = invert

    @classmethod
    def from_config(cls, config) -> "AsciiConverter":
        """Build from a quickscii.config.settings.ConvertConfig."""
        return cls(
            width=config.width,
            height=config.height,
            charset=config.charset_name,
            invert=config.invert,
        )

    @property
    def ramp(self) -> str:
        return get_ramp(self.charset)

    def convert(self, path) -> AsciiArt:
        """Convert an image file to ASCII art."""
        buffer = normalize(path, self.width, self.height)
        logger.debug("Converting %s", path)
        return self._map(buffer)

    def convert_bytes(self, data: bytes) -> AsciiArt:
        """Convert encoded image bytes (JPEG, PNG, ...) to ASCII art."""
        return self._map(normalize_bytes(data, self.width, self.height))

    def convert_frame(self, frame: np.ndarray) -> AsciiArt:
        """Convert an already-decoded BGR or grayscale frame to ASCII art."""
        return self._map(normalize_frame(frame, self.width, self.height))

    def convert_to_image(
        self,
        path,
        output_path,
        cell_size: int = renderer.DEFAULT_CELL_SIZE,
        padding: int = renderer.DEFAULT_PADDING,
        font_candidates: Optional[Sequence[str]] = None,
    ) -> Path:
        """Convert an image file and save the ASCII art as a PNG."""
        art = self.convert(path)
        return renderer.render(
            art, output_path, cell_size=cell_size, padding=padding,
            font_candidates=font_candidates,
        )

    def _map(self, buffer: np.ndarray) -> AsciiArt:
        return map_to_text(buffer, self.charset, invert=self.invert)


def asciify(path, width: int, height: int, charset: str = DEFAULT_CHARSET) -> str:
    """Convert an image file to an ASCII art string (rows newline-terminated)."""
    return AsciiConverter(width=width, height=height, charset=charset).convert(path).text


def asciify_to_image(
    input_path,
    output_path,
    width: int,
    height: int,
    charset: str = DEFAULT_CHARSET,
    cell_size: int = renderer.DEFAULT_CELL_SIZE,
) -> Path:
    """Convert an image file to ASCII art and save it as a PNG."""
    converter = AsciiConverter(width=width, height=height, charset=charset)
    return converter.convert_to_image(input_path, output_path, cell_size=cell_size)
