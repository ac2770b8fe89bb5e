"""
quickscii — image to ASCII art conversion.

Decodes an image, resizes it to a character grid, maps brightness onto a
character ramp and optionally renders the result as a PNG.
"""

from quickscii.ascii.charsets import CHARSETS, get_ramp
from quickscii.ascii.converter import AsciiConverter, asciify, asciify_to_image
from quickscii.ascii.glyph_mapper import AsciiArt, map_to_text
from quickscii.errors import (
    AsciifyError,
    ConversionFailure,
    DecodeFailure,
    FontUnavailable,
    InvalidBuffer,
    InvalidCharset,
    InvalidInput,
    PersistFailure,
    ResizeFailure,
)
from quickscii.vision.normalizer import normalize

__version__ = "0.3.0"

__all__ = [
    "AsciiArt",
    "AsciiConverter",
    "AsciifyError",
    "CHARSETS",
    "ConversionFailure",
    "DecodeFailure",
    "FontUnavailable",
    "InvalidBuffer",
    "InvalidCharset",
    "InvalidInput",
    "PersistFailure",
    "ResizeFailure",
    "asciify",
    "asciify_to_image",
    "get_ramp",
    "map_to_text",
    "normalize",
]
