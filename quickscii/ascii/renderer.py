"""
quickscii ASCII — Bitmap Renderer

Draws an AsciiArt result onto a grayscale canvas with a monospaced font.

Canvas size is fixed-cell: (cols * cell_size + 2 * padding) by
(rows * cell_size + 2 * padding), independent of font metrics. Glyphs are
dark (0) on a light (255) background.
"""

import io
import logging
import threading
from pathlib import Path
from typing import Optional, Sequence

from PIL import Image, ImageDraw, ImageFont

from quickscii.ascii.glyph_mapper import AsciiArt
from quickscii.errors import FontUnavailable, InvalidInput, PersistFailure

logger = logging.getLogger("quickscii.ascii.renderer")

DEFAULT_CELL_SIZE = 12
DEFAULT_PADDING = 20

BACKGROUND = 255
FOREGROUND = 0

# Resolved by Pillow against the platform font directories
FONT_CANDIDATES = (
    "DejaVuSansMono.ttf",
    "LiberationMono-Regular.ttf",
    "NotoSansMono-Regular.ttf",
    "FreeMono.ttf",
    "Menlo.ttc",
    "Courier New.ttf",
    "cour.ttf",
)

_font_cache: dict[tuple[str, int], ImageFont.FreeTypeFont] = {}
_font_lock = threading.Lock()


def load_font(size: int = DEFAULT_CELL_SIZE, candidates: Optional[Sequence[str]] = None):
    """Load the first usable monospaced font from *candidates*.

    Explicit candidates are tried before FONT_CANDIDATES. Loaded fonts are
    cached per (candidate, size).
    """
    explicit = [str(c) for c in candidates or ()]
    ordered = explicit + [c for c in FONT_CANDIDATES if c not in explicit]
    with _font_lock:
        for name in ordered:
            key = (name, size)
            font = _font_cache.get(key)
            if font is not None:
                return font
            try:
                font = ImageFont.truetype(name, size)
            except (OSError, ValueError) as e:
                logger.debug("Font %s unavailable: %s", name, e)
                continue
            _font_cache[key] = font
            logger.debug("Loaded font %s at size %d", name, size)
            return font
    raise FontUnavailable(
        f"failed to load font: none of {', '.join(ordered)} could be loaded"
    )


def canvas_size(art: AsciiArt, cell_size: int = DEFAULT_CELL_SIZE,
                padding: int = DEFAULT_PADDING) -> tuple[int, int]:
    return (art.width * cell_size + 2 * padding, art.height * cell_size + 2 * padding)


def render_bitmap(
    art: AsciiArt,
    cell_size: int = DEFAULT_CELL_SIZE,
    padding: int = DEFAULT_PADDING,
    font=None,
    font_candidates: Optional[Sequence[str]] = None,
) -> Image.Image:
    """Draw *art* onto a new mode "L" image. The caller owns (and closes) it."""
    if cell_size < 1 or padding < 0:
        raise InvalidInput(
            f"invalid render geometry: cell_size={cell_size!r}, padding={padding!r}"
        )
    if font is None:
        font = load_font(cell_size, font_candidates)

    canvas = Image.new("L", canvas_size(art, cell_size, padding), color=BACKGROUND)
    draw = ImageDraw.Draw(canvas)
    for i, line in enumerate(art.lines):
        draw.text((padding, padding + i * cell_size), line, fill=FOREGROUND, font=font)
    return canvas


def save_bitmap(image: Image.Image, output_path) -> Path:
    """Write *image* as PNG. The parent directory must already exist."""
    path = Path(output_path)
    try:
        image.save(path, format="PNG")
    except (OSError, ValueError) as e:
        raise PersistFailure(f"failed to save image: {path} ({e})") from e
    logger.info("Saved ASCII image %s (%dx%d)", path, image.width, image.height)
    return path


def render(
    art: AsciiArt,
    output_path,
    cell_size: int = DEFAULT_CELL_SIZE,
    padding: int = DEFAULT_PADDING,
    font_candidates: Optional[Sequence[str]] = None,
) -> Path:
    """Render *art* and persist it as a PNG at *output_path*."""
    if output_path is None or str(output_path) == "":
        raise InvalidInput("invalid output path: path cannot be empty")
    with render_bitmap(art, cell_size, padding, font_candidates=font_candidates) as canvas:
        return save_bitmap(canvas, output_path)


def render_png_bytes(
    art: AsciiArt,
    cell_size: int = DEFAULT_CELL_SIZE,
    padding: int = DEFAULT_PADDING,
    font_candidates: Optional[Sequence[str]] = None,
) -> bytes:
    """Render *art* to in-memory PNG bytes."""
    with render_bitmap(art, cell_size, padding, font_candidates=font_candidates) as canvas:
        buf = io.BytesIO()
        canvas.save(buf, format="PNG")
        return buf.getvalue()
