#!/usr/bin/env python3
"""
quickscii — ASCII Conversion Server

FastAPI service that:
- Converts base64-encoded images to ASCII art text
- Renders ASCII art to PNG (returned base64-encoded)
- Reports the available character ramps and default settings
"""

import base64
import binascii
import logging
import os
import sys
import time
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
load_dotenv()

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

# Ensure project root is on path
_project_root = str(Path(__file__).resolve().parent.parent)
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

from quickscii.ascii import renderer
from quickscii.ascii.charsets import CHARSETS
from quickscii.ascii.converter import AsciiConverter
from quickscii.config.settings import ConvertConfig
from quickscii.errors import (
    AsciifyError,
    DecodeFailure,
    FontUnavailable,
    InvalidCharset,
    InvalidInput,
)
from quickscii.utils.logging_config import setup_logging

logger = logging.getLogger("quickscii.ascii_server")

PORT = int(os.getenv("QUICKSCII_PORT", "8084"))

_start_time = time.time()
defaults = ConvertConfig.from_env()

app = FastAPI(title="quickscii ASCII")
app.add_middleware(CORSMiddleware, allow_origins=["*"], allow_methods=["*"], allow_headers=["*"])


# ---------------------------------------------------------------------------
# Request models
# ---------------------------------------------------------------------------

class ConvertRequest(BaseModel):
    image_b64: str = Field(min_length=1)
    width: Optional[int] = Field(None, ge=1, le=1000)
    height: Optional[int] = Field(None, ge=1, le=1000)
    charset: Optional[str] = None
    invert: Optional[bool] = None


class RenderRequest(ConvertRequest):
    cell_size: Optional[int] = Field(None, ge=4, le=64)
    padding: Optional[int] = Field(None, ge=0, le=200)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

_ERROR_STATUS = {
    InvalidInput: 400,
    InvalidCharset: 400,
    DecodeFailure: 400,
    FontUnavailable: 503,
}


def _error_response(e: AsciifyError) -> JSONResponse:
    status = next((code for cls, code in _ERROR_STATUS.items() if isinstance(e, cls)), 500)
    logger.warning("Conversion failed at stage %s: %s", e.stage, e)
    return JSONResponse({"error": str(e), "stage": e.stage}, status)


def _convert(req: ConvertRequest):
    try:
        data = base64.b64decode(req.image_b64, validate=True)
    except (binascii.Error, ValueError) as e:
        raise DecodeFailure(f"failed to decode base64 image data: {e}") from e

    converter = AsciiConverter(
        width=req.width or defaults.width,
        height=req.height or defaults.height,
        charset=defaults.charset_name if req.charset is None else req.charset,
        invert=defaults.invert if req.invert is None else req.invert,
    )
    return converter.convert_bytes(data)


# ---------------------------------------------------------------------------
# REST endpoints
# ---------------------------------------------------------------------------

@app.get("/api/ascii/status")
async def get_status():
    """Health/status endpoint for heartbeat checks."""
    return {
        "service": "ascii_server",
        "status": "ok",
        "port": PORT,
        "uptime_seconds": round(time.time() - _start_time, 1),
        "config": defaults.to_dict(),
    }


@app.get("/api/ascii/charsets")
async def get_charsets():
    return dict(CHARSETS)


@app.post("/api/ascii/convert")
def convert(req: ConvertRequest):
    """Convert an image to ASCII art text."""
    try:
        art = _convert(req)
    except AsciifyError as e:
        return _error_response(e)
    return art.to_dict()


@app.post("/api/ascii/render")
def render(req: RenderRequest):
    """Convert an image to ASCII art and render it as a PNG."""
    cell_size = req.cell_size or defaults.font_size
    padding = defaults.padding if req.padding is None else req.padding
    try:
        art = _convert(req)
        png = renderer.render_png_bytes(
            art, cell_size=cell_size, padding=padding,
            font_candidates=defaults.font_paths,
        )
    except AsciifyError as e:
        return _error_response(e)
    width, height = renderer.canvas_size(art, cell_size, padding)
    return {
        "png_b64": base64.b64encode(png).decode("ascii"),
        "width": width,
        "height": height,
        "charset": art.charset,
    }


if __name__ == "__main__":
    setup_logging()
    logger.info("ASCII conversion server starting on port %d", PORT)
    uvicorn.run(app, host="0.0.0.0", port=PORT)
