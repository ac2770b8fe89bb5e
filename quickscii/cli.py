#!/usr/bin/env python3
"""CLI for converting images to ASCII art."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

from quickscii.ascii.charsets import CHARSETS
from quickscii.ascii.converter import AsciiConverter
from quickscii.config.settings import ConvertConfig
from quickscii.errors import AsciifyError, PersistFailure
from quickscii.utils.logging_config import setup_logging

logger = logging.getLogger("quickscii.cli")


def _config_from_args(args: argparse.Namespace, **extra) -> ConvertConfig:
    """Merge flags over QUICKSCII_* variables, then validate once."""
    return ConvertConfig.from_env(
        width=args.width,
        height=args.height,
        charset_name=args.charset,
        invert=args.invert,
        **extra,
    )


def cmd_text(args: argparse.Namespace) -> None:
    config = _config_from_args(args)
    art = AsciiConverter.from_config(config).convert(args.image)
    if args.output:
        try:
            Path(args.output).write_text(art.text, encoding="utf-8")
        except OSError as e:
            raise PersistFailure(f"failed to write text: {args.output} ({e})") from e
        logger.info("Wrote %dx%d ASCII art to %s", art.width, art.height, args.output)
    else:
        sys.stdout.write(art.text)


def cmd_image(args: argparse.Namespace) -> None:
    config = _config_from_args(
        args,
        font_size=args.cell_size,
        padding=args.padding,
        font_paths=tuple(args.font) if args.font else None,
    )
    converter = AsciiConverter.from_config(config)
    path = converter.convert_to_image(
        args.image,
        args.output,
        cell_size=config.font_size,
        padding=config.padding,
        font_candidates=config.font_paths,
    )
    print(path)


def cmd_charsets(args: argparse.Namespace) -> None:
    width = max(len(name) for name in CHARSETS)
    for name, ramp in CHARSETS.items():
        print(f"{name:<{width}}  {ramp}")


def _add_grid_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("image", help="Path to the source image")
    p.add_argument("--width", "-W", type=int, default=None, help="Characters per row")
    p.add_argument("--height", "-H", type=int, default=None, help="Number of rows")
    p.add_argument("--charset", "-c", choices=list(CHARSETS), default=None)
    p.add_argument("--invert", action=argparse.BooleanOptionalAction, default=None,
                   help="Map dark pixels to the last glyph (overrides QUICKSCII_INVERT)")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="quickscii", description="Convert images to ASCII art")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("--log-file", default=None, help="Also log to this file (rotated)")

    sub = parser.add_subparsers(dest="command", required=True)

    # text
    p = sub.add_parser("text", help="Print ASCII art")
    _add_grid_args(p)
    p.add_argument("--output", "-o", default=None, help="Write to file instead of stdout")

    # image
    p = sub.add_parser("image", help="Render ASCII art to a PNG")
    _add_grid_args(p)
    p.add_argument("output", help="Destination PNG path")
    p.add_argument("--cell-size", type=int, default=None, help="Glyph cell size in pixels")
    p.add_argument("--padding", type=int, default=None, help="Canvas padding in pixels")
    p.add_argument("--font", action="append", default=None,
                   help="Font file to try first (repeatable)")

    # charsets
    sub.add_parser("charsets", help="List available character ramps")

    return parser


def main(argv: list[str] | None = None) -> int:
    load_dotenv(find_dotenv(usecwd=True))
    args = build_parser().parse_args(argv)
    setup_logging(debug=args.debug, log_file=args.log_file)

    handlers = {"text": cmd_text, "image": cmd_image, "charsets": cmd_charsets}
    try:
        handlers[args.command](args)
    except AsciifyError as e:
        logger.debug("%s failed at stage %s", args.command, e.stage)
        print(f"error: {e}", file=sys.stderr)
        return 1
    except ValueError as e:
        # Malformed QUICKSCII_* environment values
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
