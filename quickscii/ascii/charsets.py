"""
Character ramps for glyph mapping.

Each ramp is an immutable string indexed 0..N-1. Intensity 0 selects the
first glyph and intensity 255 the last, so ramp ordering is purely a content
decision.
"""

from types import MappingProxyType
from typing import Mapping

from quickscii.errors import InvalidCharset

CHARSET_BLOCK = "▪▦▥▤▓▒░▁▂▃▄▅▆▇█"
CHARSET_POLY = "▫▧▨▥▲▱▯▰△▲△▲△▲△▲"
CHARSET_MIX = " .:-=+*#%@▁▂▃▄▅█"

# Fixed ramp of the single-ramp pipeline, dense to sparse
CHARSET_LEGACY = "@#8&%$?*+;:,."

# Pure ASCII, renders with any font
CHARSET_STANDARD = " .:-=+*#%@"

DEFAULT_CHARSET = "mix"

CHARSETS: Mapping[str, str] = MappingProxyType({
    "block": CHARSET_BLOCK,
    "poly": CHARSET_POLY,
    "mix": CHARSET_MIX,
    "legacy": CHARSET_LEGACY,
    "standard": CHARSET_STANDARD,
})


def charset_names() -> list[str]:
    return list(CHARSETS)


def get_ramp(name: str) -> str:
    """Look up a ramp by name.

    Raises InvalidCharset for anything not in the registry, including
    non-string values.
    """
    if not isinstance(name, str) or name not in CHARSETS:
        raise InvalidCharset(
            f"invalid charset: {name!r} (expected one of {', '.join(CHARSETS)})"
        )
    return CHARSETS[name]
