"""quickscii conversion defaults — single source of truth.

Values come from the environment; entry points call ``load_dotenv()`` first
so a project ``.env`` file can supply them.
"""

import os
from dataclasses import asdict, dataclass, field, replace

from quickscii.ascii.charsets import DEFAULT_CHARSET, get_ramp
from quickscii.vision.normalizer import validate_dimensions

DEFAULT_WIDTH = 80
DEFAULT_HEIGHT = 40
DEFAULT_FONT_SIZE = 12
DEFAULT_PADDING = 20


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return int(raw)


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def _env_list(name: str) -> tuple[str, ...]:
    raw = os.getenv(name, "")
    return tuple(p for p in raw.split(os.pathsep) if p)


@dataclass(frozen=True)
class ConvertConfig:
    """Validated conversion settings."""

    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    charset_name: str = DEFAULT_CHARSET
    invert: bool = False
    font_size: int = DEFAULT_FONT_SIZE
    padding: int = DEFAULT_PADDING
    font_paths: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self):
        validate_dimensions(self.width, self.height)
        get_ramp(self.charset_name)
        if self.font_size < 1:
            raise ValueError("font_size must be a positive integer")
        if self.padding < 0:
            raise ValueError("padding must not be negative")

    @property
    def ramp(self) -> str:
        return get_ramp(self.charset_name)

    @classmethod
    def from_env(cls, **overrides) -> "ConvertConfig":
        """Build from QUICKSCII_* variables.

        Non-None ``overrides`` replace the environment values before
        validation, so an invalid variable that is overridden never fails.
        """
        values = {
            "width": lambda: _env_int("QUICKSCII_WIDTH", DEFAULT_WIDTH),
            "height": lambda: _env_int("QUICKSCII_HEIGHT", DEFAULT_HEIGHT),
            "charset_name": lambda: os.getenv("QUICKSCII_CHARSET", DEFAULT_CHARSET),
            "invert": lambda: _env_bool("QUICKSCII_INVERT", False),
            "font_size": lambda: _env_int("QUICKSCII_FONT_SIZE", DEFAULT_FONT_SIZE),
            "padding": lambda: _env_int("QUICKSCII_PADDING", DEFAULT_PADDING),
            "font_paths": lambda: _env_list("QUICKSCII_FONTS"),
        }
        unknown = set(overrides) - set(values)
        if unknown:
            raise TypeError(f"unknown config fields: {', '.join(sorted(unknown))}")
        merged = {
            name: overrides[name] if overrides.get(name) is not None else read()
            for name, read in values.items()
        }
        return cls(**merged)

    def update(self, **changes) -> "ConvertConfig":
        """Return a new config with the non-None ``changes`` applied."""
        return replace(self, **{k: v for k, v in changes.items() if v is not None})

    def to_dict(self) -> dict:
        d = asdict(self)
        d["font_paths"] = list(self.font_paths)
        d["charset"] = self.ramp
        return d
