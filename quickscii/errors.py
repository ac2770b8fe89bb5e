"""
quickscii — error taxonomy

Every failure raised by the pipeline derives from AsciifyError and carries a
``stage`` naming where it happened. Caller-argument errors also subclass
ValueError so generic ``except ValueError`` handlers keep working.
"""


class AsciifyError(Exception):
    """Base class for all quickscii pipeline failures."""

    stage = "pipeline"


class InvalidInput(AsciifyError, ValueError):
    """Malformed caller arguments (empty path, non-positive dimensions)."""

    stage = "input"


class InvalidCharset(AsciifyError, ValueError):
    """Charset name is not in the ramp registry."""

    stage = "charset"


class DecodeFailure(AsciifyError):
    """Source image is missing, unreadable, or corrupt."""

    stage = "decode"


class ResizeFailure(AsciifyError):
    """Resize produced an empty or wrongly shaped buffer."""

    stage = "resize"


class ConversionFailure(AsciifyError):
    """Grayscale conversion produced an empty buffer."""

    stage = "convert"


class InvalidBuffer(AsciifyError, ValueError):
    """Intensity buffer is not a non-empty 2-D uint8 grid."""

    stage = "map"


class FontUnavailable(AsciifyError):
    """None of the candidate monospaced fonts could be loaded."""

    stage = "font"


class PersistFailure(AsciifyError):
    """Output file could not be written."""

    stage = "persist"
