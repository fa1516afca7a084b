"""Typed exceptions for span validation and configuration loading."""


class SpanError(ValueError):
    """Base class for span related errors."""


class InvalidSpanArgumentError(SpanError):
    """Raised when span coordinates are inconsistent or overflow the domain."""


class SpanOutOfRangeError(InvalidSpanArgumentError, IndexError):
    """Raised when a supplied length is negative."""


class ConfigError(ValueError):
    """Raised when configuration cannot be loaded or validated."""
