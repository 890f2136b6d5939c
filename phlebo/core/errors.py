"""
Exception types shared by the regional formatting and map clustering modules.
"""


class PhleboError(Exception):
    """Base class for errors raised by this package."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class InvalidArgumentError(PhleboError, ValueError):
    """Raised when a caller passes a value the operation cannot work with."""


class DateParseError(PhleboError, ValueError):
    """Exception raised when text does not match the expected date pattern."""

    def __init__(self, message: str, text: str = "", pattern: str = ""):
        self.text = text
        self.pattern = pattern
        super().__init__(f"{message}: {text!r} (expected {pattern})" if pattern else message)


class RegionConfigError(PhleboError):
    """Raised when a region registry is built from inconsistent configs."""
