"""Errors raised by the parsing layer.

Both kinds are caught at the ``JsonFormatter`` / ``TimeConverter``
boundary and surfaced as a message next to an empty result.
"""


class DevUtilsError(ValueError):
    """Base error for this package."""


class ParseError(DevUtilsError):
    """Raised when text is not well-formed JSON or not a readable date/time."""


class RangeError(DevUtilsError):
    """Raised when a numeric timestamp is not positive."""
