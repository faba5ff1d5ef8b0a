"""Enumerations for localepick type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class ErrorKind(StrEnum):
    """Kind of failure reported by detector and registry operations.

    StrEnum provides automatic string conversion: str(ErrorKind.UNSUPPORTED) == "unsupported"

    The member value is a stable identifier; the human-readable prefix used
    in error messages is available as ``kind.message``.
    """

    NOT_FOUND = "not_found"
    """No locale string obtainable from any environment variable."""

    PARSE_FAILURE = "parse_failure"
    """String could not be parsed into a language tag, or detection failed upstream."""

    UNSUPPORTED = "unsupported"
    """Parsed or detected language is not in the supported set."""

    FALLBACK_UNDEFINED = "fallback_undefined"
    """Resolution needed the fallback language but none is configured."""

    FALLBACK_UNSUPPORTED = "fallback_unsupported"
    """Configured fallback language is itself not supported."""

    @property
    def message(self) -> str:
        """Message prefix carried by every error of this kind."""
        return _KIND_MESSAGES[self]


_KIND_MESSAGES: dict[ErrorKind, str] = {
    ErrorKind.NOT_FOUND: "could not detect language",
    ErrorKind.PARSE_FAILURE: "language identifier cannot be parsed",
    ErrorKind.UNSUPPORTED: "language not supported",
    ErrorKind.FALLBACK_UNDEFINED: "no fallback language defined",
    ErrorKind.FALLBACK_UNSUPPORTED: "defined fallback language is not supported",
}


__all__ = [
    "ErrorKind",
]
