"""Language resolution error type.

Detector and registry operations never raise for expected failures. They
return a ``LanguageError`` alongside their result, in the same way
``(result, error)`` tuples are returned throughout the package.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from localepick.enums import ErrorKind

__all__ = ["LanguageError", "is_error"]


class LanguageError(Exception):
    """Failure of a detection, parsing, or resolution step.

    The string form always starts with the kind's message prefix. When the
    error wraps an underlying failure, the cause's message follows after
    ``": "``, so the full chain survives stringification.

    Attributes:
        kind: Which of the five failure kinds this is
        cause: Underlying error being wrapped (optional)
        input_value: The string that was being detected or parsed (optional)

    Example:
        >>> err = LanguageError(ErrorKind.UNSUPPORTED, input_value="fr-FR")
        >>> str(err)
        'language not supported'
        >>> err.kind
        <ErrorKind.UNSUPPORTED: 'unsupported'>
    """

    def __init__(
        self,
        kind: ErrorKind,
        *,
        cause: BaseException | None = None,
        input_value: str = "",
    ) -> None:
        """Initialize LanguageError.

        Args:
            kind: Failure kind
            cause: Underlying error being wrapped
            input_value: The locale string or BCP-47 string involved
        """
        message = kind.message if cause is None else f"{kind.message}: {cause}"
        super().__init__(message)
        self.kind = kind
        self.cause = cause
        self.input_value = input_value
        if cause is not None:
            self.__cause__ = cause

    def __repr__(self) -> str:
        return f"LanguageError(kind={self.kind!r}, message={str(self)!r})"


def is_error(error: BaseException | None, kind: ErrorKind) -> bool:
    """Check whether ``error`` is a failure of the given kind.

    ``LanguageError`` instances are matched on their ``kind`` tag, then on the
    kind of any wrapped ``cause``: a registry PARSE_FAILURE raised because
    detection found no locale also matches NOT_FOUND. Any other exception
    (for example one re-wrapped by caller code that only kept the message)
    is matched by comparing its string form against the kind's message prefix.

    Args:
        error: Error returned by a detector or registry operation, or None
        kind: Kind to test for

    Returns:
        True if ``error`` is of the given kind. Always False for None.

    Example:
        >>> tag, err = registry.detect_supported_language()
        >>> if is_error(err, ErrorKind.FALLBACK_UNDEFINED):
        ...     registry.set_fallback_language(default_tag)
    """
    if error is None:
        return False
    if isinstance(error, LanguageError):
        return error.kind is kind or (
            isinstance(error.cause, LanguageError) and is_error(error.cause, kind)
        )
    return str(error).startswith(kind.message)
