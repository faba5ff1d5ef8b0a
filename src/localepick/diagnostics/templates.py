"""Error templates.

Centralized construction of LanguageError instances for consistent messages.
Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from localepick.enums import ErrorKind

from .errors import LanguageError

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error templates.

    All LanguageError instances are created here so the message prefixes
    that ``is_error()`` relies on stay in one place.
    """

    @staticmethod
    def locale_not_found(sources: tuple[str, ...]) -> LanguageError:
        """No locale set in any environment variable.

        Args:
            sources: Environment variable names that were consulted

        Returns:
            LanguageError of kind NOT_FOUND
        """
        return LanguageError(ErrorKind.NOT_FOUND, input_value=",".join(sources))

    @staticmethod
    def parse_failed(value: str, cause: BaseException) -> LanguageError:
        """String could not be parsed into a language tag.

        Args:
            value: The string that failed to parse
            cause: Parser error

        Returns:
            LanguageError of kind PARSE_FAILURE wrapping ``cause``
        """
        return LanguageError(ErrorKind.PARSE_FAILURE, cause=cause, input_value=value)

    @staticmethod
    def detection_failed(cause: LanguageError) -> LanguageError:
        """Host locale could not be detected or parsed.

        Args:
            cause: Detector error (NOT_FOUND or PARSE_FAILURE)

        Returns:
            LanguageError of kind PARSE_FAILURE wrapping ``cause``
        """
        return LanguageError(
            ErrorKind.PARSE_FAILURE, cause=cause, input_value=cause.input_value
        )

    @staticmethod
    def unsupported(value: str) -> LanguageError:
        """Language parsed fine but is not in the supported set.

        Args:
            value: String form of the requested language

        Returns:
            LanguageError of kind UNSUPPORTED
        """
        return LanguageError(ErrorKind.UNSUPPORTED, input_value=value)

    @staticmethod
    def fallback_undefined() -> LanguageError:
        """Fallback needed but never configured."""
        return LanguageError(ErrorKind.FALLBACK_UNDEFINED)

    @staticmethod
    def fallback_unsupported(fallback: str) -> LanguageError:
        """Configured fallback is not in the supported set.

        Args:
            fallback: String form of the configured fallback language

        Returns:
            LanguageError of kind FALLBACK_UNSUPPORTED
        """
        return LanguageError(ErrorKind.FALLBACK_UNSUPPORTED, input_value=fallback)
