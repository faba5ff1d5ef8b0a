"""Error reporting for language detection and resolution.

Python 3.13+. Zero external dependencies.
"""

from localepick.enums import ErrorKind

from .errors import LanguageError, is_error
from .templates import ErrorTemplate

__all__ = [
    "ErrorKind",
    "ErrorTemplate",
    "LanguageError",
    "is_error",
]
