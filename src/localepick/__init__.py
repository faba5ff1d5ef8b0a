"""localepick - Host locale detection and supported-language resolution.

Detects the POSIX locale of the host (LC_MESSAGES, LC_ALL, LANG), parses it
into a structured language tag with Babel, and resolves it against a
registry of supported languages with a well-defined fallback.

Public API:
    LanguageTag - Canonical language identifier (parse with LanguageTag.parse)
    UNDETERMINED - The "und" sentinel for an undefined language
    LanguageRegistry - Supported languages, fallback, and resolution
    RegistryConfig - Declarative registry configuration
    get_registry - Lazily constructed process-wide registry
    detect_language_tag - Detect and parse the host locale

Errors:
    LanguageError - Returned (not raised) by detection and resolution
    ErrorKind - NOT_FOUND, PARSE_FAILURE, UNSUPPORTED, FALLBACK_UNDEFINED,
        FALLBACK_UNSUPPORTED
    is_error - Test any error against an ErrorKind

Submodules:
    localepick.detection - Raw locale reading and splitting
    localepick.registry - LanguageRegistry and the process-wide instance
    localepick.locale_utils - Separator normalization and Babel locale cache
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

from .detection import (
    detect_ietf,
    detect_language,
    detect_language_tag,
    detect_raw_locale,
    detect_territory,
    split_locale,
)
from .diagnostics import ErrorKind, LanguageError, is_error
from .registry import LanguageRegistry, RegistryConfig, get_registry, reset_registry
from .tags import UNDETERMINED, LanguageTag, parse_language_tag

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
try:
    __version__ = _get_version("localepick")
except PackageNotFoundError:
    # Development mode: package not installed yet
    # Run: uv sync
    __version__ = "0.0.0+dev"

__all__ = [
    "UNDETERMINED",
    "ErrorKind",
    "LanguageError",
    "LanguageRegistry",
    "LanguageTag",
    "RegistryConfig",
    "__version__",
    "detect_ietf",
    "detect_language",
    "detect_language_tag",
    "detect_raw_locale",
    "detect_territory",
    "get_registry",
    "is_error",
    "parse_language_tag",
    "reset_registry",
    "split_locale",
]
