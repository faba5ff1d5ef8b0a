"""Locale utilities for POSIX/BCP-47 separator handling and Babel lookups.

Centralizes locale format normalization used throughout the codebase.
Every locale string entering the package is normalized here before it is
split or handed to Babel, so ``fr-FR`` and ``fr_FR`` are treated alike.

Python 3.13+. Uses Babel for CLDR locale data.
"""

from __future__ import annotations

import functools

from babel import Locale

from localepick.constants import MAX_LOCALE_CACHE_SIZE

__all__ = [
    "clear_locale_cache",
    "get_babel_locale",
    "normalize_locale",
    "strip_encoding",
]


def strip_encoding(locale_code: str) -> str:
    """Drop the encoding suffix (and anything after it) from a locale string.

    Args:
        locale_code: POSIX locale string (e.g., "fr_FR.UTF-8")

    Returns:
        Everything before the first "." (e.g., "fr_FR")

    Example:
        >>> strip_encoding("fr_FR.UTF-8")
        'fr_FR'
        >>> strip_encoding("de_DE.ISO-8859-1@euro")
        'de_DE'
        >>> strip_encoding("fr")
        'fr'
    """
    return locale_code.split(".", 1)[0]


def normalize_locale(locale_code: str) -> str:
    """Convert a BCP-47 style locale code to POSIX separators.

    BCP-47 uses hyphens (en-US), while Babel/POSIX uses underscores (en_US).
    Case is preserved; Babel canonicalizes case when it parses.

    Args:
        locale_code: Locale code in either format (e.g., "en-US", "pt_BR")

    Returns:
        POSIX-formatted locale code (e.g., "en_US", "pt_BR")

    Example:
        >>> normalize_locale("en-US")
        'en_US'
        >>> normalize_locale("zh-Hans-CN")
        'zh_Hans_CN'
        >>> normalize_locale("en")  # Already normalized
        'en'
    """
    return locale_code.replace("-", "_")


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Parses the locale code once and caches the result. Display-name listing
    resolves the same handful of supported locales over and over.

    Thread-safe via lru_cache internal locking.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid

    Example:
        >>> locale = get_babel_locale("fr-FR")
        >>> locale.language
        'fr'
        >>> locale.territory
        'FR'
    """
    return Locale.parse(normalize_locale(locale_code))


def clear_locale_cache() -> None:
    """Clear the cached Babel Locale objects.

    Use to free memory or reset state in tests.
    """
    get_babel_locale.cache_clear()
