"""Host locale detection from POSIX environment variables.

Reads the first non-empty value of LC_MESSAGES, LC_ALL, and LANG (in that
order), then splits it into language and territory codes or parses it into
a LanguageTag.

Every function takes an optional ``environ`` mapping. When omitted the
process environment (``os.environ``) is read at call time, so changes made
after import are honored.

Failures are returned, not raised:

    code, error = detect_language()
    if error is not None:
        logger.warning("Locale detection failed: %s", error)

Python 3.13+.
"""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING

from localepick.constants import LOCALE_ENV_VARS
from localepick.diagnostics import ErrorTemplate, LanguageError
from localepick.locale_utils import normalize_locale, strip_encoding
from localepick.tags import UNDETERMINED, LanguageTag, parse_language_tag

if TYPE_CHECKING:
    from collections.abc import Mapping

__all__ = [
    "detect_ietf",
    "detect_language",
    "detect_language_tag",
    "detect_raw_locale",
    "detect_territory",
    "split_locale",
]

logger = logging.getLogger(__name__)


def detect_raw_locale(
    environ: Mapping[str, str] | None = None,
) -> tuple[str, LanguageError | None]:
    """Read the raw locale string from the environment.

    Detection order:
    1. LC_MESSAGES (message catalog category)
    2. LC_ALL (overrides all categories)
    3. LANG (default locale)

    Args:
        environ: Environment mapping to read (default: os.environ)

    Returns:
        Tuple of (locale, error):
        - locale: First non-empty value, unmodified (e.g., "fr_FR.UTF-8")
        - error: None, or LanguageError of kind NOT_FOUND if all are empty

    Example:
        >>> detect_raw_locale({"LC_MESSAGES": "", "LANG": "de_DE.UTF-8"})
        ('de_DE.UTF-8', None)
    """
    env = os.environ if environ is None else environ
    for var in LOCALE_ENV_VARS:
        value = env.get(var)
        if value:
            logger.debug("Locale '%s' read from %s", value, var)
            return (value, None)

    return ("", ErrorTemplate.locale_not_found(LOCALE_ENV_VARS))


def split_locale(locale: str) -> tuple[str, str]:
    """Split a locale string into language and territory codes.

    The encoding suffix is dropped and "-" is treated like "_". No further
    validation happens; an empty language code is the caller's concern.

    Args:
        locale: Raw locale string (e.g., "fr_FR.UTF-8", "fr-FR", "fr")

    Returns:
        Tuple of (language, territory); territory is "" when absent

    Example:
        >>> split_locale("fr_FR.UTF-8")
        ('fr', 'FR')
        >>> split_locale("pt-BR")
        ('pt', 'BR')
        >>> split_locale("fr")
        ('fr', '')
    """
    pieces = normalize_locale(strip_encoding(locale)).split("_")
    territory = pieces[1] if len(pieces) > 1 else ""
    return (pieces[0], territory)


def detect_ietf(
    environ: Mapping[str, str] | None = None,
) -> tuple[str, LanguageError | None]:
    """Detect the locale as an IETF-style "language-TERRITORY" string.

    Example:
        >>> detect_ietf({"LANG": "fr_FR.UTF-8"})
        ('fr-FR', None)
        >>> detect_ietf({"LANG": "fr"})
        ('fr', None)
    """
    locale, error = detect_raw_locale(environ)
    if error is not None:
        return ("", error)

    language, territory = split_locale(locale)
    if territory:
        return (f"{language}-{territory}", None)
    return (language, None)


def detect_language(
    environ: Mapping[str, str] | None = None,
) -> tuple[str, LanguageError | None]:
    """Detect the language code (e.g., "fr"), without validating it."""
    locale, error = detect_raw_locale(environ)
    if error is not None:
        return ("", error)
    return (split_locale(locale)[0], None)


def detect_territory(
    environ: Mapping[str, str] | None = None,
) -> tuple[str, LanguageError | None]:
    """Detect the territory code (e.g., "FR"); "" if the locale has none."""
    locale, error = detect_raw_locale(environ)
    if error is not None:
        return ("", error)
    return (split_locale(locale)[1], None)


def detect_language_tag(
    environ: Mapping[str, str] | None = None,
) -> tuple[LanguageTag, LanguageError | None]:
    """Detect the locale and parse it into a LanguageTag.

    Args:
        environ: Environment mapping to read (default: os.environ)

    Returns:
        Tuple of (tag, error):
        - tag: Detected LanguageTag, or UNDETERMINED on failure
        - error: None on success; NOT_FOUND if no locale is set;
          PARSE_FAILURE if the locale is set but Babel cannot parse it

    Example:
        >>> tag, error = detect_language_tag({"LC_MESSAGES": "fr_FR.UTF-8"})
        >>> tag.base, tag.region, error
        ('fr', 'FR', None)
    """
    locale, error = detect_raw_locale(environ)
    if error is not None:
        return (UNDETERMINED, error)

    tag, error = parse_language_tag(normalize_locale(strip_encoding(locale)))
    if error is not None:
        logger.warning("Detected locale '%s' cannot be parsed: %s", locale, error)
    return (tag, error)
