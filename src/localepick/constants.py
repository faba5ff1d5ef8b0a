"""Shared constants for localepick.

Centralized configuration constants used by the detector and the registry.
Placing constants here avoids circular imports and provides a single source
of truth.

Constants are grouped by domain:
- Environment: Locale variables consulted during detection
- Identifiers: Reserved language tag codes
- Cache limits: Memory bounds for Babel locale caching

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Environment
    "LOCALE_ENV_VARS",
    # Identifiers
    "UNDETERMINED_CODE",
    "SUBTAG_REFERENCE_LOCALE",
    # Cache limits
    "MAX_LOCALE_CACHE_SIZE",
]

# ============================================================================
# ENVIRONMENT
# ============================================================================

# POSIX locale variables in detection priority order.
# Most specific category first, most general last. The first non-empty value
# wins; if all three are empty or absent the locale cannot be detected.
LOCALE_ENV_VARS: tuple[str, ...] = ("LC_MESSAGES", "LC_ALL", "LANG")

# ============================================================================
# IDENTIFIERS
# ============================================================================

# BCP-47 "undetermined" primary language subtag.
# Used as the explicit undefined sentinel for the fallback language.
UNDETERMINED_CODE: str = "und"

# Locale whose CLDR code tables validate script and region subtags.
# Its script and territory name tables list every code CLDR knows.
SUBTAG_REFERENCE_LOCALE: str = "en"

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Maximum cached Babel Locale objects.
# Supported-language sets are small; 128 covers major locales plus variants.
MAX_LOCALE_CACHE_SIZE: int = 128
