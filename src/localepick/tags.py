"""Structured language identifiers backed by Babel.

LanguageTag is the canonical, hashable form of a language plus optional
script, region, and variant. Babel does all of the parsing work:
``babel.core.parse_locale`` splits and canonicalizes case, and CLDR data
confirms each subtag on its own: the language must have locale data, the
script and region must be known codes. The combination does not need its
own locale data, so ``de-US`` is as valid as ``de-DE``. Nothing in this
module implements BCP-47 itself.

Equality is equality of canonical form, so ``fr`` and ``fr-FR`` are distinct
tags even though one is the parent of the other.

Python 3.13+. Uses Babel for CLDR locale data.
"""

from __future__ import annotations

from dataclasses import dataclass

from babel import UnknownLocaleError
from babel.core import get_global, get_locale_identifier, parse_locale

from localepick.constants import SUBTAG_REFERENCE_LOCALE, UNDETERMINED_CODE
from localepick.diagnostics import ErrorTemplate, LanguageError
from localepick.locale_utils import get_babel_locale, normalize_locale

__all__ = ["UNDETERMINED", "LanguageTag", "parse_language_tag"]


@dataclass(frozen=True, slots=True)
class LanguageTag:
    """Immutable, canonical language identifier.

    Use LanguageTag.parse() to construct instances from user or environment
    input. Direct construction skips CLDR validation and is meant for
    constants such as UNDETERMINED.

    Examples:
        >>> tag = LanguageTag.parse("fr_FR.UTF-8")
        >>> str(tag)
        'fr-FR'
        >>> tag.base, tag.region
        ('fr', 'FR')

        >>> LanguageTag.parse("fr").region is None
        True

        >>> LanguageTag.parse("fr") == LanguageTag.parse("fr-FR")
        False
    """

    language: str
    script: str | None = None
    territory: str | None = None
    variant: str | None = None

    @classmethod
    def parse(cls, value: str) -> LanguageTag:
        """Parse a BCP-47 or POSIX locale string.

        Accepts ``fr-FR``, ``fr_FR``, ``fr_FR.UTF-8``, ``zh-Hans-CN`` and
        the like. Encoding and ``@modifier`` suffixes are ignored.

        Args:
            value: Locale string

        Returns:
            Canonical LanguageTag

        Raises:
            ValueError: If the string is malformed, or CLDR does not know
                its language, script, or region subtag
        """
        normalized = normalize_locale(value)
        try:
            parts = parse_locale(normalized)
        except ValueError as e:
            msg = f"Invalid locale format '{value}': {e}"
            raise ValueError(msg) from None

        language, territory, script, variant = parts[:4]
        if language != UNDETERMINED_CODE:
            try:
                get_babel_locale(language)
            except UnknownLocaleError as e:
                msg = f"Unknown locale identifier '{value}': {e}"
                raise ValueError(msg) from None

        if script is not None and not _is_known_script(script):
            msg = f"Unknown script '{script}' in locale identifier '{value}'"
            raise ValueError(msg)
        if territory is not None and not _is_known_territory(territory):
            msg = f"Unknown region '{territory}' in locale identifier '{value}'"
            raise ValueError(msg)

        return cls(language, script, territory, variant)

    @property
    def base(self) -> str:
        """Base language subtag (e.g., "fr")."""
        return self.language

    @property
    def region(self) -> str | None:
        """Region subtag (e.g., "FR"), or None for language-only tags."""
        return self.territory

    @property
    def is_undetermined(self) -> bool:
        """True only for the bare "und" sentinel; "und-FR" is a real tag."""
        return self == UNDETERMINED

    @property
    def posix(self) -> str:
        """Identifier with POSIX separators, as Babel expects (e.g., "fr_FR")."""
        return get_locale_identifier((self.language, self.territory, self.script, self.variant))

    @property
    def display_name(self) -> str:
        """Human-readable name of the language in the language itself.

        Combinations without their own CLDR locale data (``de-US``) are named
        from the language's locale. Tags with an "und" language, and tags CLDR
        knows nothing about (only reachable by direct construction), fall back
        to their BCP-47 string.

        Example:
            >>> LanguageTag.parse("fr-FR").display_name
            'français (France)'
            >>> LanguageTag.parse("de-US").display_name
            'Deutsch (Vereinigte Staaten)'
        """
        if self.language == UNDETERMINED_CODE:
            return str(self)
        try:
            return get_babel_locale(self.posix).display_name or str(self)
        except (UnknownLocaleError, ValueError):
            pass

        try:
            locale = get_babel_locale(self.language)
        except (UnknownLocaleError, ValueError):
            return str(self)

        name = locale.languages.get(self.language) or self.language
        subtag_names = (
            locale.scripts.get(self.script) if self.script else None,
            locale.territories.get(self.territory) if self.territory else None,
            locale.variants.get(self.variant) if self.variant else None,
        )
        details = [detail for detail in subtag_names if detail]
        if details:
            return f"{name} ({', '.join(details)})"
        return name

    def __str__(self) -> str:
        return "-".join(
            part
            for part in (self.language, self.script, self.territory, self.variant)
            if part
        )


UNDETERMINED = LanguageTag(UNDETERMINED_CODE)
"""Sentinel for "no language": the default fallback and the failed-resolution result."""


def _is_known_script(script: str) -> bool:
    return script in get_babel_locale(SUBTAG_REFERENCE_LOCALE).scripts


def _is_known_territory(territory: str) -> bool:
    if territory in get_babel_locale(SUBTAG_REFERENCE_LOCALE).territories:
        return True
    return territory in get_global("territory_aliases")


def parse_language_tag(value: str) -> tuple[LanguageTag, LanguageError | None]:
    """Parse a locale string, returning the failure instead of raising it.

    Args:
        value: BCP-47 or POSIX locale string

    Returns:
        Tuple of (tag, error):
        - tag: Parsed LanguageTag, or UNDETERMINED if parsing failed
        - error: None on success, LanguageError of kind PARSE_FAILURE otherwise

    Examples:
        >>> tag, error = parse_language_tag("de-DE")
        >>> str(tag), error
        ('de-DE', None)

        >>> tag, error = parse_language_tag("not a locale")
        >>> tag is UNDETERMINED, error.kind
        (True, <ErrorKind.PARSE_FAILURE: 'parse_failure'>)
    """
    try:
        return (LanguageTag.parse(value), None)
    except ValueError as e:
        return (UNDETERMINED, ErrorTemplate.parse_failed(value, e))
