"""Supported-language registry with fallback resolution.

LanguageRegistry is the single source of truth for which languages an
application can serve, what value (typically a path to a localization
resource) each one maps to, and which language to substitute when the
detected or requested one is not supported.

Architecture:
    - State is two fields: a ``dict[LanguageTag, str]`` and one fallback tag
    - Setters replace the whole value (the mapping is copied on the way in)
    - One coarse RLock guards every read and write; reads see a complete
      prior write, never a partially updated mapping
    - Operations return ``(result, error)`` tuples instead of raising

Construction:
    Create a registry once at startup and pass it to consumers, or use the
    process-wide instance from ``get_registry()``, which is constructed
    lazily exactly once.

    >>> registry = LanguageRegistry.from_config(
    ...     RegistryConfig(supported={"en-US": "en.ftl", "fr-FR": "fr.ftl"}, fallback="en-US")
    ... )
    >>> value, error = registry.get_supported_language_value("fr_FR")
    >>> value, error
    ('fr.ftl', None)

Python 3.13+.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from localepick.detection import detect_language_tag
from localepick.diagnostics import ErrorKind, ErrorTemplate, LanguageError
from localepick.tags import UNDETERMINED, LanguageTag, parse_language_tag

if TYPE_CHECKING:
    from collections.abc import Mapping

__all__ = [
    "LanguageRegistry",
    "RegistryConfig",
    "get_registry",
    "reset_registry",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RegistryConfig:
    """Declarative registry configuration.

    Locale codes are plain strings so the configuration can come straight
    from a settings file; LanguageRegistry.from_config() parses them.

    Attributes:
        supported: Locale code to associated value (e.g., {"en-US": "locales/en"})
        fallback: Locale code of the fallback language, or None for undefined
    """

    supported: Mapping[str, str] = field(default_factory=dict)
    fallback: str | None = None


class LanguageRegistry:
    """Thread-safe registry of supported languages with a fallback.

    Thread Safety:
        All methods are thread-safe. A single reentrant lock serializes every
        access; there is no reader/writer distinction. Writes happen at
        configuration time and the supported set is small.

    Invariant:
        Resolution methods only ever return tags that are keys of the
        supported mapping, or UNDETERMINED when resolution fails.

    Example:
        >>> registry = LanguageRegistry()
        >>> en = LanguageTag.parse("en-US")
        >>> registry.set_supported_languages({en: "en.ftl"})
        >>> registry.set_fallback_language(en)
        >>> tag, error = registry.string_to_supported_language_tag("de-DE")
        >>> str(tag), error.kind
        ('en-US', <ErrorKind.UNSUPPORTED: 'unsupported'>)
    """

    __slots__ = ("_fallback", "_lock", "_supported")

    def __init__(self) -> None:
        """Initialize an empty registry with an undefined fallback."""
        self._lock = threading.RLock()
        self._supported: dict[LanguageTag, str] = {}
        self._fallback: LanguageTag = UNDETERMINED

    @classmethod
    def from_config(cls, config: RegistryConfig) -> LanguageRegistry:
        """Create a registry from string locale codes.

        All codes are parsed eagerly, so a typo fails at startup rather than
        surfacing later as an unsupported language.

        Args:
            config: Registry configuration

        Returns:
            Configured LanguageRegistry

        Raises:
            ValueError: If any supported or fallback code cannot be parsed
        """
        supported: dict[LanguageTag, str] = {}
        for code, value in config.supported.items():
            tag, error = parse_language_tag(code)
            if error is not None:
                msg = f"Invalid supported language '{code}': {error}"
                raise ValueError(msg)
            supported[tag] = value

        fallback = UNDETERMINED
        if config.fallback is not None:
            fallback, error = parse_language_tag(config.fallback)
            if error is not None:
                msg = f"Invalid fallback language '{config.fallback}': {error}"
                raise ValueError(msg)

        registry = cls()
        registry.set_supported_languages(supported)
        registry.set_fallback_language(fallback)
        return registry

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    def set_supported_languages(self, supported: Mapping[LanguageTag, str]) -> None:
        """Replace the supported languages.

        Args:
            supported: Language tag to associated value (e.g., a resource path)
        """
        snapshot = dict(supported)
        with self._lock:
            self._supported = snapshot
        logger.debug("Supported languages replaced: %d entries", len(snapshot))

    def get_supported_languages(self) -> dict[LanguageTag, str]:
        """Return a copy of the supported languages mapping."""
        with self._lock:
            return dict(self._supported)

    def set_fallback_language(self, fallback: LanguageTag) -> None:
        """Replace the fallback language.

        The fallback does not have to be supported yet; operations that need
        it check membership when they use it. Pass UNDETERMINED to clear it.
        """
        with self._lock:
            self._fallback = fallback
        logger.debug("Fallback language set to '%s'", fallback)

    def get_fallback_language(self) -> LanguageTag:
        """Return the fallback language (UNDETERMINED if undefined)."""
        with self._lock:
            return self._fallback

    # ------------------------------------------------------------------
    # Listing
    # ------------------------------------------------------------------

    def list_supported_languages(self) -> list[LanguageTag]:
        """Return the supported language tags in no particular order."""
        with self._lock:
            return list(self._supported)

    def list_supported_languages_as_strings(self) -> list[str]:
        """Return the supported language tags as BCP-47 strings."""
        with self._lock:
            return [str(tag) for tag in self._supported]

    def list_supported_languages_as_strings_sorted(self) -> list[str]:
        """Return the supported BCP-47 strings in code point order."""
        return sorted(self.list_supported_languages_as_strings())

    def list_supported_languages_for_display(self) -> list[str]:
        """Return each supported language's name written in that language.

        Example:
            >>> registry.list_supported_languages_for_display()
            ['English (United States)', 'français (France)']
        """
        with self._lock:
            return [tag.display_name for tag in self._supported]

    def list_supported_languages_for_display_sorted(self) -> list[str]:
        """Return the display names sorted alphabetically."""
        return sorted(self.list_supported_languages_for_display())

    def list_supported_languages_sorted(self) -> tuple[list[str], dict[str, LanguageTag]]:
        """Return sorted display names plus a display name to tag mapping.

        Intended for building selection lists: show the names in order, map
        the chosen name back to its tag. Two tags with the same display name
        share one key in the mapping; the one listed last wins.

        Returns:
            Tuple of (names, tags_by_name)
        """
        with self._lock:
            tags_by_name = {tag.display_name: tag for tag in self._supported}
            names = [tag.display_name for tag in self._supported]
        names.sort()
        return (names, tags_by_name)

    # ------------------------------------------------------------------
    # Membership
    # ------------------------------------------------------------------

    def language_is_supported(self, bcp: str) -> tuple[bool, LanguageError | None]:
        """Check whether a BCP-47 string names a supported language.

        Returns:
            Tuple of (supported, error); error is PARSE_FAILURE when ``bcp``
            cannot be parsed, in which case supported is False
        """
        tag, error = parse_language_tag(bcp)
        if error is not None:
            return (False, error)
        return (self.language_tag_is_supported(tag), None)

    def language_tag_is_supported(self, tag: LanguageTag) -> bool:
        """Check whether a tag is a key of the supported mapping."""
        with self._lock:
            return tag in self._supported

    def string_to_language_tag(self, bcp: str) -> tuple[LanguageTag, LanguageError | None]:
        """Parse a BCP-47 string without checking support.

        Returns:
            Tuple of (tag, error); UNDETERMINED and PARSE_FAILURE on failure
        """
        return parse_language_tag(bcp)

    # ------------------------------------------------------------------
    # Resolution
    # ------------------------------------------------------------------

    def detect_supported_language(
        self, environ: Mapping[str, str] | None = None
    ) -> tuple[LanguageTag, LanguageError | None]:
        """Detect the host language, substituting the fallback if unsupported.

        Failing to detect is not the same as detecting an unsupported
        language: the fallback is only consulted in the second case.

        Args:
            environ: Environment mapping to read (default: os.environ)

        Returns:
            Tuple of (tag, error):
            - (detected, None) if the detected language is supported
            - (fallback, None) if it is not, but the fallback is
            - (UNDETERMINED, PARSE_FAILURE) if detection or parsing failed;
              the detector's error is wrapped as the cause
            - (UNDETERMINED, FALLBACK_UNDEFINED | FALLBACK_UNSUPPORTED) if
              the fallback is needed but unusable
        """
        detected, error = detect_language_tag(environ)
        if error is not None:
            return (UNDETERMINED, ErrorTemplate.detection_failed(error))

        with self._lock:
            if detected in self._supported:
                logger.debug("Detected language '%s' is supported", detected)
                return (detected, None)

            error = self._check_fallback()
            if error is not None:
                logger.warning("Detected language '%s' unsupported: %s", detected, error)
                return (UNDETERMINED, error)

            logger.debug(
                "Detected language '%s' unsupported, using fallback '%s'",
                detected,
                self._fallback,
            )
            return (self._fallback, None)

    def string_to_supported_language_tag(
        self, bcp: str
    ) -> tuple[LanguageTag, LanguageError | None]:
        """Resolve a BCP-47 string to a supported tag, substituting the fallback.

        Unlike detect_supported_language(), a usable fallback still comes
        with an error describing why it was substituted.

        Parse failures are reported alongside the substituted fallback rather
        than degrading silently. Callers that only want a usable tag can
        ignore PARSE_FAILURE the same way they ignore UNSUPPORTED.

        Returns:
            Tuple of (tag, error):
            - (tag, None) if ``bcp`` parses and is supported
            - (fallback, UNSUPPORTED) if it parses but is not supported
            - (fallback, PARSE_FAILURE) if it cannot be parsed
            - (UNDETERMINED, FALLBACK_UNDEFINED | FALLBACK_UNSUPPORTED) if
              the fallback is needed but unusable
        """
        tag, error = parse_language_tag(bcp)
        with self._lock:
            if error is None:
                if tag in self._supported:
                    return (tag, None)
                error = ErrorTemplate.unsupported(str(tag))
            return self._substitute_fallback(error)

    def get_supported_language_value(self, bcp: str) -> tuple[str, LanguageError | None]:
        """Return the value for a BCP-47 string, or the fallback's value.

        Returns:
            Tuple of (value, error):
            - (value, None) if ``bcp`` is supported
            - (fallback value, UNSUPPORTED | PARSE_FAILURE) if the fallback
              was substituted
            - ("", FALLBACK_UNDEFINED | FALLBACK_UNSUPPORTED) otherwise
        """
        with self._lock:
            tag, error = self.string_to_supported_language_tag(bcp)
            if _is_fallback_failure(error):
                return ("", error)
            return (self._supported[tag], error)

    def get_supported_language_value_by_tag(
        self, tag: LanguageTag
    ) -> tuple[str, LanguageError | None]:
        """Return the value for a tag, or the fallback's value.

        Returns:
            Tuple of (value, error):
            - (value, None) if ``tag`` is supported
            - (fallback value, UNSUPPORTED) if the fallback was substituted
            - ("", FALLBACK_UNDEFINED | FALLBACK_UNSUPPORTED) otherwise
        """
        with self._lock:
            value = self._supported.get(tag)
            if value is not None:
                return (value, None)

            fallback, error = self._substitute_fallback(ErrorTemplate.unsupported(str(tag)))
            if _is_fallback_failure(error):
                return ("", error)
            return (self._supported[fallback], error)

    # ------------------------------------------------------------------
    # Internals (caller holds the lock)
    # ------------------------------------------------------------------

    def _check_fallback(self) -> LanguageError | None:
        if self._fallback.is_undetermined:
            return ErrorTemplate.fallback_undefined()
        if self._fallback not in self._supported:
            return ErrorTemplate.fallback_unsupported(str(self._fallback))
        return None

    def _substitute_fallback(
        self, reason: LanguageError
    ) -> tuple[LanguageTag, LanguageError]:
        error = self._check_fallback()
        if error is not None:
            logger.warning("Cannot fall back (%s): %s", reason, error)
            return (UNDETERMINED, error)
        logger.debug("Falling back to '%s': %s", self._fallback, reason)
        return (self._fallback, reason)


def _is_fallback_failure(error: LanguageError | None) -> bool:
    return error is not None and error.kind in (
        ErrorKind.FALLBACK_UNDEFINED,
        ErrorKind.FALLBACK_UNSUPPORTED,
    )


# ============================================================================
# PROCESS-WIDE INSTANCE
# ============================================================================

_registry: LanguageRegistry | None = None
_registry_lock = threading.Lock()


def get_registry() -> LanguageRegistry:
    """Return the process-wide registry, creating it on first use.

    Construction happens exactly once even when many threads race here
    (double-checked locking).
    """
    global _registry  # noqa: PLW0603  # pylint: disable=global-statement
    if _registry is None:
        with _registry_lock:
            if _registry is None:
                _registry = LanguageRegistry()
                logger.debug("Process-wide language registry created")
    return _registry


def reset_registry() -> None:
    """Discard the process-wide registry; the next get_registry() builds a new one."""
    global _registry  # noqa: PLW0603  # pylint: disable=global-statement
    with _registry_lock:
        _registry = None
