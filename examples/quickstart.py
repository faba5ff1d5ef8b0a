"""Quickstart example for localepick.

Demonstrates host locale detection and resolution against a registry of
supported languages with a fallback.

Note: Every call returns a (result, error) tuple. Examples print the error
so you can see which branch of the fallback cascade was taken; production
code should log it and decide whether to degrade or abort.
"""

from localepick import (
    ErrorKind,
    LanguageRegistry,
    LanguageTag,
    RegistryConfig,
    detect_ietf,
    detect_language_tag,
    is_error,
)

# Example 1: What does the host say?
print("=" * 50)
print("Example 1: Host Locale")
print("=" * 50)

ietf, error = detect_ietf()
print(f"IETF locale: {ietf or '-'} (error: {error})")

tag, error = detect_language_tag()
print(f"Language tag: {tag} base={tag.base} region={tag.region} (error: {error})")

# Example 2: Registry from configuration
print("\n" + "=" * 50)
print("Example 2: Registry")
print("=" * 50)

registry = LanguageRegistry.from_config(
    RegistryConfig(
        supported={"en-US": "locales/en", "fr-FR": "locales/fr", "de-DE": "locales/de"},
        fallback="en-US",
    )
)

names, tags_by_name = registry.list_supported_languages_sorted()
for name in names:
    print(f"  {name:<28} -> {tags_by_name[name]}")

# Example 3: Resolution with fallback
print("\n" + "=" * 50)
print("Example 3: Fallback")
print("=" * 50)

for request in ("fr_FR.UTF-8", "ja-JP", "not a locale"):
    value, error = registry.get_supported_language_value(request)
    print(f"  {request!r:<16} -> {value!r} (error: {error})")

tag, error = registry.detect_supported_language()
if is_error(error, ErrorKind.NOT_FOUND):
    print("\nNo locale set in LC_MESSAGES, LC_ALL, or LANG")
elif error is not None:
    print(f"\nHost language unusable: {error}")
else:
    print(f"\nServing {tag.display_name} from {registry.get_supported_languages()[tag]}")

# Example 4: Misconfigured fallback
print("\n" + "=" * 50)
print("Example 4: Unsupported Fallback")
print("=" * 50)

registry.set_fallback_language(LanguageTag.parse("pt-BR"))
value, error = registry.get_supported_language_value("ja-JP")
print(f"  value={value!r} fallback_unsupported={is_error(error, ErrorKind.FALLBACK_UNSUPPORTED)}")
