"""Tests for locale_utils.py.

Covers strip_encoding, normalize_locale, get_babel_locale, and
clear_locale_cache.

Python 3.13+.
"""

import pytest
from babel import Locale, UnknownLocaleError
from hypothesis import given
from hypothesis import strategies as st

from localepick.locale_utils import (
    clear_locale_cache,
    get_babel_locale,
    normalize_locale,
    strip_encoding,
)


class TestStripEncoding:
    """Test strip_encoding function."""

    def test_utf8_suffix_removed(self) -> None:
        assert strip_encoding("fr_FR.UTF-8") == "fr_FR"

    def test_modifier_after_encoding_removed(self) -> None:
        """Everything from the first dot onward goes, modifier included."""
        assert strip_encoding("de_DE.ISO-8859-15@euro") == "de_DE"

    def test_no_encoding_unchanged(self) -> None:
        assert strip_encoding("fr") == "fr"

    def test_empty_string(self) -> None:
        assert strip_encoding("") == ""


class TestNormalizeLocale:
    """Test normalize_locale function.

    Only separators change; case is left for Babel to canonicalize.
    """

    def test_bcp47_to_posix(self) -> None:
        assert normalize_locale("en-US") == "en_US"

    def test_already_normalized(self) -> None:
        assert normalize_locale("en_US") == "en_US"

    def test_case_preserved(self) -> None:
        assert normalize_locale("EN-us") == "EN_us"

    def test_multiple_hyphens(self) -> None:
        assert normalize_locale("zh-Hans-CN") == "zh_Hans_CN"

    @given(st.text(alphabet="abcXYZ-_", max_size=20))
    def test_no_hyphens_remain(self, code: str) -> None:
        """Property: output never contains a hyphen and keeps its length."""
        result = normalize_locale(code)
        assert "-" not in result
        assert len(result) == len(code)


class TestGetBabelLocale:
    """Test get_babel_locale function with caching."""

    def test_bcp47_format(self) -> None:
        locale = get_babel_locale("fr-FR")
        assert isinstance(locale, Locale)
        assert locale.language == "fr"
        assert locale.territory == "FR"

    def test_posix_format(self) -> None:
        locale = get_babel_locale("de_DE")
        assert locale.language == "de"
        assert locale.territory == "DE"

    def test_simple_locale(self) -> None:
        locale = get_babel_locale("fr")
        assert locale.language == "fr"
        assert locale.territory is None

    def test_caching(self) -> None:
        """Repeated calls return the same cached object."""
        assert get_babel_locale("pt-BR") is get_babel_locale("pt-BR")

    def test_unknown_locale_raises(self) -> None:
        with pytest.raises(UnknownLocaleError):
            get_babel_locale("xx")


class TestClearLocaleCache:
    """Test clear_locale_cache function."""

    def test_clear_empties_cache(self) -> None:
        get_babel_locale("en_US")
        get_babel_locale("de_DE")
        assert get_babel_locale.cache_info().currsize > 0

        clear_locale_cache()

        assert get_babel_locale.cache_info().currsize == 0

    def test_clear_idempotent(self) -> None:
        clear_locale_cache()
        clear_locale_cache()
        assert get_babel_locale.cache_info().currsize == 0
