"""Tests for LanguageTag parsing, formatting, and display names.

Python 3.13+.
"""

import pytest

from localepick import ErrorKind, is_error
from localepick.tags import UNDETERMINED, LanguageTag, parse_language_tag


class TestLanguageTagParse:
    """LanguageTag.parse delegates canonicalization to Babel."""

    def test_bcp47_with_region(self) -> None:
        tag = LanguageTag.parse("fr-FR")
        assert tag.base == "fr"
        assert tag.region == "FR"
        assert str(tag) == "fr-FR"

    def test_posix_with_encoding(self) -> None:
        tag = LanguageTag.parse("fr_FR.UTF-8")
        assert tag == LanguageTag.parse("fr-FR")

    def test_language_only(self) -> None:
        tag = LanguageTag.parse("fr")
        assert tag.base == "fr"
        assert tag.region is None
        assert str(tag) == "fr"

    def test_case_canonicalized(self) -> None:
        tag = LanguageTag.parse("EN-us")
        assert str(tag) == "en-US"

    def test_script_subtag(self) -> None:
        tag = LanguageTag.parse("zh-hans-cn")
        assert tag.script == "Hans"
        assert tag.region == "CN"
        assert str(tag) == "zh-Hans-CN"
        assert tag.posix == "zh_Hans_CN"

    def test_region_distinguishes_tags(self) -> None:
        """A bare language is not equal to the same language with a region."""
        assert LanguageTag.parse("fr") != LanguageTag.parse("fr-FR")

    def test_equal_tags_hash_equal(self) -> None:
        assert len({LanguageTag.parse("de-DE"), LanguageTag.parse("de_DE")}) == 1

    def test_undetermined_literal(self) -> None:
        assert LanguageTag.parse("und") == UNDETERMINED
        assert UNDETERMINED.is_undetermined

    @pytest.mark.parametrize("value", ["", "not a locale", "en_US_X_Y_Z", "12"])
    def test_malformed_raises(self, value: str) -> None:
        with pytest.raises(ValueError, match="Invalid locale format"):
            LanguageTag.parse(value)

    def test_unknown_language_raises(self) -> None:
        with pytest.raises(ValueError, match="Unknown locale identifier"):
            LanguageTag.parse("xx")

    @pytest.mark.parametrize(
        ("value", "base", "region"),
        [
            ("de-US", "de", "US"),
            ("fr_US", "fr", "US"),
            ("ja-FR", "ja", "FR"),
            ("de_US.UTF-8", "de", "US"),
        ],
    )
    def test_language_and_region_validated_separately(
        self, value: str, base: str, region: str
    ) -> None:
        """A known language with a known region parses without its own locale data."""
        tag = LanguageTag.parse(value)
        assert (tag.base, tag.region) == (base, region)

    def test_unknown_region_raises(self) -> None:
        with pytest.raises(ValueError, match="Unknown region 'QQ'"):
            LanguageTag.parse("fr-QQ")

    def test_unknown_script_raises(self) -> None:
        with pytest.raises(ValueError, match="Unknown script 'Qqqq'"):
            LanguageTag.parse("zh-Qqqq-CN")

    def test_undetermined_with_region_is_a_real_tag(self) -> None:
        """Only the bare sentinel is undetermined."""
        tag = LanguageTag.parse("und-FR")
        assert str(tag) == "und-FR"
        assert not tag.is_undetermined
        assert tag != UNDETERMINED


class TestDisplayName:
    """display_name is the language's name in that language."""

    def test_french(self) -> None:
        assert LanguageTag.parse("fr-FR").display_name == "français (France)"

    def test_english(self) -> None:
        assert LanguageTag.parse("en-US").display_name == "English (United States)"

    def test_language_only(self) -> None:
        assert LanguageTag.parse("de").display_name == "Deutsch"

    def test_undetermined_uses_code(self) -> None:
        assert UNDETERMINED.display_name == "und"

    def test_pair_without_locale_data(self) -> None:
        """Named from the language's own locale."""
        assert LanguageTag.parse("de-US").display_name == "Deutsch (Vereinigte Staaten)"
        assert LanguageTag.parse("fr-US").display_name == "français (États-Unis)"

    def test_undetermined_with_region_uses_code(self) -> None:
        assert LanguageTag.parse("und-FR").display_name == "und-FR"

    @pytest.mark.parametrize(
        ("tag", "expected"),
        [
            (LanguageTag("xx"), "xx"),
            (LanguageTag("xx", territory="US"), "xx-US"),
        ],
    )
    def test_unknown_constructed_tag_uses_code(self, tag: LanguageTag, expected: str) -> None:
        """Direct construction skips validation; display_name must not raise."""
        assert tag.display_name == expected


class TestParseLanguageTag:
    """parse_language_tag returns failures instead of raising."""

    def test_success(self) -> None:
        tag, error = parse_language_tag("pt-BR")
        assert error is None
        assert str(tag) == "pt-BR"

    def test_failure(self) -> None:
        tag, error = parse_language_tag("@@@")
        assert tag is UNDETERMINED
        assert error is not None
        assert error.kind is ErrorKind.PARSE_FAILURE
        assert error.input_value == "@@@"
        assert is_error(error, ErrorKind.PARSE_FAILURE)
        assert str(error).startswith("language identifier cannot be parsed: ")
