# SPDX-License-Identifier: MIT
"""Unit tests for pre-release versions and their precedence."""

import pytest

from semver_core import (
    IdentifierKind,
    InvalidIdentifierError,
    NoIdentifiersError,
    Ordering,
    PreReleaseVersion,
    PreReleaseVersionBuilder,
    compare_identifiers,
)


def pre(value: str) -> PreReleaseVersion:
    return PreReleaseVersion.parse(value)


class TestParsePreRelease:
    """Tests for PreReleaseVersion.parse."""

    def test_alpha(self):
        """Test parsing a single alphanumeric identifier."""
        assert pre("alpha").identifiers == ("alpha",)

    def test_numbered(self):
        """Test parsing a numbered pre-release."""
        assert pre("alpha.1").identifiers == ("alpha", "1")

    def test_numeric_only(self):
        """Test parsing numeric-only identifiers."""
        assert pre("0.3.7").identifiers == ("0", "3", "7")

    @pytest.mark.parametrize("value", ["alpha", "alpha.1", "0.3.7", "x.7.z.92", "x-y-z.-"])
    def test_round_trip(self, value):
        """Test that str() is the exact inverse of parse()."""
        assert str(pre(value)) == value

    @pytest.mark.parametrize("value", ["", "01", "alpha.01", "alpha..1", "alpha.", "alpha+1", "é"])
    def test_invalid(self, value):
        """Test that invalid pre-releases raise."""
        with pytest.raises(InvalidIdentifierError):
            pre(value)

    def test_leading_zero_only_rejected_for_numeric_context(self):
        """Test that "0" is legal but "00" and "01" are not."""
        assert str(pre("0")) == "0"
        with pytest.raises(InvalidIdentifierError):
            pre("00")


class TestBuildPreRelease:
    """Tests for PreReleaseVersion.build and the constructor."""

    def test_build(self):
        """Test building from a list of identifiers."""
        assert str(PreReleaseVersion.build(["x", "7", "z", "92"])) == "x.7.z.92"

    def test_build_resplits_dotted_elements(self):
        """Test that dotted elements are split and every segment validated."""
        assert PreReleaseVersion.build(["alpha.1", "beta"]).identifiers == ("alpha", "1", "beta")
        with pytest.raises(InvalidIdentifierError):
            PreReleaseVersion.build(["alpha.01"])

    def test_build_empty(self):
        """Test that an empty sequence raises NoIdentifiersError."""
        with pytest.raises(NoIdentifiersError) as exc_info:
            PreReleaseVersion.build([])
        assert exc_info.value.kind == IdentifierKind.PRERELEASE

    def test_constructor_validates(self):
        """Test that direct construction validates every identifier."""
        with pytest.raises(InvalidIdentifierError):
            PreReleaseVersion(("alpha", "01"))
        with pytest.raises(NoIdentifiersError):
            PreReleaseVersion(())


class TestCompareIdentifiers:
    """Tests for pre-release precedence."""

    def test_equal(self):
        """Test identical sequences are EQUAL."""
        assert pre("alpha.1").compare(pre("alpha.1")) is Ordering.EQUAL

    def test_numeric_less_than_alphanumeric(self):
        """Test that a numeric identifier has lower precedence, regardless of value."""
        assert pre("alpha.1").compare(pre("alpha.beta")) is Ordering.LESS
        assert pre("alpha.beta").compare(pre("alpha.1")) is Ordering.GREATER
        assert pre("999999").compare(pre("a")) is Ordering.LESS

    def test_numeric_compared_as_integers(self):
        """Test that numeric identifiers are compared numerically, not lexically."""
        assert pre("beta.2").compare(pre("beta.11")) is Ordering.LESS
        assert pre("beta.11").compare(pre("beta.2")) is Ordering.GREATER

    def test_numeric_beyond_64_bits(self):
        """Test that numeric identifiers of any size compare correctly."""
        big = "18446744073709551616"  # 2**64
        bigger = "18446744073709551617"
        assert pre(big).compare(pre(bigger)) is Ordering.LESS
        assert pre("9" * 50).compare(pre("1" + "0" * 50)) is Ordering.LESS

    def test_numeric_beyond_conversion_limit(self):
        """Test numeric identifiers longer than the int/str conversion limit."""
        huge = "1" * 5000
        assert pre(huge).compare(pre("2")) is Ordering.GREATER
        assert pre("rc." + huge).compare(pre("rc." + "1" * 4999 + "2")) is Ordering.LESS
        assert pre(huge).compare(pre(huge)) is Ordering.EQUAL
        assert pre(huge) < pre("alpha")
        assert str(pre(huge + ".x")) == huge + ".x"

    def test_alphanumeric_ascii_order(self):
        """Test that alphanumeric identifiers compare in ASCII order."""
        assert pre("alpha").compare(pre("beta")) is Ordering.LESS
        assert pre("Beta").compare(pre("alpha")) is Ordering.LESS  # uppercase sorts first
        assert pre("rc-1").compare(pre("rc1")) is Ordering.LESS

    def test_mixed_digits_and_letters_are_alphanumeric(self):
        """Test that "1a" is compared lexically, not numerically."""
        assert pre("1a").compare(pre("1")) is Ordering.GREATER
        assert pre("10a").compare(pre("9a")) is Ordering.LESS

    def test_longer_wins_with_equal_prefix(self):
        """Test that a larger set of identifiers has higher precedence."""
        assert pre("alpha").compare(pre("alpha.1")) is Ordering.LESS
        assert pre("alpha.1").compare(pre("alpha")) is Ordering.GREATER
        assert pre("alpha.1").compare(pre("alpha.1.0")) is Ordering.LESS

    def test_first_difference_short_circuits(self):
        """Test that the first differing pair decides, even if the other is longer."""
        assert pre("beta").compare(pre("alpha.1.2.3")) is Ordering.GREATER

    def test_compare_identifiers_function(self):
        """Test the sequence-level function directly."""
        assert compare_identifiers(("rc", "1"), ("rc", "1")) == 0
        assert compare_identifiers(("rc",), ("rc", "1")) == -1
        assert compare_identifiers(("rc", "2"), ("rc", "1")) == 1

    def test_operators(self):
        """Test rich comparison operators follow precedence."""
        assert pre("alpha") < pre("alpha.1") < pre("alpha.beta") < pre("beta")
        assert pre("beta.11") > pre("beta.2")
        assert pre("rc.1") <= pre("rc.1")
        assert pre("rc.1") >= pre("rc.1")
        assert sorted([pre("beta"), pre("alpha.1"), pre("alpha")]) == [
            pre("alpha"),
            pre("alpha.1"),
            pre("beta"),
        ]

    def test_compare_with_other_type(self):
        """Test that ordering against an unrelated type is unsupported."""
        with pytest.raises(TypeError):
            pre("alpha") < "beta"  # type: ignore[operator]


class TestPreReleaseVersionBuilder:
    """Tests for PreReleaseVersionBuilder."""

    def test_identifiers(self):
        """Test building x.7.z.92."""
        built = PreReleaseVersionBuilder().identifiers("x", "7", "z", "92").build()
        assert str(built) == "x.7.z.92"

    def test_validates_immediately(self):
        """Test that invalid identifiers are rejected when added."""
        with pytest.raises(InvalidIdentifierError):
            PreReleaseVersionBuilder().identifiers("01")

    def test_empty_builder(self):
        """Test that building with no identifiers raises."""
        with pytest.raises(NoIdentifiersError):
            PreReleaseVersionBuilder().build()

    def test_from_instance_is_independent(self):
        """Test that extending a builder does not change the source instance."""
        original = pre("rc")
        extended = PreReleaseVersionBuilder.from_instance(original).identifiers("2").build()
        assert str(extended) == "rc.2"
        assert str(original) == "rc"

    def test_from_string_and_clear(self):
        """Test from_string followed by clear and re-fill."""
        builder = PreReleaseVersionBuilder.from_string("alpha.1")
        assert str(builder.clear().identifiers("beta").build()) == "beta"
