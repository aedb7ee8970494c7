"""Tests for splitting and joining formatted values."""

import pytest
from fieldmask.mask import SegmentKind, compile_mask, join_values, pad, split_value


class TestSplitValue:
    """Tests for split_value()."""

    def test_split_full_value(self) -> None:
        """Test splitting a complete value."""
        assert split_value("abc/12/xy", compile_mask("AAA/##/##")) == ["abc", "12", "xy"]

    def test_split_trims_padding(self) -> None:
        """Test that fragment whitespace is trimmed."""
        assert split_value("ab /1 /x ", compile_mask("AAA/##/##")) == ["ab", "1", "x"]

    def test_split_ignores_literal_content(self) -> None:
        """Test that literal positions are skipped whatever they hold."""
        assert split_value("abcXXX12", compile_mask("AAA---99")) == ["abc", "12"]

    def test_split_short_value(self) -> None:
        """Test that a short value yields short and empty fragments."""
        assert split_value("ab", compile_mask("AAA/##/##")) == ["ab", "", ""]

    def test_split_none(self) -> None:
        """Test that None splits like an empty string."""
        assert split_value(None, compile_mask("99-99")) == ["", ""]

    def test_split_empty_mask(self) -> None:
        """Test that an empty mask yields no fragments."""
        assert split_value("anything", compile_mask("")) == []


class TestPad:
    """Tests for pad()."""

    def test_pad_with_spaces(self) -> None:
        """Test right padding to the segment size."""
        assert pad(SegmentKind.ALPHA, 4, "ab") == "ab  "

    def test_digits_are_space_padded(self) -> None:
        """Test that digit segments are not zero-filled."""
        assert pad(SegmentKind.DIGIT, 3, "7") == "7  "

    def test_pad_none(self) -> None:
        """Test that None pads to blanks."""
        assert pad(SegmentKind.ANY_CHAR, 2, None) == "  "

    def test_long_value_truncated(self) -> None:
        """Test that over-long values are cut to the segment size."""
        assert pad(SegmentKind.ALPHA, 2, "abcd") == "ab"


class TestJoinValues:
    """Tests for join_values()."""

    def test_join_typed_sequence(self) -> None:
        """Test joining one fragment per editable segment."""
        assert join_values(["abc", "12", "xy"], compile_mask("AAA/##/##")) == "abc/12/xy"

    def test_join_positional_mapping(self) -> None:
        """Test joining fragments keyed by segment position."""
        posted = {0: "abc", 2: "12", 4: "xy"}

        assert join_values(posted, compile_mask("AAA/##/##")) == "abc/12/xy"

    def test_join_string_keys(self) -> None:
        """Test joining form-style string keys."""
        posted = {"0": "abc", "2": "12", "4": "xy"}

        assert join_values(posted, compile_mask("AAA/##/##")) == "abc/12/xy"

    def test_join_positional_sequence(self) -> None:
        """Test a sequence as long as the breakdown is read positionally."""
        posted = ["abc", "ignored", "12", "ignored", "xy"]

        assert join_values(posted, compile_mask("AAA/##/##")) == "abc/12/xy"

    def test_join_pads_short_fragments(self) -> None:
        """Test that short fragments are space padded."""
        assert join_values(["a", "1", ""], compile_mask("AAA/##/##")) == "a  /1 /  "

    def test_join_missing_entries(self) -> None:
        """Test that missing fragments become blanks."""
        assert join_values({0: "abc"}, compile_mask("AAA/##/##")) == "abc/  /  "
        assert join_values(["abc"], compile_mask("AAA/##/##")) == "abc/  /  "

    def test_join_none(self) -> None:
        """Test that nothing posted gives literals and blanks."""
        assert join_values(None, compile_mask("99.99")) == "  .  "

    def test_join_plain_string(self) -> None:
        """Test that a plain string fills the first segment."""
        assert join_values("12", compile_mask("999")) == "12 "

    def test_join_over_long_fragment_keeps_mask_length(self) -> None:
        """Test that an over-long fragment does not shift later segments."""
        breakdown = compile_mask("AAA/##/##")
        joined = join_values(["abcd", "12", "xy"], breakdown)

        assert len(joined) == 9
        assert joined == "abc/12/xy"
        assert split_value(joined, breakdown) == ["abc", "12", "xy"]

    def test_join_scalar(self) -> None:
        """Test that a non-string scalar fills the first segment."""
        assert join_values(5, compile_mask("999")) == "5  "
        assert join_values(12, compile_mask("99-99")) == "12-  "

    def test_join_literal_only(self) -> None:
        """Test that a literal-only mask joins to the literals."""
        assert join_values([], compile_mask("///")) == "///"

    @pytest.mark.parametrize(
        "mask",
        ["AAA/##/##", "9999-99-99", "*", "(999) 999-9999", "///"],
    )
    def test_join_length_equals_mask_length(self, mask: str) -> None:
        """Test that the joined value is exactly as long as the mask."""
        assert len(join_values([], compile_mask(mask))) == len(mask)

    @pytest.mark.parametrize(
        ("mask", "value"),
        [
            ("AAA/##/##", "abc/12/xy"),
            ("AAA/##/##", "a  /1 /  "),
            ("9999-99-99", "2024-01-31"),
            ("(999) 999-9999", "(555) 123-4567"),
        ],
    )
    def test_split_then_join_round_trip(self, mask: str, value: str) -> None:
        """Test that split then join keeps the trimmed fragments."""
        breakdown = compile_mask(mask)
        joined = join_values(split_value(value, breakdown), breakdown)

        assert split_value(joined, breakdown) == split_value(value, breakdown)
