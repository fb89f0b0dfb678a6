"""
Unit tests for the vCard string codec.

Tests escaping, unescaping and splitting in vcardio.utils.string_codec.
"""

import pytest

from vcardio.utils.string_codec import (
    encode_parameter_value,
    escape,
    escape_newlines,
    escape_text,
    join,
    split_by,
    unescape,
)


class TestEscape:
    """Tests for escape function."""

    @pytest.mark.unit
    def test_separator_is_escaped(self):
        assert escape("Smith, John", ",") == r"Smith\, John"

    @pytest.mark.unit
    def test_backslash_escaped_before_separator(self):
        """An existing backslash is doubled, not merged with the separator escape."""
        assert escape("a\\,b", ",") == "a\\\\\\,b"

    @pytest.mark.unit
    def test_newlines_become_backslash_n(self):
        assert escape("line1\r\nline2\nline3\rline4", ",") == r"line1\nline2\nline3\nline4"

    @pytest.mark.unit
    def test_other_separator_untouched(self):
        assert escape("Acme, Inc.", ";") == "Acme, Inc."

    @pytest.mark.unit
    def test_empty_string(self):
        assert escape("", ",") == ""

    @pytest.mark.unit
    def test_escape_text_escapes_both_delimiters(self):
        assert escape_text("a,b;c") == r"a\,b\;c"


class TestUnescape:
    """Tests for unescape function."""

    @pytest.mark.unit
    def test_escaped_separator(self):
        assert unescape(r"Smith\, John") == "Smith, John"

    @pytest.mark.unit
    def test_newline_sequences(self):
        assert unescape(r"a\nb\Nc") == "a\nb\nc"

    @pytest.mark.unit
    def test_escaped_backslash(self):
        assert unescape("a\\\\b") == "a\\b"

    @pytest.mark.unit
    def test_trailing_backslash_kept(self):
        assert unescape("abc\\") == "abc\\"

    @pytest.mark.unit
    def test_plain_value_unchanged(self):
        assert unescape("plain") == "plain"


class TestSplitBy:
    """Tests for split_by function."""

    @pytest.mark.unit
    def test_simple_split(self):
        assert split_by("Anna,Ann", ",", True, True) == ["Anna", "Ann"]

    @pytest.mark.unit
    def test_escaped_separator_not_split(self):
        assert split_by(r"a\,b,c", ",", True, True) == ["a,b", "c"]

    @pytest.mark.unit
    def test_escaped_separator_kept_without_unescape(self):
        assert split_by(r"a\,b,c", ",", False, False) == [r"a\,b", "c"]

    @pytest.mark.unit
    def test_escaped_backslash_before_separator_splits(self):
        assert split_by("a\\\\,b", ",", True, True) == ["a\\", "b"]

    @pytest.mark.unit
    def test_trim_each(self):
        assert split_by(" Anna , Ann ", ",", True, True) == ["Anna", "Ann"]
        assert split_by(" Anna , Ann ", ",", True, False) == [" Anna ", " Ann "]

    @pytest.mark.unit
    def test_empty_string_gives_single_empty_field(self):
        assert split_by("", ",", True, True) == [""]

    @pytest.mark.unit
    def test_consecutive_separators_give_empty_fields(self):
        assert split_by("a,,b,", ",", True, True) == ["a", "", "b", ""]

    @pytest.mark.unit
    def test_semicolon_separator(self):
        assert split_by(r"Acme\; Sons;Research, Development", ";", True, True) == [
            "Acme; Sons",
            "Research, Development",
        ]


class TestJoin:
    """Tests for join function."""

    @pytest.mark.unit
    def test_join_escapes_each_value(self):
        assert join(["Smith, John", "Ann"], ",") == r"Smith\, John,Ann"

    @pytest.mark.unit
    def test_join_empty(self):
        assert join([], ",") == ""

    @pytest.mark.unit
    def test_join_then_split_recovers_values(self):
        values = ["Anna", "a,b", "back\\slash", "semi;colon"]
        assert split_by(join(values, ","), ",", True, False) == values


class TestLineBreakAndParameterEncoding:
    """Tests for escape_newlines and encode_parameter_value functions."""

    @pytest.mark.unit
    def test_escape_newlines_only_touches_line_breaks(self):
        assert escape_newlines("a,b\\c\r\nd\re\nf") == "a,b\\c\\nd\\ne\\nf"

    @pytest.mark.unit
    def test_caret_first(self):
        assert encode_parameter_value("^n") == "^^n"

    @pytest.mark.unit
    def test_quotes_and_newlines(self):
        assert encode_parameter_value('a"b\r\nc') == "a^'b^nc"
