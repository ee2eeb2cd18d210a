"""
Tests for entry formatting.
"""

import pytest
from datetime import datetime

from debuglog.formatting import (
    flatten,
    format_entry,
    format_message,
    format_timestamp,
    is_sequence_payload,
)
from debuglog.types import LogCategory


MOMENT = datetime(2024, 5, 1, 14, 3, 7, 120000)


class TestFormatTimestamp:
    """Tests for the capture time format."""

    def test_hundredths_follow_seconds(self):
        """Hundredths are appended to the seconds without separator."""
        assert format_timestamp(MOMENT) == "14:03:0712"

    def test_hundredths_truncated_not_rounded(self):
        """Sub-hundredth precision is dropped."""
        moment = datetime(2024, 1, 1, 9, 5, 59, 999999)
        assert format_timestamp(moment) == "09:05:5999"

    def test_zero_padding(self):
        """All fields are two digits."""
        moment = datetime(2024, 1, 1, 0, 0, 0, 50000)
        assert format_timestamp(moment) == "00:00:0005"


class TestFlatten:
    """Tests for payload flattening."""

    def test_scalar_string(self):
        """A string renders as itself."""
        assert flatten("hello") == "hello"

    def test_scalar_other(self):
        """Non-string scalars render with str()."""
        assert flatten(42) == "42"
        assert flatten({"a": 1}) == "{'a': 1}"
        assert flatten(None) == "None"

    def test_sequence_trailing_separator(self):
        """Every item, the last included, is followed by one space."""
        assert flatten(["a", "b", "c"]) == "a b c "

    def test_tuple_is_a_sequence(self):
        """Tuples flatten like lists."""
        assert flatten(("x", 1)) == "x 1 "

    def test_nested_sequence(self):
        """Nested sequences keep their own trailing space."""
        assert flatten(["a", ["b", "c"]]) == "a b c  "

    def test_empty_sequence(self):
        """An empty sequence renders as nothing."""
        assert flatten([]) == ""

    def test_strings_and_bytes_are_scalars(self):
        """str/bytes are sequences in Python but not payload sequences."""
        assert not is_sequence_payload("abc")
        assert not is_sequence_payload(b"abc")
        assert is_sequence_payload(["abc"])


class TestFormatEntry:
    """Tests for full entry text."""

    def test_message_has_timestamp_and_space(self):
        """Timestamp, one space, payload."""
        assert format_message("start", MOMENT) == "14:03:0712 start"

    def test_category_prefix(self):
        """Entry starts with the category prefix."""
        assert format_entry("start", LogCategory.START, MOMENT) == "🚀 14:03:0712 start"

    def test_none_category_sequence(self):
        """Uncategorized sequence payload."""
        assert format_entry(["a", "b", "c"], LogCategory.NONE, MOMENT) == "   14:03:0712 a b c "

    def test_multiline_reindented(self):
        """Continuation lines are indented by three spaces."""
        text = format_entry("first\nsecond\nthird", LogCategory.INFO, MOMENT)
        assert text == "ℹ️ 14:03:0712 first\n   second\n   third"

    @pytest.mark.parametrize("category", list(LogCategory))
    def test_every_prefix_ends_with_space(self, category):
        """Prefix and timestamp are always separated."""
        assert category.prefix.endswith(" ")
        assert format_entry("m", category, MOMENT) == f"{category.prefix}14:03:0712 m"

    def test_same_input_same_text(self):
        """Formatting is deterministic for a fixed time."""
        first = format_entry(["x", 1], LogCategory.TEST, MOMENT)
        second = format_entry(["x", 1], LogCategory.TEST, MOMENT)
        assert first == second
