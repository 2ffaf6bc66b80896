"""Tests for line and row parsing helpers."""

import pytest

from acquisition import MalformedRowError, Row, parse_row, split_lines, to_contact


class TestParseHelpers:
    def test_split_lines(self):
        assert split_lines("a\nb\n\nc") == ["a", "b", "", "c"]
        assert split_lines("") == [""]

    def test_parse_row_trims_fields(self):
        row = parse_row("   John Doe ,  India, 1234567890\r")
        assert row == Row(name="John Doe", country="India", phone="1234567890")
        assert row.country == "India"

    def test_parse_row_too_few_fields(self):
        with pytest.raises(MalformedRowError) as exc_info:
            parse_row("John Doe, India", line_number=4)
        assert exc_info.value.field_count == 2
        assert exc_info.value.line_number == 4
        assert exc_info.value.line == "John Doe, India"
        assert "line 4" in str(exc_info.value)

    def test_parse_row_too_many_fields(self):
        with pytest.raises(MalformedRowError) as exc_info:
            parse_row("John Doe, India, 123, extra")
        assert exc_info.value.field_count == 4
        assert exc_info.value.line_number is None

    def test_malformed_row_error_is_value_error(self):
        with pytest.raises(ValueError):
            parse_row("no delimiters here")

    def test_to_contact(self):
        contact = to_contact(Row("Jane Doe", "India", "9876543210"))
        assert contact == {"city": "Jane Doe", "phone": "9876543210"}
