"""Tests for tutor.json_scanner."""

from __future__ import annotations

from tutor.json_scanner import JSONStructureScanner, ScanState, closers_for


class TestScanBasics:
    def setup_method(self):
        self.scanner = JSONStructureScanner()

    def test_text_without_brace_is_not_found(self):
        result = self.scanner.scan("no json here")
        assert not result.found
        assert result.start == -1

    def test_balanced_object_inside_prose(self):
        result = self.scanner.scan('xx{"a": "b"} tail')
        assert result.start == 2
        assert result.closed
        assert result.end == 12
        assert result.stack == []

    def test_braces_inside_strings_do_not_count(self):
        text = '{"code": "fn main() { }"}'
        result = self.scanner.scan(text)
        assert result.closed
        assert result.end == len(text)

    def test_escaped_quote_does_not_end_string(self):
        result = self.scanner.scan(r'{"a": "say \"hi\"", "b": [1')
        assert not result.closed
        assert not result.ended_in_string
        assert result.unclosed_objects() == 1
        assert result.unclosed_arrays() == 1

    def test_unterminated_string(self):
        result = self.scanner.scan('{"concept": "Hello wor')
        assert result.ended_in_string
        assert result.state is ScanState.IN_STRING

    def test_trailing_backslash_leaves_escape_state(self):
        result = self.scanner.scan('{"a": "x\\')
        assert result.state is ScanState.ESCAPED
        assert result.ended_in_string

    def test_mismatched_closer_is_ignored(self):
        result = self.scanner.scan('{"a": ]}')
        assert result.closed
        assert result.end == 8

    def test_stops_at_first_complete_object(self):
        result = self.scanner.scan('{"a": 1} {"b": 2}')
        assert result.end == 8


class TestBoundaries:
    def test_value_strings_commas_and_openers_are_boundaries(self):
        result = JSONStructureScanner().scan('{"a": "b", "c": [')
        assert [b.position for b in result.boundaries] == [1, 9, 9, 17]
        assert result.boundaries[-1].stack == ("{", "[")

    def test_closed_key_is_not_a_boundary(self):
        result = JSONStructureScanner().scan('{"key"')
        assert [b.position for b in result.boundaries] == [1]

    def test_strings_in_arrays_are_boundaries(self):
        result = JSONStructureScanner().scan('["x"')
        assert result.start == -1

        result = JSONStructureScanner().scan('{"s": ["x"')
        assert result.boundaries[-1].position == len('{"s": ["x"')
        assert result.boundaries[-1].stack == ("{", "[")


class TestClosersFor:
    def test_most_recent_first(self):
        assert closers_for(("{", "[", "{")) == "}]}"

    def test_empty_stack(self):
        assert closers_for(()) == ""
