"""Tests for tutor.lesson_types."""

from __future__ import annotations

import pytest

from tutor.lesson_types import Difficulty, Language, LessonContent, LessonType, TestCase


class TestLanguage:
    @pytest.mark.parametrize(
        "name, expected",
        [
            ("rust", Language.RUST),
            ("rs", Language.RUST),
            ("C++", Language.CPP),
            ("cpp", Language.CPP),
            (" JavaScript ", Language.JAVASCRIPT),
            ("js", Language.JAVASCRIPT),
        ],
    )
    def test_parse(self, name, expected):
        assert Language.parse(name) is expected

    def test_parse_unknown(self):
        with pytest.raises(ValueError, match="Unsupported language"):
            Language.parse("cobol")

    def test_display_and_extension(self):
        assert str(Language.CPP) == "C++"
        assert Language.RUST.extension == "rs"


class TestLessonType:
    def test_counts(self):
        assert [t.concept_count for t in LessonType] == [1, 2, 3]
        assert [t.exercise_count for t in LessonType] == [1, 3, 5]

    def test_display_name(self):
        assert LessonType.MEDIUM.display_name == "Medium"
        assert Difficulty.ADVANCED.display_name == "Advanced"


class TestWireNames:
    def test_wire_and_python_names_both_accepted(self):
        wire = LessonContent.from_wire({"step_by_step": ["a"], "common_patterns": ["p"]})
        python = LessonContent(steps=["a"], patterns=["p"])
        assert wire == python

    def test_serialises_with_wire_names(self):
        data = LessonContent(
            concept="c", exercises=[{"test_cases": [{"input": "1", "output": "2"}]}]
        ).to_wire_dict()
        assert set(data) == {
            "concept",
            "step_by_step",
            "code_examples",
            "syntax_guide",
            "common_patterns",
            "exercises",
        }
        assert data["exercises"][0]["test_cases"] == [{"input": "1", "output": "2"}]

    def test_test_case_output_alias(self):
        assert TestCase.model_validate({"output": "x"}).expected_output == "x"
        assert TestCase(expected_output="y").expected_output == "y"
