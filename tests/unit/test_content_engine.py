"""Tests for tutor.content_engine."""

from __future__ import annotations

import json

import pytest

from tutor.content_engine import recover_lesson
from tutor.lesson_types import Language, LessonContent

_LESSON = {
    "concept": "A vector is a growable array stored on the heap.",
    "step_by_step": ["Step 1: Create it with vec![]", "Step 2: Push values"],
    "code_examples": [
        {"code": "let mut v = vec![1, 2];", "explanation": "Creates a vector {with braces}."},
        {"code": "v.push(3);", "explanation": "Appends \"3\"."},
    ],
    "syntax_guide": "Vec<T>",
    "common_patterns": ["Collecting iterators"],
    "exercises": [
        {
            "title": "Sum a vector",
            "description": "Read input from stdin and print the sum.",
            "hints": ["Use iter().sum()"],
            "example_input": "1 2 3",
            "example_output": "6",
            "test_cases": [
                {"input": "1 2 3", "output": "6"},
                {"input": "4 5", "output": "9"},
            ],
        }
    ],
}


def _assert_floors(lesson: LessonContent) -> None:
    assert lesson.concept.strip()
    assert len(lesson.examples) >= 2
    assert len(lesson.exercises) >= 1
    for exercise in lesson.exercises:
        assert len(exercise.test_cases) >= 1


class TestRecoverLesson:
    def test_valid_lesson_is_returned_unchanged(self):
        lesson = recover_lesson(json.dumps(_LESSON), Language.RUST, "vectors")
        assert lesson.to_wire_dict() == LessonContent.from_wire(_LESSON).to_wire_dict()

    def test_fenced_lesson_is_raised_to_floors(self):
        text = 'Here you go:\n```json\n{"concept":"c","exercises":[]}\n```'
        lesson = recover_lesson(text, Language.JAVASCRIPT, "loops")
        assert lesson.concept == "c"
        assert len(lesson.exercises) == 1
        assert len(lesson.examples) == 2

    def test_unterminated_string_yields_valid_lesson(self):
        lesson = recover_lesson('{"concept": "Hello wor', Language.RUST, "ownership")
        assert lesson.concept == "An introduction to ownership in Rust."
        _assert_floors(lesson)

    def test_unusable_text_is_synthesized(self):
        lesson = recover_lesson("Sorry, I can't do that.", Language.CPP, "random numbers")
        assert lesson.exercises[0].title == "Practice: random numbers"
        _assert_floors(lesson)

    @pytest.mark.parametrize("indent", [None, 2])
    def test_every_truncation_satisfies_floors(self, indent):
        text = json.dumps(_LESSON, indent=indent)
        for cut in range(1, len(text)):
            lesson = recover_lesson(text[:cut], Language.RUST, "vectors")
            _assert_floors(lesson)

    def test_truncation_keeps_completed_fields(self):
        text = json.dumps(_LESSON)
        cut = text.index('"common_patterns"')
        lesson = recover_lesson(text[:cut], Language.RUST, "vectors")
        assert lesson.concept == _LESSON["concept"]
        assert lesson.syntax_guide == "Vec<T>"
        assert [example.code for example in lesson.examples] == [
            "let mut v = vec![1, 2];",
            "v.push(3);",
        ]
