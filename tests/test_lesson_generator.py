"""Tests for tutor.lesson_generator."""

from __future__ import annotations

import json

import pytest

from tutor.lesson_generator import LessonGenerationError, LessonGenerator
from tutor.lesson_types import Difficulty, Language, LessonType
from tutor.llm_client import LLMClient
from tutor.prompts import LessonPrompts


class FakeLLMClient(LLMClient):
    """Returns a canned response and records calls."""

    def __init__(self, response: str = ""):
        self._response = response
        self.calls: list[dict] = []

    def complete(self, system_prompt: str, user_message: str, max_tokens: int = 4096) -> str:
        self.calls.append(
            {
                "system_prompt": system_prompt,
                "user_message": user_message,
                "max_tokens": max_tokens,
            }
        )
        return self._response


class FailingLLMClient(LLMClient):
    def complete(self, system_prompt: str, user_message: str, max_tokens: int = 4096) -> str:
        raise ConnectionError("connection refused")


_RESPONSE = json.dumps(
    {
        "concept": "Structs group related fields.",
        "step_by_step": ["Step 1: Define", "Step 2: Instantiate"],
        "code_examples": [
            {"code": "struct P { x: i32 }", "explanation": "A struct."},
            {"code": "let p = P { x: 1 };", "explanation": "An instance."},
        ],
        "syntax_guide": "struct Name { field: Type }",
        "common_patterns": ["Builder"],
        "exercises": [
            {
                "title": "Point",
                "description": "Print a point.",
                "hints": [],
                "example_input": "",
                "example_output": "(1, 2)",
                "test_cases": [{"input": "", "output": "(1, 2)"}],
            }
        ],
    }
)


class TestLessonGenerator:
    def test_prompts_model_and_recovers_lesson(self):
        client = FakeLLMClient("Sure!\n```json\n" + _RESPONSE + "\n```")
        lesson = LessonGenerator(client).generate(
            Language.RUST, Difficulty.BEGINNER, LessonType.MEDIUM, "structs"
        )
        assert lesson.concept == "Structs group related fields."
        assert lesson.exercises[0].title == "Point"

        call = client.calls[0]
        assert call["system_prompt"] == LessonPrompts.SYSTEM_PROMPT
        assert call["max_tokens"] == 7000
        assert "LANGUAGE: Rust" in call["user_message"]
        assert "TOPIC: structs" in call["user_message"]
        assert "at least 3 exercise(s)" in call["user_message"]

    def test_empty_response_is_synthesized(self):
        lesson = LessonGenerator(FakeLLMClient("")).generate(
            Language.JAVASCRIPT, Difficulty.BEGINNER, LessonType.SHORT, "random numbers"
        )
        assert len(lesson.examples) == 2
        assert lesson.exercises[0].title == "Practice: random numbers"

    def test_transport_error_raises(self):
        generator = LessonGenerator(FailingLLMClient())
        with pytest.raises(LessonGenerationError, match="connection refused"):
            generator.generate(Language.CPP, Difficulty.ADVANCED, LessonType.LONG, "templates")


class TestLessonPrompts:
    def test_user_message_counts_follow_lesson_type(self):
        message = LessonPrompts.build_user_message(
            Language.CPP, Difficulty.INTERMEDIATE, LessonType.LONG, "pointers"
        )
        assert "Focus on 3 core concept(s)" in message
        assert "at least 5 exercise(s)" in message
        assert "DIFFICULTY: Intermediate" in message
        assert "g++" in message
