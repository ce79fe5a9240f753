"""Lesson content schema (model output) and lesson request enums."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class Language(str, Enum):
    JAVASCRIPT = "javascript"
    CPP = "cpp"
    RUST = "rust"

    @property
    def display_name(self) -> str:
        return _LANGUAGE_DISPLAY_NAMES[self]

    @property
    def extension(self) -> str:
        return _LANGUAGE_EXTENSIONS[self]

    @classmethod
    def parse(cls, name: str) -> Language:
        """Resolve a user-facing language name ("js", "C++", "rust", ...)."""
        key = name.strip().lower()
        for language in cls:
            if key in (language.value, language.extension, language.display_name.lower()):
                return language
        raise ValueError(f"Unsupported language: {name}")

    def __str__(self) -> str:
        return self.display_name


_LANGUAGE_DISPLAY_NAMES: dict[Language, str] = {
    Language.JAVASCRIPT: "JavaScript",
    Language.CPP: "C++",
    Language.RUST: "Rust",
}

_LANGUAGE_EXTENSIONS: dict[Language, str] = {
    Language.JAVASCRIPT: "js",
    Language.CPP: "cpp",
    Language.RUST: "rs",
}


class Difficulty(str, Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()


class LessonType(str, Enum):
    SHORT = "short"
    MEDIUM = "medium"
    LONG = "long"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()

    @property
    def concept_count(self) -> int:
        return {LessonType.SHORT: 1, LessonType.MEDIUM: 2, LessonType.LONG: 3}[self]

    @property
    def exercise_count(self) -> int:
        return {LessonType.SHORT: 1, LessonType.MEDIUM: 3, LessonType.LONG: 5}[self]


# ── Model output schema ──────────────────────────────────────────


class _WireModel(BaseModel):
    """Accepts both the wire names the model emits and the Python field names."""

    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)


class CodeExample(_WireModel):
    code: str = ""
    explanation: str = ""

    @field_validator("code", "explanation", mode="before")
    @classmethod
    def null_text(cls, value: Any) -> Any:
        return "" if value is None else value


class TestCase(_WireModel):
    """One (stdin, expected stdout) pair. Empty input means no stdin."""

    __test__ = False  # not a pytest class

    input: str = ""
    expected_output: str = Field(
        default="",
        validation_alias=AliasChoices("output", "expected_output"),
        serialization_alias="output",
    )

    @field_validator("input", "expected_output", mode="before")
    @classmethod
    def null_text(cls, value: Any) -> Any:
        return "" if value is None else value


class Exercise(_WireModel):
    title: str = ""
    description: str = ""
    hints: list[str] = []
    example_input: str | None = None
    example_output: str | None = None
    test_cases: list[TestCase] = []

    @field_validator("title", "description", mode="before")
    @classmethod
    def null_text(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("hints", "test_cases", mode="before")
    @classmethod
    def null_list(cls, value: Any) -> Any:
        return [] if value is None else value


class LessonContent(_WireModel):
    concept: str = ""
    steps: list[str] = Field(
        default=[],
        validation_alias=AliasChoices("step_by_step", "steps"),
        serialization_alias="step_by_step",
    )
    examples: list[CodeExample] = Field(
        default=[],
        validation_alias=AliasChoices("code_examples", "examples"),
        serialization_alias="code_examples",
    )
    syntax_guide: str = ""
    patterns: list[str] = Field(
        default=[],
        validation_alias=AliasChoices("common_patterns", "patterns"),
        serialization_alias="common_patterns",
    )
    exercises: list[Exercise] = []

    @field_validator("concept", "syntax_guide", mode="before")
    @classmethod
    def null_text(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("steps", "examples", "patterns", "exercises", mode="before")
    @classmethod
    def null_list(cls, value: Any) -> Any:
        return [] if value is None else value

    @classmethod
    def from_wire(cls, data: dict[str, Any]) -> LessonContent:
        return cls.model_validate(data)

    def to_wire_dict(self) -> dict[str, Any]:
        """Serialise using the field names the model is prompted with."""
        return self.model_dump(by_alias=True)
