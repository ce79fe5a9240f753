"""Coding tutor: lesson recovery from model output and exercise verification."""

from .content_engine import recover_lesson  # noqa: F401
from .lesson_generator import LessonGenerator, LessonGenerationError  # noqa: F401
from .lesson_types import (  # noqa: F401
    CodeExample,
    Difficulty,
    Exercise,
    Language,
    LessonContent,
    LessonType,
    TestCase,
)
from .verification import VerificationSession, compare_output, verify_exercise  # noqa: F401
