"""Lesson generation: prompt the model, then recover a lesson from its reply."""

from __future__ import annotations

import logging

from .content_engine import recover_lesson
from .lesson_types import Difficulty, Language, LessonContent, LessonType
from .llm_client import LLMClient
from .prompts import LessonPrompts
from . import constants

logger = logging.getLogger(__name__)


class LessonGenerationError(Exception):
    """Raised when the model could not be reached or returned an error."""

    pass


class LessonGenerator:
    """Produces a complete lesson for a (language, difficulty, type, topic) request.

    Malformed model output is never an error here; only transport failures
    raise.
    """

    def __init__(self, llm_client: LLMClient, max_tokens: int = constants.LESSON_MAX_TOKENS):
        self._llm_client = llm_client
        self._max_tokens = max_tokens

    def generate(
        self,
        language: Language,
        difficulty: Difficulty,
        lesson_type: LessonType,
        topic: str,
    ) -> LessonContent:
        logger.info(
            "Generating %s %s lesson on '%s' (%s)",
            difficulty.value,
            lesson_type.value,
            topic,
            language.display_name,
        )
        user_message = LessonPrompts.build_user_message(
            language, difficulty, lesson_type, topic
        )
        try:
            raw_response = self._llm_client.complete(
                system_prompt=LessonPrompts.SYSTEM_PROMPT,
                user_message=user_message,
                max_tokens=self._max_tokens,
            )
        except Exception as exc:
            raise LessonGenerationError(f"Lesson request failed: {exc}") from exc

        logger.debug("LLM raw response length: %d chars", len(raw_response or ""))
        return recover_lesson(raw_response or "", language, topic)
