"""Lesson content engine: recovery, then synthesis, then the lesson floors."""

from __future__ import annotations

import logging

from .content_synthesizer import ensure_lesson_floors, synthesize
from .json_recovery import RecoveryStatus, recover
from .lesson_types import Language, LessonContent

logger = logging.getLogger(__name__)


def recover_lesson(raw_text: str, language: Language, topic: str) -> LessonContent:
    """Turn raw model output into a lesson that satisfies every floor.

    Never raises on malformed text: anything unrecoverable is synthesized.

    Args:
        raw_text: The model's response, verbatim.
        language: The language the lesson teaches.
        topic: The lesson topic, used for curated content and placeholders.

    Returns:
        A LessonContent with at least two examples, at least one exercise and
        at least one test case per exercise.
    """
    result = recover(raw_text)
    if result.status is RecoveryStatus.FAILED:
        logger.warning("Could not extract JSON, creating fallback lesson")
        content = synthesize(raw_text, language, topic)
    else:
        logger.info(
            "Lesson recovered (%s): %d example(s), %d exercise(s)",
            result.status.value,
            len(result.content.examples),
            len(result.content.exercises),
        )
        content = result.content
    return ensure_lesson_floors(content, language, topic)
