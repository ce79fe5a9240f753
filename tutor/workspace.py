"""Creating scaffolded solution files under an explicit workspace root."""

from __future__ import annotations

import logging
from pathlib import Path

from .lesson_types import Language
from .toolchains import get_toolchain
from . import constants

logger = logging.getLogger(__name__)


def exercise_file_name(language: Language, exercise_number: int) -> str:
    return f"{constants.EXERCISE_FILE_PREFIX}{exercise_number}.{language.extension}"


def create_exercise_file(
    language: Language, exercise_number: int, workspace_root: str | Path
) -> Path:
    """Write the language's scaffold for *exercise_number* and return its path.

    An existing file of the same name is overwritten with a fresh scaffold.
    """
    root = Path(workspace_root)
    root.mkdir(parents=True, exist_ok=True)
    path = root / exercise_file_name(language, exercise_number)
    path.write_text(get_toolchain(language).scaffold(exercise_number), encoding="utf-8")
    logger.info("Created exercise file %s", path)
    return path
