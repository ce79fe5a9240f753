"""Base class for per-language build-and-run toolchains."""

from __future__ import annotations

import logging
import subprocess
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Sequence

from ..execution_types import ExecutionOutcome
from ..lesson_types import Language

logger = logging.getLogger(__name__)


class ToolchainSpec(ABC):
    """How one language turns a solution file into program output.

    Subclasses set ``language`` and ``scaffold_template`` and implement
    ``_build_and_run``; the missing-file precondition is checked here so no
    subclass ever starts a process for a file that is not there.
    """

    language: Language
    scaffold_template: str

    def __init__(self, timeout: float | None = None):
        self.timeout = timeout

    @property
    def extension(self) -> str:
        return self.language.extension

    def scaffold(self, exercise_number: int) -> str:
        """Boilerplate content for a fresh solution file."""
        return f"// Exercise {exercise_number}\n{self.scaffold_template}"

    def build_and_run(self, file_path: str | Path, stdin_input: str = "") -> ExecutionOutcome:
        """Build (when the language needs it) and run *file_path* once.

        Args:
            file_path: The learner's solution file.
            stdin_input: Text fed on stdin; empty means stdin is closed.

        Returns:
            The ExecutionOutcome of the run. Never raises for failing code,
            missing tools or timeouts.
        """
        path = Path(file_path)
        if not path.is_file():
            logger.warning("Solution file not found: %s", path)
            return ExecutionOutcome.missing_file(str(path))
        logger.debug("Running %s solution %s", self.language.display_name, path)
        return self._build_and_run(path, stdin_input)

    @abstractmethod
    def _build_and_run(self, path: Path, stdin_input: str) -> ExecutionOutcome: ...

    def _run_process(
        self,
        command: Sequence[str | Path],
        stdin_input: str = "",
        cwd: Path | None = None,
    ) -> subprocess.CompletedProcess:
        """Run *command* to completion, capturing text output.

        Raises ``OSError`` when the executable cannot be started and
        ``subprocess.TimeoutExpired`` when the timeout elapses.
        """
        stdin_kwargs = {"input": stdin_input} if stdin_input else {"stdin": subprocess.DEVNULL}
        return subprocess.run(
            [str(part) for part in command],
            cwd=cwd,
            capture_output=True,
            text=True,
            errors="replace",
            timeout=self.timeout,
            **stdin_kwargs,
        )

    def _timeout_message(self) -> str:
        return f"Timed out after {self.timeout} seconds"
