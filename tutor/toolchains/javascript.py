"""JavaScript: run the file with node."""

from __future__ import annotations

import subprocess
from pathlib import Path

from ..execution_types import ExecutionOutcome
from ..lesson_types import Language
from ._base import ToolchainSpec

INTERPRETER = "node"


class JavaScriptToolchain(ToolchainSpec):
    language = Language.JAVASCRIPT
    scaffold_template = "// Write your solution here\n\n"

    def _build_and_run(self, path: Path, stdin_input: str) -> ExecutionOutcome:
        try:
            completed = self._run_process([INTERPRETER, path], stdin_input)
        except OSError as exc:
            return ExecutionOutcome.runtime_failed(f"Failed to execute {INTERPRETER}: {exc}")
        except subprocess.TimeoutExpired:
            return ExecutionOutcome.runtime_failed(self._timeout_message())
        if completed.returncode != 0:
            return ExecutionOutcome.runtime_failed(completed.stderr)
        return ExecutionOutcome.success(completed.stdout)
