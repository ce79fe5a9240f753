"""C++: compile with g++, run the binary, remove it."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

from ..execution_types import ExecutionOutcome
from ..lesson_types import Language
from ._base import ToolchainSpec

logger = logging.getLogger(__name__)

COMPILER = "g++"
ARTIFACT_SUFFIX = ".out"


class CppToolchain(ToolchainSpec):
    language = Language.CPP
    scaffold_template = (
        "#include <iostream>\n"
        "using namespace std;\n"
        "\n"
        "int main() {\n"
        "    // Write your solution here\n"
        "    return 0;\n"
        "}\n"
    )

    @staticmethod
    def artifact_path(path: Path) -> Path:
        """Absolute path of the binary compiled from *path*, beside the source.

        The suffix is dropped; a source without one gets ``.out`` so the
        binary never overwrites it.
        """
        source = path.resolve()
        binary = source.with_suffix("")
        if binary == source:
            binary = source.with_name(source.name + ARTIFACT_SUFFIX)
        return binary

    def _build_and_run(self, path: Path, stdin_input: str) -> ExecutionOutcome:
        binary = self.artifact_path(path)
        try:
            try:
                compiled = self._run_process([COMPILER, "-o", binary, path])
            except OSError as exc:
                return ExecutionOutcome.build_failed(f"Failed to execute {COMPILER}: {exc}")
            except subprocess.TimeoutExpired:
                return ExecutionOutcome.build_failed(self._timeout_message())
            if compiled.returncode != 0:
                logger.info("Compilation of %s failed (exit %d)", path.name, compiled.returncode)
                return ExecutionOutcome.build_failed(compiled.stderr)

            try:
                completed = self._run_process([binary], stdin_input)
            except OSError as exc:
                return ExecutionOutcome.runtime_failed(f"Failed to execute compiled program: {exc}")
            except subprocess.TimeoutExpired:
                return ExecutionOutcome.runtime_failed(self._timeout_message())
            if completed.returncode != 0:
                return ExecutionOutcome.runtime_failed(completed.stderr)
            return ExecutionOutcome.success(completed.stdout)
        finally:
            binary.unlink(missing_ok=True)
