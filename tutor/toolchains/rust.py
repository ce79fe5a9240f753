"""Rust: build and run inside a throwaway cargo project."""

from __future__ import annotations

import logging
import shutil
import subprocess
from pathlib import Path

from ..dependency_inference import CrateScanner, generate_cargo_toml, infer_dependencies
from ..execution_types import ExecutionOutcome
from ..lesson_types import Language
from .. import constants
from ._base import ToolchainSpec

logger = logging.getLogger(__name__)

PROJECT_TOOL = "cargo"
COMPILE_ERROR_MARKER = "could not compile"


class RustToolchain(ToolchainSpec):
    """Builds with ``cargo run`` so crates like ``rand`` resolve.

    The solution is copied into a fresh project directory that is removed
    before and after every run, so runs against the same solution must not
    overlap.
    """

    language = Language.RUST
    scaffold_template = "fn main() {\n    // Write your solution here\n}\n"

    def __init__(
        self,
        timeout: float | None = None,
        workspace_root: str | Path | None = None,
        scanner: CrateScanner | None = None,
    ):
        super().__init__(timeout)
        self.workspace_root = Path(workspace_root) if workspace_root is not None else None
        self._scanner = scanner

    def project_dir(self, path: Path) -> Path:
        root = self.workspace_root if self.workspace_root is not None else path.parent
        return root / f"{constants.CARGO_PROJECT_PREFIX}{path.stem}"

    def _prepare_project(self, path: Path, project: Path) -> None:
        source = path.read_text(encoding="utf-8")
        dependencies = infer_dependencies(source, self._scanner)
        (project / "src").mkdir(parents=True)
        (project / "Cargo.toml").write_text(generate_cargo_toml(dependencies), encoding="utf-8")
        (project / "src" / "main.rs").write_text(source, encoding="utf-8")

    def _build_and_run(self, path: Path, stdin_input: str) -> ExecutionOutcome:
        project = self.project_dir(path)
        shutil.rmtree(project, ignore_errors=True)
        try:
            try:
                self._prepare_project(path, project)
            except OSError as exc:
                return ExecutionOutcome.build_failed(f"Failed to create cargo project: {exc}")
            try:
                completed = self._run_process([PROJECT_TOOL, "run"], stdin_input, cwd=project)
            except OSError as exc:
                return ExecutionOutcome.build_failed(f"Failed to execute {PROJECT_TOOL} run: {exc}")
            except subprocess.TimeoutExpired:
                return ExecutionOutcome.runtime_failed(self._timeout_message())

            if completed.stderr.strip():
                logger.info("cargo output:\n%s", completed.stderr)
            if completed.returncode != 0:
                if COMPILE_ERROR_MARKER in completed.stderr:
                    return ExecutionOutcome.build_failed(completed.stderr)
                return ExecutionOutcome.runtime_failed(
                    completed.stderr, toolchain_output=completed.stderr
                )
            return ExecutionOutcome.success(completed.stdout, toolchain_output=completed.stderr)
        finally:
            shutil.rmtree(project, ignore_errors=True)
