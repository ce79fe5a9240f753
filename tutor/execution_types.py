"""Outcome of building and running a learner's solution once."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class OutcomeKind(Enum):
    SUCCESS = "success"
    BUILD_FAILED = "build_failed"
    RUNTIME_FAILED = "runtime_failed"
    MISSING_FILE = "missing_file"


@dataclass(frozen=True)
class ExecutionOutcome:
    """Tagged result of one execution.

    ``stdout`` is only meaningful on success; ``diagnostic`` carries the
    compiler or runtime stderr of a failure. ``toolchain_output`` holds
    toolchain chatter that is surfaced even when the run succeeded (cargo
    warnings).
    """

    kind: OutcomeKind
    stdout: str = ""
    diagnostic: str = ""
    toolchain_output: str = ""

    @classmethod
    def success(cls, stdout: str, toolchain_output: str = "") -> ExecutionOutcome:
        return cls(
            kind=OutcomeKind.SUCCESS, stdout=stdout, toolchain_output=toolchain_output
        )

    @classmethod
    def build_failed(cls, diagnostic: str) -> ExecutionOutcome:
        return cls(kind=OutcomeKind.BUILD_FAILED, diagnostic=diagnostic)

    @classmethod
    def runtime_failed(cls, diagnostic: str, toolchain_output: str = "") -> ExecutionOutcome:
        return cls(
            kind=OutcomeKind.RUNTIME_FAILED,
            diagnostic=diagnostic,
            toolchain_output=toolchain_output,
        )

    @classmethod
    def missing_file(cls, path: str) -> ExecutionOutcome:
        return cls(kind=OutcomeKind.MISSING_FILE, diagnostic=f"File not found: {path}")

    @property
    def succeeded(self) -> bool:
        return self.kind is OutcomeKind.SUCCESS
