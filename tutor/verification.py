"""Running a learner's solution against an exercise's test cases."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from .execution_types import ExecutionOutcome
from .lesson_types import Exercise, Language
from .toolchains import ToolchainSpec, get_toolchain

logger = logging.getLogger(__name__)

_INPUT_WORDS: tuple[str, ...] = ("read", "input", "stdin")


def compare_output(actual: str, expected: str) -> bool:
    """Exact match after trimming surrounding whitespace."""
    return actual.strip() == expected.strip()


@dataclass(frozen=True)
class CaseResult:
    """One executed test case; ``index`` is 1-based."""

    index: int
    outcome: ExecutionOutcome
    passed: bool
    expected_output: str | None = None


@dataclass(frozen=True)
class VerificationVerdict:
    overall_pass: bool
    cases: list[CaseResult] = field(default_factory=list)

    def failed_cases(self) -> list[CaseResult]:
        return [case for case in self.cases if not case.passed]


def expects_input(exercise: Exercise) -> bool:
    return any(case.input.strip() for case in exercise.test_cases) or bool(
        exercise.example_input and exercise.example_input.strip()
    )


def case_diagnostics(exercise: Exercise) -> list[str]:
    """Advisory notes about an exercise's test cases; they never affect a verdict."""
    notes: list[str] = []
    needs_input = expects_input(exercise)
    description = exercise.description.lower()
    if needs_input and not any(word in description for word in _INPUT_WORDS):
        notes.append(
            "This exercise feeds input on stdin: your program should read "
            "from standard input."
        )
    outputs = {case.expected_output.strip() for case in exercise.test_cases}
    if not needs_input and len(outputs) > 1:
        notes.append(
            "Test cases expect different outputs but provide no input; "
            "they may have been generated incorrectly."
        )
    for note in notes:
        logger.warning("%s: %s", exercise.title or "exercise", note)
    return notes


class VerificationSession:
    """Runs test cases strictly one after another through one toolchain."""

    def __init__(self, toolchain: ToolchainSpec):
        self.toolchain = toolchain

    def run(self, exercise: Exercise, file_path: str | Path) -> VerificationVerdict:
        """Execute *file_path* once per test case and judge each run.

        A failing case never stops the remaining ones. With no test cases the
        solution runs once without stdin and passes if it runs at all.
        """
        if not exercise.test_cases:
            outcome = self.toolchain.build_and_run(file_path, "")
            logger.info("No test cases; single run %s", outcome.kind.value)
            return VerificationVerdict(
                overall_pass=outcome.succeeded,
                cases=[CaseResult(index=1, outcome=outcome, passed=outcome.succeeded)],
            )

        cases: list[CaseResult] = []
        for index, test_case in enumerate(exercise.test_cases, start=1):
            outcome = self.toolchain.build_and_run(file_path, test_case.input)
            passed = outcome.succeeded and compare_output(
                outcome.stdout, test_case.expected_output
            )
            logger.debug("Test case %d: %s, passed=%s", index, outcome.kind.value, passed)
            cases.append(
                CaseResult(
                    index=index,
                    outcome=outcome,
                    passed=passed,
                    expected_output=test_case.expected_output,
                )
            )
        overall = all(case.passed for case in cases)
        logger.info(
            "Verified '%s': %d/%d test case(s) passed",
            exercise.title,
            sum(case.passed for case in cases),
            len(cases),
        )
        return VerificationVerdict(overall_pass=overall, cases=cases)


def verify_exercise(
    exercise: Exercise,
    language: Language | str,
    file_path: str | Path,
    timeout: float | None = None,
    workspace_root: str | Path | None = None,
) -> VerificationVerdict:
    """Verify a solution with the toolchain registered for *language*."""
    toolchain = get_toolchain(language, timeout=timeout, workspace_root=workspace_root)
    return VerificationSession(toolchain).run(exercise, file_path)
