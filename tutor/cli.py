"""Command-line entry point: recover, verify, scaffold and generate lessons."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from .config import TutorConfig
from .content_engine import recover_lesson
from .lesson_generator import LessonGenerationError, LessonGenerator
from .lesson_types import Difficulty, Language, LessonContent, LessonType
from .llm_client import get_llm_client
from .verification import VerificationVerdict, case_diagnostics, verify_exercise
from .workspace import create_exercise_file

logger = logging.getLogger(__name__)


def _print_header(title: str) -> None:
    print(f"\n═══ {title} ═══")


def _read_text(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8")


def _emit_lesson(lesson: LessonContent, output: str | None) -> None:
    text = json.dumps(lesson.to_wire_dict(), indent=2, ensure_ascii=False)
    if output:
        Path(output).write_text(text + "\n", encoding="utf-8")
        logger.info("Wrote lesson to %s", output)
    else:
        print(text)


def _print_verdict(verdict: VerificationVerdict) -> None:
    _print_header("Test Results")
    for case in verdict.cases:
        status = "PASS" if case.passed else "FAIL"
        print(f"  Test {case.index}: {status} ({case.outcome.kind.value})")
        if case.passed:
            continue
        if case.outcome.succeeded and case.expected_output is not None:
            print(f"    expected: {case.expected_output.strip()!r}")
            print(f"    actual  : {case.outcome.stdout.strip()!r}")
        elif case.outcome.diagnostic:
            for line in case.outcome.diagnostic.strip().splitlines():
                print(f"    {line}")
    print(f"\n  Overall: {'PASS' if verdict.overall_pass else 'FAIL'}")


def _cmd_recover(args: argparse.Namespace, config: TutorConfig) -> int:
    lesson = recover_lesson(_read_text(args.file), args.language, args.topic)
    _emit_lesson(lesson, args.output)
    return 0


def _cmd_lesson(args: argparse.Namespace, config: TutorConfig) -> int:
    provider = args.provider or config.provider
    model = args.model if args.model is not None else config.model
    if provider != config.provider and args.model is None:
        model = ""
    client = get_llm_client(provider=provider, model=model, base_url=config.base_url)
    generator = LessonGenerator(client, max_tokens=config.max_tokens)
    try:
        lesson = generator.generate(args.language, args.difficulty, args.type, args.topic)
    except LessonGenerationError as exc:
        logger.error("%s", exc)
        return 1
    _emit_lesson(lesson, args.output)
    return 0


def _cmd_scaffold(args: argparse.Namespace, config: TutorConfig) -> int:
    root = args.workspace or config.workspace_root
    path = create_exercise_file(args.language, args.number, root)
    print(path)
    return 0


def _cmd_verify(args: argparse.Namespace, config: TutorConfig) -> int:
    lesson = LessonContent.from_wire(json.loads(_read_text(args.lesson)))
    if not 1 <= args.exercise <= len(lesson.exercises):
        logger.error(
            "Exercise %d does not exist; the lesson has %d exercise(s)",
            args.exercise,
            len(lesson.exercises),
        )
        return 2
    exercise = lesson.exercises[args.exercise - 1]

    for note in case_diagnostics(exercise):
        print(f"Note: {note}")

    timeout = args.timeout if args.timeout is not None else config.timeout
    verdict = verify_exercise(
        exercise,
        args.language,
        args.solution,
        timeout=timeout,
        workspace_root=args.workspace,
    )
    _print_verdict(verdict)
    return 0 if verdict.overall_pass else 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tutor", description="Interactive coding lessons with verified exercises"
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    def add_language(sub: argparse.ArgumentParser) -> None:
        sub.add_argument(
            "--language",
            "-l",
            type=Language.parse,
            required=True,
            help="Lesson language: javascript, cpp or rust",
        )

    recover = subparsers.add_parser(
        "recover", help="Turn raw model output into a complete lesson JSON"
    )
    recover.add_argument("file", help="File holding the raw model output ('-' for stdin)")
    add_language(recover)
    recover.add_argument("--topic", "-t", required=True, help="Lesson topic")
    recover.add_argument("--output", "-o", default=None, help="Write the lesson here")
    recover.set_defaults(handler=_cmd_recover)

    lesson = subparsers.add_parser("lesson", help="Generate a lesson with a model")
    add_language(lesson)
    lesson.add_argument("--topic", "-t", required=True, help="Lesson topic")
    lesson.add_argument(
        "--difficulty",
        "-d",
        type=Difficulty,
        default=Difficulty.BEGINNER,
        help="beginner, intermediate or advanced (default: beginner)",
    )
    lesson.add_argument(
        "--type",
        type=LessonType,
        default=LessonType.SHORT,
        help="short, medium or long (default: short)",
    )
    lesson.add_argument(
        "--provider",
        "-p",
        default=None,
        choices=["ollama", "claude", "openai"],
        help="LLM provider (default: TUTOR_PROVIDER or ollama)",
    )
    lesson.add_argument("--model", "-m", default=None, help="Model name override")
    lesson.add_argument("--output", "-o", default=None, help="Write the lesson here")
    lesson.set_defaults(handler=_cmd_lesson)

    scaffold = subparsers.add_parser("scaffold", help="Create a solution file")
    add_language(scaffold)
    scaffold.add_argument("--number", "-n", type=int, default=1, help="Exercise number")
    scaffold.add_argument(
        "--workspace", "-w", default=None, help="Directory for solution files"
    )
    scaffold.set_defaults(handler=_cmd_scaffold)

    verify = subparsers.add_parser(
        "verify", help="Run a solution against an exercise's test cases"
    )
    verify.add_argument("lesson", help="Lesson JSON file ('-' for stdin)")
    verify.add_argument("solution", help="Solution source file")
    add_language(verify)
    verify.add_argument(
        "--exercise", "-e", type=int, default=1, help="Exercise number (1-based)"
    )
    verify.add_argument(
        "--timeout", type=float, default=None, help="Seconds allowed per process"
    )
    verify.add_argument(
        "--workspace", "-w", default=None, help="Directory for ephemeral build projects"
    )
    verify.set_defaults(handler=_cmd_verify)

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )
    config = TutorConfig.from_env()
    return args.handler(args, config)


if __name__ == "__main__":
    sys.exit(main())
