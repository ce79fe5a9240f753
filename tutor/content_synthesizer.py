"""Deterministic lesson synthesis and post-processing.

Used when recovery yields nothing, and to top up recovered lessons that fall
short of the lesson floors (two code examples, one exercise, one test case per
exercise). Everything here is a pure function of its arguments.
"""

from __future__ import annotations

import logging
import re

from .curated_examples import lookup_exercise_template, lookup_topic_content
from .json_recovery import iter_fenced_blocks
from .lesson_types import CodeExample, Exercise, Language, LessonContent, TestCase
from . import constants

logger = logging.getLogger(__name__)

_CONCEPT_HEADING = re.compile(re.escape(constants.CONCEPT_HEADING), re.IGNORECASE)
_STEP_HEADING = re.compile(re.escape(constants.STEP_HEADING), re.IGNORECASE)


def default_concept(language: Language, topic: str) -> str:
    return f"An introduction to {topic} in {language.display_name}."


# ── Test cases ───────────────────────────────────────────────────


def reads_stdin(description: str) -> bool:
    """True when *description* tells the learner to read standard input."""
    lowered = description.lower()
    return any(phrase in lowered for phrase in constants.STDIN_PHRASES)


def _substitute_placeholders(example_output: str, value: str) -> str:
    result = example_output
    for placeholder in constants.OUTPUT_PLACEHOLDERS:
        result = result.replace(placeholder, value)
    return result


def generate_test_cases(description: str, example_output: str) -> list[TestCase]:
    """Three test cases for an exercise that came without any.

    Exercises that read stdin get distinct inputs, with the example output's
    placeholder rewritten to each input; the last case keeps the example
    output as written. Output-only exercises get three identical cases with
    no input, since their output must not depend on how they are invoked.
    """
    if not reads_stdin(description):
        return [
            TestCase(input="", expected_output=example_output)
            for _ in constants.GENERATED_INPUTS
        ]

    *varied, last = constants.GENERATED_INPUTS
    cases = [
        TestCase(input=value, expected_output=_substitute_placeholders(example_output, value))
        for value in varied
    ]
    cases.append(TestCase(input=last, expected_output=example_output))
    return cases


def build_fallback_exercise(language: Language, topic: str) -> Exercise:
    """The single practice exercise of a synthesized lesson."""
    template = lookup_exercise_template(language, topic)
    return Exercise(
        title=f"Practice: {topic}",
        description=template.description,
        hints=list(template.hints),
        example_input="",
        example_output=template.example_output,
        test_cases=generate_test_cases(template.description, template.example_output),
    )


# ── Mining free text ─────────────────────────────────────────────


def extract_concept(raw_text: str) -> str | None:
    """Text after the colon following a "concept" heading, up to the line break."""
    heading = _CONCEPT_HEADING.search(raw_text)
    if heading is None:
        return None
    section = raw_text[heading.start() : heading.start() + constants.CONCEPT_WINDOW]
    colon = section.find(":")
    if colon == -1:
        return None
    extracted = section[colon + 1 :].strip()
    lines = extracted.splitlines()
    concept = lines[0].strip() if lines else extracted
    if constants.CONCEPT_MIN_LENGTH < len(concept) < constants.CONCEPT_MAX_LENGTH:
        return concept
    return None


def extract_steps(raw_text: str) -> list[str]:
    """Up to six "Step N:" lines found shortly after a "step" heading."""
    heading = _STEP_HEADING.search(raw_text)
    if heading is None:
        return []
    section = raw_text[heading.start() : heading.start() + constants.STEP_WINDOW]
    steps: list[str] = []
    for number in range(1, constants.MAX_EXTRACTED_STEPS + 1):
        marker = re.search(rf"step {number}:", section, re.IGNORECASE)
        if marker is None:
            continue
        rest = section[marker.end() :]
        line_end = rest.find("\n")
        if line_end == -1:
            continue
        step = rest[:line_end].strip()
        if step and len(step) < constants.MAX_STEP_LENGTH:
            steps.append(f"Step {number}: {step}")
    return steps


def extract_code_examples(raw_text: str, language: Language, topic: str) -> list[CodeExample]:
    """Up to two fenced code blocks that are not stray JSON."""
    examples: list[CodeExample] = []
    for block in iter_fenced_blocks(raw_text):
        if not block.terminated or block.tag == constants.JSON_FENCE_TAG:
            continue
        code = block.body.strip()
        if not code or code.startswith("{") or len(code) >= constants.MAX_CODE_BLOCK_LENGTH:
            continue
        examples.append(
            CodeExample(
                code=code,
                explanation=f"Example code demonstrating {topic} in {language.display_name}.",
            )
        )
        if len(examples) >= constants.MIN_CODE_EXAMPLES:
            break
    return examples


# ── Synthesis ────────────────────────────────────────────────────


def _default_steps(topic: str) -> list[str]:
    return [
        f"Step 1: Understand the concept of {topic}.",
        "Step 2: Review examples and syntax.",
        "Step 3: Practice with exercises.",
    ]


def _complete_examples(
    examples: list[CodeExample], language: Language, topic: str
) -> list[CodeExample]:
    name = language.display_name
    if len(examples) == 1:
        return examples + [
            CodeExample(
                code=f"// Variation of the example above\n{examples[0].code}",
                explanation=f"Another example demonstrating {topic} in {name}.",
            )
        ]
    if not examples:
        return [
            CodeExample(
                code=f"// Basic example for {topic} in {name}",
                explanation=f"Example code demonstrating {topic} in {name}.",
            ),
            CodeExample(
                code=f"// Another example for {topic} in {name}",
                explanation=f"Another example showing {topic} in {name}.",
            ),
        ]
    return examples


def synthesize(raw_text: str, language: Language, topic: str) -> LessonContent:
    """Build a complete lesson from whatever *raw_text* offers, plus defaults."""
    concept = extract_concept(raw_text) or default_concept(language, topic)
    steps = extract_steps(raw_text) or _default_steps(topic)

    examples = extract_code_examples(raw_text, language, topic)
    curated = lookup_topic_content(language, topic)
    if not examples and curated is not None:
        examples = list(curated.examples)
    examples = _complete_examples(examples, language, topic)

    if curated is not None:
        syntax_guide = curated.syntax_guide
    else:
        syntax_guide = (
            f"Basic syntax for {topic} in {language.display_name}; refer to the "
            "code examples above for specific syntax patterns."
        )

    logger.info(
        "Synthesized lesson for '%s' (%s): %d step(s), %d example(s)",
        topic,
        language.value,
        len(steps),
        len(examples),
    )
    return LessonContent(
        concept=concept,
        steps=steps,
        examples=examples,
        syntax_guide=syntax_guide,
        patterns=[],
        exercises=[build_fallback_exercise(language, topic)],
    )


# ── Post-processing of recovered lessons ─────────────────────────


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def backfill_examples(exercise: Exercise) -> None:
    """Fill a blank example output/input from the first test case, in place."""
    if not exercise.test_cases:
        return
    first = exercise.test_cases[0]
    if _is_blank(exercise.example_output):
        exercise.example_output = first.expected_output
    if _is_blank(exercise.example_input):
        exercise.example_input = first.input


def ensure_lesson_floors(content: LessonContent, language: Language, topic: str) -> LessonContent:
    """Return a copy of *content* that satisfies every lesson floor.

    Exercises and examples are only ever added, never removed.
    """
    lesson = content.model_copy(deep=True)
    name = language.display_name

    if not lesson.concept.strip():
        lesson.concept = default_concept(language, topic)

    if len(lesson.examples) < constants.MIN_CODE_EXAMPLES:
        logger.warning(
            "Only %d code example(s) found; ensuring at least %d",
            len(lesson.examples),
            constants.MIN_CODE_EXAMPLES,
        )
        curated = lookup_topic_content(language, topic)
        if not lesson.examples and curated is not None:
            lesson.examples = list(curated.examples)
        while len(lesson.examples) < constants.MIN_CODE_EXAMPLES:
            number = len(lesson.examples) + 1
            lesson.examples.append(
                CodeExample(
                    code=f"// Example {number} for {topic} in {name}\n// Add your code here",
                    explanation=f"Example {number} demonstrating {topic} in {name}.",
                )
            )

    if len(lesson.exercises) < constants.MIN_EXERCISES:
        logger.warning("No exercises generated; adding a fallback exercise")
        lesson.exercises.append(build_fallback_exercise(language, topic))

    for exercise in lesson.exercises:
        if not exercise.test_cases:
            logger.warning(
                "Exercise '%s' has no test cases; generating them", exercise.title
            )
            exercise.test_cases = generate_test_cases(
                exercise.description, exercise.example_output or ""
            )
        backfill_examples(exercise)

    return lesson
