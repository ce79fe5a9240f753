"""Prompt templates for lesson generation."""

from __future__ import annotations

from .lesson_types import Difficulty, Language, LessonType


class LessonPrompts:
    """Prompt templates for generating one lesson as a JSON object."""

    SYSTEM_PROMPT = """\
You are a coding education assistant in the style of Codecademy. You write \
short, practical lessons that teach HOW to write code and WHY it is written \
that way, comparing with other languages where it helps.

## Lesson sections

1. **Concept**: 5-7 sentences on what the concept is, why it exists, how it \
differs from other languages and when you would use it.
2. **Step by step**: 4-6 steps, each prefixed "Step N:", explaining what \
happens and why.
3. **Code examples**: AT LEAST 2 examples (2-3 total), each with a line-by-line \
explanation.
4. **Syntax guide**: the exact syntax rules, what each part means and what \
happens if a part is omitted.
5. **Common patterns**: 2-3 common use cases and when to prefer each.
6. **Exercises**: the requested number of exercises.

## Exercise rules

- Instructions say WHAT to do and HOW to do it.
- Beginner exercises use hardcoded values. Only require reading input when the \
topic teaches input/output.
- If the program must read input, say "Your program should read input from \
stdin" in the description and show how to read input in this language.
- Exercises must compile and run successfully. Never make a compiler error the \
expected output.
- Always include "example_input" (empty string when no input is needed) and \
"example_output".
- Every exercise has 2-3 test cases that check exactly what the description \
asks for. Test cases without input must all expect the same output.

## Output format

Output ONLY this JSON object. No markdown fences, no text before or after it, \
no trailing commas, every string properly escaped:

{
  "concept": "...",
  "step_by_step": ["Step 1: ...", "Step 2: ...", "Step 3: ..."],
  "code_examples": [
    {"code": "...", "explanation": "..."},
    {"code": "...", "explanation": "..."}
  ],
  "syntax_guide": "...",
  "common_patterns": ["Pattern 1: ...", "Pattern 2: ..."],
  "exercises": [
    {
      "title": "...",
      "description": "...",
      "hints": ["...", "..."],
      "example_input": "",
      "example_output": "...",
      "test_cases": [
        {"input": "", "output": "..."},
        {"input": "", "output": "..."}
      ]
    }
  ]
}
"""

    USER_PROMPT_TEMPLATE = (
        "LANGUAGE: {language}\n"
        "DIFFICULTY: {difficulty}\n"
        "LESSON TYPE: {lesson_type}\n"
        "TOPIC: {topic}\n\n"
        "Focus on {concept_count} core concept(s) and match the complexity to "
        "the {difficulty} level.\n"
        "The \"exercises\" array MUST contain at least {exercise_count} "
        "exercise(s), each with 2-3 test cases.\n"
        "{language_notes}"
        "Generate the lesson now. Output ONLY the JSON object."
    )

    LANGUAGE_NOTES: dict[Language, str] = {
        Language.RUST: (
            "For ownership, borrowing or immutability, explain why Rust made "
            "that choice and show the compiler error you get when you break "
            "the rule.\n"
        ),
        Language.CPP: (
            "For build topics, show the g++ command line and what each flag "
            "does.\n"
        ),
        Language.JAVASCRIPT: (
            "For build topics, explain that Node.js runs scripts directly "
            "without compilation.\n"
        ),
    }

    @classmethod
    def build_user_message(
        cls,
        language: Language,
        difficulty: Difficulty,
        lesson_type: LessonType,
        topic: str,
    ) -> str:
        return cls.USER_PROMPT_TEMPLATE.format(
            language=language.display_name,
            difficulty=difficulty.display_name,
            lesson_type=lesson_type.display_name,
            topic=topic,
            concept_count=lesson_type.concept_count,
            exercise_count=lesson_type.exercise_count,
            language_notes=cls.LANGUAGE_NOTES.get(language, ""),
        )
