"""Named constants: wire field names, recovery heuristics and defaults."""

from __future__ import annotations

# ── Lesson wire format ───────────────────────────────────────────

FIELD_CONCEPT = "concept"
FIELD_STEPS = "step_by_step"
FIELD_EXAMPLES = "code_examples"
FIELD_SYNTAX_GUIDE = "syntax_guide"
FIELD_PATTERNS = "common_patterns"
FIELD_EXERCISES = "exercises"

# Fields injected (in this order) when a truncated object is closed.
REPAIR_INJECTED_FIELDS: tuple[tuple[str, str], ...] = (
    (FIELD_SYNTAX_GUIDE, '""'),
    (FIELD_PATTERNS, "[]"),
    (FIELD_EXERCISES, "[]"),
)

JSON_FENCE_TAG = "json"
GENERIC_FENCE = "```"

MIN_CODE_EXAMPLES = 2
MIN_EXERCISES = 1

# ── Synthesis heuristics ─────────────────────────────────────────

CONCEPT_HEADING = "concept"
CONCEPT_WINDOW = 300
CONCEPT_MIN_LENGTH = 20
CONCEPT_MAX_LENGTH = 500

STEP_HEADING = "step"
STEP_WINDOW = 500
MAX_EXTRACTED_STEPS = 6
MAX_STEP_LENGTH = 200

MAX_CODE_BLOCK_LENGTH = 500

# ── Test-case generation ─────────────────────────────────────────

STDIN_PHRASES: tuple[str, ...] = ("read input", "read from stdin", "input from")
GENERATED_INPUTS: tuple[str, ...] = ("5", "10", "42")
OUTPUT_PLACEHOLDERS: tuple[str, ...] = ("42", "test")

# ── Model transport ──────────────────────────────────────────────

DEFAULT_PROVIDER = "ollama"
DEFAULT_OLLAMA_URL = "http://localhost:11434"
DEFAULT_OLLAMA_MODEL = "qwen2.5-coder:7b"
LESSON_MAX_TOKENS = 7000

# ── Execution ────────────────────────────────────────────────────

CARGO_PROJECT_PREFIX = "cargo_exercise_"
CARGO_PACKAGE_NAME = "exercise"
EXERCISE_FILE_PREFIX = "exercise_"
DEFAULT_WORKSPACE_DIRNAME = "cursed-coddy"
