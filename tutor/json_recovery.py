"""Recovery of a lesson object from free-text model output.

Strategies run in a fixed order against the full response text and the first
one that yields a parseable lesson wins:

1. a ```` ```json ```` fenced block,
2. an untagged ```` ``` ```` fenced block,
3. the first ``{`` in the text, scanned to its balancing ``}`` (or to the end
   of the text when the response was truncated).

Each candidate span is parsed directly and, failing that, structurally
repaired: truncated strings are cut back to the last clean boundary, open
arrays and objects are closed, and the top-level fields a lesson needs are
injected when absent.
"""

from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterator

from pydantic import ValidationError

from .json_scanner import JSONStructureScanner, OBJECT_OPEN, ScanResult, closers_for
from .lesson_types import LessonContent
from . import constants

logger = logging.getLogger(__name__)

MAX_REPAIR_ATTEMPTS = 64

_TRAILING_COMMA = re.compile(r",\s*([}\]])")
_CONCEPT_VALUE = re.compile(r'"concept"\s*:\s*"((?:[^"\\]|\\.)*)"')


class RecoveryStatus(Enum):
    PARSED = "parsed"
    REPAIRED = "repaired"
    FAILED = "failed"


@dataclass(frozen=True)
class RecoveryResult:
    """Outcome of ``recover``: a parsed or repaired lesson, or the raw text."""

    status: RecoveryStatus
    raw_text: str
    content: LessonContent | None = None

    @classmethod
    def parsed(cls, content: LessonContent, raw_text: str) -> RecoveryResult:
        return cls(status=RecoveryStatus.PARSED, raw_text=raw_text, content=content)

    @classmethod
    def repaired(cls, content: LessonContent, raw_text: str) -> RecoveryResult:
        return cls(status=RecoveryStatus.REPAIRED, raw_text=raw_text, content=content)

    @classmethod
    def failed(cls, raw_text: str) -> RecoveryResult:
        return cls(status=RecoveryStatus.FAILED, raw_text=raw_text)

    @property
    def succeeded(self) -> bool:
        return self.status is not RecoveryStatus.FAILED


# ── Fenced blocks ────────────────────────────────────────────────


@dataclass(frozen=True)
class FencedBlock:
    """A markdown code fence; ``terminated`` is False when the text ran out."""

    tag: str
    body: str
    terminated: bool


def iter_fenced_blocks(text: str) -> Iterator[FencedBlock]:
    """Yield the markdown fenced blocks of *text* in order of appearance."""
    fence = constants.GENERIC_FENCE
    pos = text.find(fence)
    while pos != -1:
        tag_start = pos + len(fence)
        line_end = text.find("\n", tag_start)
        if line_end == -1:
            tag, body_start = text[tag_start:].strip(), len(text)
        else:
            tag, body_start = text[tag_start:line_end].strip(), line_end + 1
        close = text.find(fence, body_start)
        if close == -1:
            yield FencedBlock(tag=tag.lower(), body=text[body_start:], terminated=False)
            return
        yield FencedBlock(tag=tag.lower(), body=text[body_start:close], terminated=True)
        pos = text.find(fence, close + len(fence))


def _first_block_with_tag(text: str, tag: str) -> str | None:
    for block in iter_fenced_blocks(text):
        if block.tag == tag:
            return block.body.strip()
    return None


# ── Parsing ──────────────────────────────────────────────────────


def _describe_parse_error(exc: Exception, span: str) -> str:
    """Human-readable reason for a failed parse, for the recovery log."""
    if isinstance(exc, ValidationError):
        return f"Type mismatch - {exc.error_count()} field error(s)"
    if isinstance(exc, json.JSONDecodeError):
        if exc.pos >= len(span.rstrip()) - 1:
            return "JSON was truncated (incomplete response)"
        return f"Invalid JSON syntax - {exc.msg} at offset {exc.pos}"
    return str(exc)


def parse_lesson(span: str) -> LessonContent | None:
    """Parse *span* as a lesson object; None if it is not one."""
    try:
        data = json.loads(span)
    except json.JSONDecodeError as exc:
        logger.debug("Direct parse failed: %s", _describe_parse_error(exc, span))
        return None
    if not isinstance(data, dict):
        logger.debug("Direct parse produced %s, not an object", type(data).__name__)
        return None
    try:
        return LessonContent.from_wire(data)
    except ValidationError as exc:
        logger.debug("Schema validation failed: %s", _describe_parse_error(exc, span))
        return None


# ── Structural repair ────────────────────────────────────────────


def _close_prefix(prefix: str, stack: tuple[str, ...]) -> str:
    """Close every open container of *prefix*, injecting lesson fields at the root."""
    text = prefix.rstrip().rstrip(",").rstrip()
    text += closers_for(stack[1:])
    missing = [
        (name, default)
        for name, default in constants.REPAIR_INJECTED_FIELDS
        if f'"{name}"' not in text
    ]
    if missing:
        separator = "" if text.endswith(OBJECT_OPEN) else ", "
        text += separator + ", ".join(
            f'"{name}": {default}' for name, default in missing
        )
    return text + "}"


def _strip_trailing_commas(text: str) -> str:
    return _TRAILING_COMMA.sub(r"\1", text)


def repair_candidates(span: str) -> Iterator[str]:
    """Yield repaired versions of *span*, most faithful first.

    A balanced object that failed to parse only gets its trailing commas
    removed. A truncated one is cut at the end of the text (when the scan did
    not stop inside a string) and then at each earlier clean boundary, newest
    first; the last completed quote or comma-delimited field comes first.
    """
    scan: ScanResult = JSONStructureScanner().scan(span)
    if not scan.found:
        return

    if scan.closed:
        cleaned = _strip_trailing_commas(span[scan.start : scan.end])
        if cleaned != span[scan.start : scan.end]:
            yield cleaned
        return

    logger.debug(
        "Truncated object: %d open object(s), %d open array(s), in_string=%s",
        scan.unclosed_objects(),
        scan.unclosed_arrays(),
        scan.ended_in_string,
    )

    if not scan.ended_in_string:
        yield _close_prefix(
            _strip_trailing_commas(span[scan.start :]), tuple(scan.stack)
        )

    for boundary in reversed(scan.boundaries[-MAX_REPAIR_ATTEMPTS:]):
        yield _close_prefix(span[scan.start : boundary.position], boundary.stack)


def minimal_reconstruction(span: str) -> str | None:
    """Rebuild a lesson holding only a completed ``concept`` value."""
    match = _CONCEPT_VALUE.search(span)
    if match is None:
        return None
    try:
        concept = json.loads(f'"{match.group(1)}"')
    except json.JSONDecodeError:
        return None
    return json.dumps(
        {
            constants.FIELD_CONCEPT: concept,
            constants.FIELD_STEPS: [],
            constants.FIELD_EXAMPLES: [],
            constants.FIELD_SYNTAX_GUIDE: "",
            constants.FIELD_PATTERNS: [],
            constants.FIELD_EXERCISES: [],
        }
    )


def repair_lesson(span: str) -> LessonContent | None:
    """Structurally repair *span* into a lesson; None if nothing works."""
    for candidate in repair_candidates(span):
        content = parse_lesson(candidate)
        if content is not None:
            logger.debug("Repaired JSON to %d chars", len(candidate))
            return content

    minimal = minimal_reconstruction(span)
    if minimal is not None:
        content = parse_lesson(minimal)
        if content is not None:
            logger.warning("Recovered only the concept from truncated JSON")
            return content
    return None


# ── Entry point ──────────────────────────────────────────────────


def _attempt(span: str | None, raw_text: str, strategy: str) -> RecoveryResult | None:
    if not span:
        return None
    content = parse_lesson(span)
    if content is not None:
        logger.info("Parsed lesson JSON (%s)", strategy)
        return RecoveryResult.parsed(content, raw_text)
    content = repair_lesson(span)
    if content is not None:
        logger.warning("Lesson JSON was malformed; repaired (%s)", strategy)
        return RecoveryResult.repaired(content, raw_text)
    return None


def _first_object_span(text: str) -> str | None:
    scan = JSONStructureScanner().scan(text)
    if not scan.found:
        return None
    if scan.closed:
        return text[scan.start : scan.end].strip()
    return text[scan.start :].strip()


def recover(raw_text: str) -> RecoveryResult:
    """Obtain a lesson from *raw_text*, or ``FAILED`` carrying the raw text."""
    strategies = (
        ("json fence", lambda: _first_block_with_tag(raw_text, constants.JSON_FENCE_TAG)),
        ("plain fence", lambda: _first_block_with_tag(raw_text, "")),
        ("first object", lambda: _first_object_span(raw_text)),
    )
    for name, locate in strategies:
        span = locate()
        result = _attempt(span, raw_text, name)
        if result is not None:
            return result
        if span:
            logger.warning("JSON extraction failed (%s), trying alternative methods", name)
        else:
            logger.debug("Strategy '%s' found no candidate", name)

    logger.warning("Could not extract lesson JSON from %d chars of text", len(raw_text))
    return RecoveryResult.failed(raw_text)
