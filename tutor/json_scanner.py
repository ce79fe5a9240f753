"""Character-level JSON structure scanner used by the recovery engine.

The scanner is a small explicit state machine (``DEFAULT`` / ``IN_STRING`` /
``ESCAPED``) that walks a candidate span once and records:

* the stack of unmatched ``{`` / ``[`` openers at the end of the span,
* where the outermost object closes, if it does,
* every *boundary*: an offset where the text so far is a valid JSON prefix
  that can be cut and closed, together with the opener stack at that point.

It knows nothing about the lesson schema; ``json_recovery`` decides what to do
with the result.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

OBJECT_OPEN = "{"
OBJECT_CLOSE = "}"
ARRAY_OPEN = "["
ARRAY_CLOSE = "]"
QUOTE = '"'
BACKSLASH = "\\"

_CLOSER_FOR: dict[str, str] = {OBJECT_OPEN: OBJECT_CLOSE, ARRAY_OPEN: ARRAY_CLOSE}


class ScanState(Enum):
    DEFAULT = "default"
    IN_STRING = "in_string"
    ESCAPED = "escaped"


@dataclass(frozen=True)
class Boundary:
    """A cut point: ``text[start:position]`` closes cleanly with ``stack``."""

    position: int
    stack: tuple[str, ...]


@dataclass
class ScanResult:
    start: int
    end: int | None = None
    state: ScanState = ScanState.DEFAULT
    stack: list[str] = field(default_factory=list)
    boundaries: list[Boundary] = field(default_factory=list)

    @property
    def found(self) -> bool:
        return self.start >= 0

    @property
    def closed(self) -> bool:
        """True when the outermost object was balanced inside the text."""
        return self.end is not None

    @property
    def ended_in_string(self) -> bool:
        return self.state is not ScanState.DEFAULT

    def unclosed_arrays(self) -> int:
        return self.stack.count(ARRAY_OPEN)

    def unclosed_objects(self) -> int:
        return self.stack.count(OBJECT_OPEN)


def closers_for(stack: tuple[str, ...] | list[str]) -> str:
    """Closing characters for *stack*, most recently opened first."""
    return "".join(_CLOSER_FOR[opener] for opener in reversed(stack))


class _Frame:
    """One open container; objects alternate between key and value position."""

    __slots__ = ("opener", "expect_key")

    def __init__(self, opener: str):
        self.opener = opener
        self.expect_key = opener == OBJECT_OPEN


class JSONStructureScanner:
    """Scans from the first ``{`` in a text, tracking depth and string state."""

    def scan(self, text: str, stop_at_close: bool = True) -> ScanResult:
        """Scan *text* starting at its first ``{``.

        Args:
            text: Arbitrary text that may contain a JSON object.
            stop_at_close: Stop as soon as the outermost object closes.

        Returns:
            A ScanResult; ``start`` is -1 when the text has no ``{``.
        """
        start = text.find(OBJECT_OPEN)
        result = ScanResult(start=start)
        if start < 0:
            return result

        frames: list[_Frame] = []
        state = ScanState.DEFAULT

        def _stack() -> tuple[str, ...]:
            return tuple(f.opener for f in frames)

        def _mark(position: int) -> None:
            result.boundaries.append(Boundary(position=position, stack=_stack()))

        for i in range(start, len(text)):
            ch = text[i]

            if state is ScanState.ESCAPED:
                state = ScanState.IN_STRING
                continue

            if state is ScanState.IN_STRING:
                if ch == BACKSLASH:
                    state = ScanState.ESCAPED
                elif ch == QUOTE:
                    state = ScanState.DEFAULT
                    top = frames[-1] if frames else None
                    # A closed key is not a cut point; a closed value is.
                    if top is None or not (
                        top.opener == OBJECT_OPEN and top.expect_key
                    ):
                        _mark(i + 1)
                continue

            # DEFAULT state
            if ch == QUOTE:
                state = ScanState.IN_STRING
            elif ch in (OBJECT_OPEN, ARRAY_OPEN):
                frames.append(_Frame(ch))
                _mark(i + 1)
            elif ch in (OBJECT_CLOSE, ARRAY_CLOSE):
                if not frames or _CLOSER_FOR[frames[-1].opener] != ch:
                    continue
                frames.pop()
                _mark(i + 1)
                if not frames:
                    result.end = i + 1
                    if stop_at_close:
                        break
            elif ch == ":":
                if frames and frames[-1].opener == OBJECT_OPEN:
                    frames[-1].expect_key = False
            elif ch == ",":
                _mark(i)
                if frames and frames[-1].opener == OBJECT_OPEN:
                    frames[-1].expect_key = True

        result.state = state
        result.stack = [f.opener for f in frames]
        return result
