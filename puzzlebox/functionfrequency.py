"""Find the most frequently called functions in Go source code.

Calls are recognised with a small state machine rather than a parser: only
indented lines are inspected, and string contents are skipped.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Mapping
from enum import IntEnum


class _Event(IntEnum):
    LETTER = 0
    UNDERSCORE = 1
    NUMBER = 2
    DOUBLE_QUOTE = 3
    APOSTROPHE = 4
    BACKSLASH = 5
    NEW_LINE = 6
    SPACE = 7
    OPEN_PAREN = 8
    POINT = 9
    OTHER = 10


class _State(IntEnum):
    START_LINE = 0
    SKIP_LINE = 1
    CONTINUE = 2
    SKIP_WORD = 3
    IGNORE_NEXT = 4
    IN_STRING = 5
    STRING_ESCAPE = 6
    START_FUNC = 7
    MIDDLE_FUNC = 8
    MIDDLE_POINT_FUNC = 9
    END_FUNC = 10


_S = _State

# Rows are states, columns events in the order of _Event.
_TRANSITIONS: tuple[tuple[_State, ...], ...] = (
    # START_LINE
    (_S.SKIP_LINE, _S.SKIP_LINE, _S.SKIP_LINE, _S.SKIP_LINE, _S.SKIP_LINE, _S.SKIP_LINE,
     _S.START_LINE, _S.CONTINUE, _S.SKIP_LINE, _S.SKIP_LINE, _S.SKIP_LINE),
    # SKIP_LINE
    (_S.SKIP_LINE, _S.SKIP_LINE, _S.SKIP_LINE, _S.SKIP_LINE, _S.SKIP_LINE, _S.SKIP_LINE,
     _S.START_LINE, _S.SKIP_LINE, _S.SKIP_LINE, _S.SKIP_LINE, _S.SKIP_LINE),
    # CONTINUE
    (_S.START_FUNC, _S.START_FUNC, _S.SKIP_WORD, _S.IN_STRING, _S.IGNORE_NEXT, _S.IGNORE_NEXT,
     _S.START_LINE, _S.CONTINUE, _S.CONTINUE, _S.SKIP_WORD, _S.SKIP_WORD),
    # SKIP_WORD
    (_S.SKIP_WORD, _S.SKIP_WORD, _S.SKIP_WORD, _S.IN_STRING, _S.IGNORE_NEXT, _S.IGNORE_NEXT,
     _S.START_LINE, _S.CONTINUE, _S.CONTINUE, _S.SKIP_WORD, _S.SKIP_WORD),
    # IGNORE_NEXT
    (_S.CONTINUE, _S.CONTINUE, _S.CONTINUE, _S.CONTINUE, _S.CONTINUE, _S.IGNORE_NEXT,
     _S.CONTINUE, _S.CONTINUE, _S.CONTINUE, _S.CONTINUE, _S.CONTINUE),
    # IN_STRING
    (_S.IN_STRING, _S.IN_STRING, _S.IN_STRING, _S.CONTINUE, _S.IN_STRING, _S.STRING_ESCAPE,
     _S.IN_STRING, _S.IN_STRING, _S.IN_STRING, _S.IN_STRING, _S.IN_STRING),
    # STRING_ESCAPE
    (_S.IN_STRING, _S.IN_STRING, _S.IN_STRING, _S.IN_STRING, _S.IN_STRING, _S.IN_STRING,
     _S.IN_STRING, _S.IN_STRING, _S.IN_STRING, _S.IN_STRING, _S.IN_STRING),
    # START_FUNC
    (_S.MIDDLE_FUNC, _S.MIDDLE_FUNC, _S.MIDDLE_FUNC, _S.IN_STRING, _S.IGNORE_NEXT, _S.IGNORE_NEXT,
     _S.START_LINE, _S.CONTINUE, _S.END_FUNC, _S.MIDDLE_FUNC, _S.MIDDLE_FUNC),
    # MIDDLE_FUNC
    (_S.MIDDLE_FUNC, _S.MIDDLE_FUNC, _S.MIDDLE_FUNC, _S.IN_STRING, _S.IGNORE_NEXT, _S.IGNORE_NEXT,
     _S.START_LINE, _S.CONTINUE, _S.END_FUNC, _S.MIDDLE_POINT_FUNC, _S.MIDDLE_FUNC),
    # MIDDLE_POINT_FUNC
    (_S.MIDDLE_FUNC, _S.MIDDLE_FUNC, _S.MIDDLE_FUNC, _S.IN_STRING, _S.IGNORE_NEXT, _S.IGNORE_NEXT,
     _S.START_LINE, _S.CONTINUE, _S.SKIP_WORD, _S.CONTINUE, _S.MIDDLE_FUNC),
    # END_FUNC
    (_S.START_FUNC, _S.START_FUNC, _S.SKIP_WORD, _S.IN_STRING, _S.IGNORE_NEXT, _S.IGNORE_NEXT,
     _S.START_LINE, _S.CONTINUE, _S.CONTINUE, _S.SKIP_WORD, _S.CONTINUE),
)

_SINGLE_EVENTS = {
    ord("_"): _Event.LETTER,
    ord('"'): _Event.DOUBLE_QUOTE,
    ord("'"): _Event.APOSTROPHE,
    ord("\\"): _Event.BACKSLASH,
    ord("\n"): _Event.NEW_LINE,
    ord("\t"): _Event.SPACE,
    ord(" "): _Event.SPACE,
    ord("("): _Event.OPEN_PAREN,
    ord("."): _Event.POINT,
}


def _event(byte: int) -> _Event:
    if ord("a") <= byte <= ord("z") or ord("A") <= byte <= ord("Z"):
        return _Event.LETTER
    if ord("0") <= byte <= ord("9"):
        return _Event.NUMBER
    return _SINGLE_EVENTS.get(byte, _Event.OTHER)


def read_functions(code: bytes | str) -> Counter[str]:
    """Count every function call found in ``code``."""
    data = code.encode("utf-8") if isinstance(code, str) else bytes(code)
    functions: Counter[str] = Counter()
    state = _State.START_LINE
    start = -1
    for position, byte in enumerate(data):
        state = _TRANSITIONS[state][_event(byte)]
        if state is _State.START_FUNC:
            start = position
        elif state is _State.END_FUNC:
            if start != -1:
                name = data[start:position].decode("utf-8", "replace")
                if name != "func":
                    functions[name] += 1
                start = -1
        elif state not in (_State.MIDDLE_FUNC, _State.MIDDLE_POINT_FUNC):
            start = -1
    return functions


def top_strings(counted: Mapping[str, int], top: int) -> list[str]:
    """Return the ``top`` keys with the highest counts, highest first.

    Raises :class:`ValueError` when there are fewer than ``top`` keys.
    """
    if len(counted) < top:
        raise ValueError(f"only {len(counted)} entries, {top} requested")
    return sorted(counted, key=counted.__getitem__, reverse=True)[:top]


def function_frequency(code: bytes | str) -> list[str]:
    """Return the three most frequently called functions in ``code``."""
    return top_strings(read_functions(code), 3)