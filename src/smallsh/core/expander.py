"""Parameter expansion for single words."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from smallsh.core.types import ShellState

PARAM_CHAR = "$"
SPECIAL_PARAMS = frozenset("$!?")
BRACE_OPEN = "{"
BRACE_CLOSE = "}"


@dataclass(frozen=True)
class ParameterMatch:
    """A parameter reference found in a word, spanning ``word[start:end]``."""

    kind: str  # one of "$", "!", "?", "{"
    start: int
    end: int
    name: str = ""


def scan_parameter(word: str, pos: int = 0) -> ParameterMatch | None:
    """Find the first parameter reference in ``word`` at or after ``pos``."""

    while True:
        start = word.find(PARAM_CHAR, pos)
        if start < 0 or start + 1 >= len(word):
            return None
        marker = word[start + 1]
        if marker in SPECIAL_PARAMS:
            return ParameterMatch(kind=marker, start=start, end=start + 2)
        if marker == BRACE_OPEN:
            close = word.find(BRACE_CLOSE, start + 2)
            if close >= 0:
                return ParameterMatch(kind=BRACE_OPEN, start=start, end=close + 1, name=word[start + 2 : close])
        pos = start + 1


def parameter_value(
    match: ParameterMatch,
    state: ShellState,
    *,
    pid: int | None = None,
    environ: Mapping[str, str] | None = None,
) -> str:
    """Return the substitution text for one parameter reference."""

    if match.kind == "$":
        return str(os.getpid() if pid is None else pid)
    if match.kind == "!":
        return "" if state.last_background_pid is None else str(state.last_background_pid)
    if match.kind == "?":
        return str(state.last_status)
    env = os.environ if environ is None else environ
    return env.get(match.name, "") if match.name else ""


def expand_word(
    word: str,
    state: ShellState,
    *,
    pid: int | None = None,
    environ: Mapping[str, str] | None = None,
) -> str:
    """Return ``word`` with every parameter reference substituted."""

    pieces: list[str] = []
    pos = 0
    while (match := scan_parameter(word, pos)) is not None:
        pieces.append(word[pos : match.start])
        pieces.append(parameter_value(match, state, pid=pid, environ=environ))
        pos = match.end
    pieces.append(word[pos:])
    return "".join(pieces)


def expand_words(
    words: list[str],
    state: ShellState,
    *,
    pid: int | None = None,
    environ: Mapping[str, str] | None = None,
) -> list[str]:
    """Expand each word independently, preserving order."""

    return [expand_word(word, state, pid=pid, environ=environ) for word in words]
