"""Commands executed inside the interpreter process."""

from __future__ import annotations

import os
import re
from collections.abc import Callable

from loguru import logger

from smallsh.core.types import ShellState, TurnOutcome
from smallsh.errors import BuiltinError

EXIT_CODE_RE = re.compile(r"[+-]?[0-9]+")
EXIT_CODE_MASK = 0xFF

Builtin = Callable[[list[str], ShellState], TurnOutcome]


def builtin_exit(args: list[str], state: ShellState) -> TurnOutcome:
    """exit [code]: leave the shell with ``code`` or the last foreground status."""
    if len(args) > 1:
        raise BuiltinError("exit", "too many arguments")
    if not args:
        return TurnOutcome.exit(state.last_status)
    if EXIT_CODE_RE.fullmatch(args[0]) is None:
        raise BuiltinError("exit", f"{args[0]}: invalid argument")
    return TurnOutcome.exit(int(args[0]) & EXIT_CODE_MASK)


def builtin_cd(args: list[str], state: ShellState) -> TurnOutcome:
    """cd [path]: change the working directory, defaulting to ``$HOME``."""
    if len(args) > 1:
        raise BuiltinError("cd", "too many arguments")
    if args:
        target = args[0]
        if not os.path.exists(target):
            raise BuiltinError("cd", f"{target}: no such file or directory")
    else:
        target = os.environ.get("HOME", "")
        if not target:
            raise BuiltinError("cd", "HOME not set")

    try:
        os.chdir(target)
    except OSError as exc:
        raise BuiltinError("cd", f"{target}: {exc.strerror}") from exc
    logger.debug("builtin.cd cwd={}", target)
    return TurnOutcome.proceed()


BUILTINS: dict[str, Builtin] = {
    "exit": builtin_exit,
    "cd": builtin_cd,
}


def get_builtin(name: str) -> Builtin | None:
    return BUILTINS.get(name)
