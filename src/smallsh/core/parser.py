"""Turn expanded words into a command request."""

from __future__ import annotations

import os

from loguru import logger

from smallsh.core.types import CommandRequest, Redirection, RedirectKind
from smallsh.errors import ParseError

BACKGROUND_WORD = "&"
REDIRECT_OPERATORS = {kind.value: kind for kind in RedirectKind}
DEFAULT_CREATE_MODE = 0o777


def parse_command(
    words: list[str],
    *,
    create_mode: int = DEFAULT_CREATE_MODE,
    truncate_on_parse: bool = True,
) -> CommandRequest:
    """Split words into argv, redirections and the background flag.

    Only a trailing ``&`` requests background execution; anywhere else it is
    an ordinary argument. With ``truncate_on_parse`` every ``>`` target is
    created or truncated here, before anything runs, even when a later
    redirection supersedes it.

    Raises:
        ParseError: if an operator has no path after it, or a ``>`` target
            cannot be opened.
    """

    background = bool(words) and words[-1] == BACKGROUND_WORD
    if background:
        words = words[:-1]

    argv: list[str] = []
    redirections: list[Redirection] = []
    index = 0
    while index < len(words):
        word = words[index]
        kind = REDIRECT_OPERATORS.get(word)
        if kind is None:
            argv.append(word)
            index += 1
            continue

        if index + 1 >= len(words):
            raise ParseError(f"missing file name after '{word}'")
        path = words[index + 1]
        redirections.append(Redirection(kind=kind, path=path))
        logger.debug("parse.redirect kind={} path={}", kind.name, path)
        if kind is RedirectKind.WRITE and truncate_on_parse:
            _truncate(path, create_mode)
        index += 2

    return CommandRequest(argv=argv, redirections=redirections, background=background)


def _truncate(path: str, create_mode: int) -> None:
    try:
        fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, create_mode)
    except (OSError, ValueError) as exc:
        reason = exc.strerror if isinstance(exc, OSError) else str(exc)
        raise ParseError(f"{path}: {reason}") from exc
    os.close(fd)
