"""Command execution: builtins in-process, everything else in a child."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass

from loguru import logger

from smallsh.core.builtins import get_builtin
from smallsh.core.jobs import JobTracker
from smallsh.core.parser import DEFAULT_CREATE_MODE
from smallsh.core.signals import SignalPolicy
from smallsh.core.types import CommandRequest, JobEvent, Redirection, RedirectKind, TurnOutcome
from smallsh.errors import SpawnError

EXIT_REDIRECT_FAILED = 1
EXIT_NOT_EXECUTABLE = 126
EXIT_NOT_FOUND = 127

_OPEN_FLAGS = {
    RedirectKind.READ: os.O_RDONLY,
    RedirectKind.WRITE: os.O_WRONLY | os.O_CREAT | os.O_TRUNC,
    RedirectKind.APPEND: os.O_WRONLY | os.O_CREAT | os.O_APPEND,
}


@dataclass(frozen=True)
class ExecutionResult:
    """Outcome of one command plus the foreground wait result, if any."""

    outcome: TurnOutcome
    event: JobEvent | None = None
    pid: int | None = None


class Executor:
    """Runs command requests against the shared job tracker."""

    def __init__(
        self,
        tracker: JobTracker,
        signals: SignalPolicy,
        *,
        create_mode: int = DEFAULT_CREATE_MODE,
    ) -> None:
        self.tracker = tracker
        self.signals = signals
        self.create_mode = create_mode

    def execute(self, request: CommandRequest) -> ExecutionResult:
        if request.empty:
            return ExecutionResult(outcome=TurnOutcome.proceed())

        builtin = get_builtin(request.name)
        if builtin is not None:
            return ExecutionResult(outcome=builtin(request.argv[1:], self.tracker.state))

        pid = self._spawn(request)
        if request.background:
            self.tracker.track_background(pid)
            return ExecutionResult(outcome=TurnOutcome.proceed(), pid=pid)

        event = self.tracker.wait_foreground(pid)
        return ExecutionResult(outcome=TurnOutcome.proceed(), event=event, pid=pid)

    def _spawn(self, request: CommandRequest) -> int:
        sys.stdout.flush()
        sys.stderr.flush()
        try:
            pid = os.fork()
        except OSError as exc:
            raise SpawnError(f"fork: {exc.strerror}") from exc

        if pid == 0:
            self._exec_child(request)
        logger.debug("exec.forked pid={} argv={}", pid, request.argv)
        return pid

    def _exec_child(self, request: CommandRequest) -> None:
        status = EXIT_REDIRECT_FAILED
        try:
            status = self._replace_image(request)
        finally:
            os._exit(status)

    def _replace_image(self, request: CommandRequest) -> int:
        """Prepare the child and exec; only returns the status to exit with on failure."""
        self.signals.restore_defaults()
        for redirection in (request.stdin_redirect, request.stdout_redirect):
            if redirection is None:
                continue
            try:
                self._redirect(redirection)
            except (OSError, ValueError) as exc:
                _child_error(f"{redirection.path}: {_reason(exc)}")
                return EXIT_REDIRECT_FAILED

        try:
            os.execvp(request.name, request.argv)
        except FileNotFoundError:
            _child_error(f"{request.name}: command not found")
            return EXIT_NOT_FOUND
        except (OSError, ValueError) as exc:
            _child_error(f"{request.name}: {_reason(exc)}")
            return EXIT_NOT_EXECUTABLE
        return EXIT_NOT_EXECUTABLE

    def _redirect(self, redirection: Redirection) -> None:
        target = 0 if redirection.kind is RedirectKind.READ else 1
        fd = os.open(redirection.path, _OPEN_FLAGS[redirection.kind], self.create_mode)
        if fd != target:
            os.dup2(fd, target)
            os.close(fd)


def _child_error(message: str) -> None:
    os.write(2, os.fsencode(f"smallsh: {message}\n"))


def _reason(exc: Exception) -> str:
    if isinstance(exc, OSError) and exc.strerror:
        return exc.strerror
    return str(exc)
