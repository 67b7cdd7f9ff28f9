"""Shared core dataclasses."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class RedirectKind(str, Enum):
    """Redirection operator kinds."""

    READ = "<"
    WRITE = ">"
    APPEND = ">>"


@dataclass(frozen=True)
class Redirection:
    """One redirection operator and its path argument."""

    kind: RedirectKind
    path: str


@dataclass(frozen=True)
class CommandRequest:
    """Parsed command: argument vector, redirections and background flag."""

    argv: list[str] = field(default_factory=list)
    redirections: list[Redirection] = field(default_factory=list)
    background: bool = False

    @property
    def empty(self) -> bool:
        return not self.argv

    @property
    def name(self) -> str:
        return self.argv[0] if self.argv else ""

    @property
    def stdin_redirect(self) -> Redirection | None:
        """Last read redirection, the one applied to standard input."""
        reads = [item for item in self.redirections if item.kind is RedirectKind.READ]
        return reads[-1] if reads else None

    @property
    def stdout_redirect(self) -> Redirection | None:
        """Last write or append redirection, the one applied to standard output."""
        writes = [item for item in self.redirections if item.kind is not RedirectKind.READ]
        return writes[-1] if writes else None


class JobState(str, Enum):
    """Lifecycle states of a child process."""

    RUNNING = "running"
    STOPPED = "stopped"
    EXITED = "exited"
    SIGNALED = "signaled"

    @property
    def terminal(self) -> bool:
        return self in (JobState.EXITED, JobState.SIGNALED)


@dataclass
class Job:
    """A tracked child process."""

    pid: int
    state: JobState = JobState.RUNNING
    code: int | None = None  # exit code or signal number, depending on state


@dataclass(frozen=True)
class JobEvent:
    """A state change observed for a background child."""

    pid: int
    state: JobState
    code: int | None = None

    def describe(self) -> str:
        if self.state is JobState.EXITED:
            return f"Child process {self.pid} done. Exit status {self.code}."
        if self.state is JobState.SIGNALED:
            return f"Child process {self.pid} done. Signaled {self.code}."
        return f"Child process {self.pid} stopped. Continuing."


@dataclass
class ShellState:
    """Process-wide status parameters, owned by the control loop."""

    last_status: int = 0
    last_background_pid: int | None = None


@dataclass(frozen=True)
class TurnOutcome:
    """Result of one prompt cycle."""

    exit_code: int | None = None

    @property
    def exit_requested(self) -> bool:
        return self.exit_code is not None

    @classmethod
    def proceed(cls) -> TurnOutcome:
        return cls()

    @classmethod
    def exit(cls, code: int) -> TurnOutcome:
        return cls(exit_code=code)
