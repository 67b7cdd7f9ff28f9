"""Child process bookkeeping."""

from __future__ import annotations

import os
import signal
from collections.abc import Callable

from loguru import logger

from smallsh.core.types import Job, JobEvent, JobState, ShellState

SIGNAL_STATUS_BASE = 128

WaitPid = Callable[[int, int], tuple[int, int]]
Kill = Callable[[int, int], None]


def decode_status(status: int) -> tuple[JobState, int | None]:
    """Translate a raw wait status into a job state and its code."""
    if os.WIFEXITED(status):
        return JobState.EXITED, os.WEXITSTATUS(status)
    if os.WIFSIGNALED(status):
        return JobState.SIGNALED, os.WTERMSIG(status)
    if os.WIFSTOPPED(status):
        return JobState.STOPPED, os.WSTOPSIG(status)
    return JobState.RUNNING, None


class JobTracker:
    """Tracks spawned children and keeps ``$?`` and ``$!`` up to date."""

    def __init__(
        self,
        state: ShellState,
        *,
        waitpid: WaitPid = os.waitpid,
        kill: Kill = os.kill,
    ) -> None:
        self.state = state
        self._waitpid = waitpid
        self._kill = kill
        self._jobs: dict[int, Job] = {}

    @property
    def jobs(self) -> dict[int, Job]:
        return dict(self._jobs)

    def track_background(self, pid: int) -> None:
        """Record a child started with a trailing ``&``."""
        self._jobs[pid] = Job(pid=pid)
        self.state.last_background_pid = pid
        logger.debug("job.spawned pid={} background=true", pid)

    def wait_foreground(self, pid: int) -> JobEvent:
        """Block until the foreground child exits, dies or stops.

        A stopped child is continued and from then on treated as a
        background job.
        """
        _, status = self._waitpid(pid, os.WUNTRACED)
        job_state, code = decode_status(status)

        if job_state is JobState.EXITED:
            self.state.last_status = code or 0
        elif job_state is JobState.SIGNALED:
            self.state.last_status = SIGNAL_STATUS_BASE + (code or 0)
        elif job_state is JobState.STOPPED:
            self._jobs[pid] = Job(pid=pid, state=JobState.STOPPED, code=code)
            self.state.last_background_pid = pid
            self._resume(pid)

        logger.debug("job.waited pid={} state={} code={}", pid, job_state.value, code)
        return JobEvent(pid=pid, state=job_state, code=code)

    def reap(self) -> list[JobEvent]:
        """Collect every pending state change of background children without blocking."""
        events: list[JobEvent] = []
        while True:
            try:
                pid, status = self._waitpid(-1, os.WNOHANG | os.WUNTRACED)
            except ChildProcessError:
                break
            if pid == 0:
                break

            job_state, code = decode_status(status)
            if job_state is JobState.RUNNING:
                continue
            events.append(JobEvent(pid=pid, state=job_state, code=code))
            logger.debug("job.reaped pid={} state={} code={}", pid, job_state.value, code)

            if job_state.terminal:
                self._jobs.pop(pid, None)
            else:
                self._jobs[pid] = Job(pid=pid, state=JobState.STOPPED, code=code)
                self._resume(pid)
        return events

    def _resume(self, pid: int) -> None:
        try:
            self._kill(pid, signal.SIGCONT)
        except ProcessLookupError:
            logger.debug("job.resume_missing pid={}", pid)
            return
        if pid in self._jobs:
            self._jobs[pid].state = JobState.RUNNING
