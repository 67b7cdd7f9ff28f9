"""The interpreter's read-eval loop."""

from __future__ import annotations

from typing import TextIO

from loguru import logger

from smallsh.cli.render import Renderer, create_cli_renderer
from smallsh.config import Settings
from smallsh.core.executor import Executor
from smallsh.core.expander import expand_word, expand_words
from smallsh.core.jobs import JobTracker
from smallsh.core.parser import parse_command
from smallsh.core.signals import SignalPolicy
from smallsh.core.tokenizer import split_words
from smallsh.core.types import JobState, ShellState, TurnOutcome
from smallsh.errors import PromptInterrupted, ShellError

PROMPT_WORD = "${PS1}"


class Shell:
    """One interpreter session: shared state plus the per-line pipeline."""

    def __init__(
        self,
        settings: Settings,
        *,
        interactive: bool = True,
        renderer: Renderer | None = None,
        state: ShellState | None = None,
        tracker: JobTracker | None = None,
    ) -> None:
        self.settings = settings
        self.interactive = interactive
        self.renderer = renderer or create_cli_renderer()
        self.state = state or ShellState()
        self.tracker = tracker or JobTracker(self.state)
        self.signals = SignalPolicy(interactive)
        self.executor = Executor(self.tracker, self.signals, create_mode=settings.create_mode)

    def run(self, stream: TextIO) -> int:
        """Read and run lines until ``exit`` or end of input; return the exit status."""
        self.signals.install()
        while True:
            self.report_jobs()
            try:
                line = self._read_line(stream)
            except PromptInterrupted:
                self.renderer.newline()
                continue
            if not line:
                logger.debug("shell.eof status={}", self.state.last_status)
                return self.state.last_status

            outcome = self.run_line(line)
            if outcome.exit_requested:
                return outcome.exit_code or 0

    def run_line(self, line: str) -> TurnOutcome:
        """Tokenize, expand, parse and execute one line."""
        try:
            words = split_words(line, max_words=self.settings.max_words)
            request = parse_command(
                expand_words(words, self.state),
                create_mode=self.settings.create_mode,
                truncate_on_parse=self.settings.truncate_on_parse,
            )
            result = self.executor.execute(request)
        except ShellError as exc:
            logger.debug("shell.error type={} message={}", type(exc).__name__, exc)
            self.renderer.error(str(exc))
            return TurnOutcome.proceed()

        if result.event is not None and result.event.state is JobState.STOPPED:
            self.renderer.job_notice(result.event.describe())
        return result.outcome

    def report_jobs(self) -> None:
        """Report background children that finished or stopped since the last prompt."""
        for event in self.tracker.reap():
            self.renderer.job_notice(event.describe())

    def prompt_text(self) -> str:
        return expand_word(PROMPT_WORD, self.state)

    def _read_line(self, stream: TextIO) -> str:
        with self.signals.reading():
            if self.interactive:
                self.renderer.prompt(self.prompt_text())
            return stream.readline()
