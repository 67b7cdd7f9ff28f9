"""Signal dispositions for the interpreter and its children."""

from __future__ import annotations

import signal
from collections.abc import Iterator
from contextlib import contextmanager
from types import FrameType

from smallsh.errors import PromptInterrupted

MANAGED_SIGNALS = (signal.SIGINT, signal.SIGTSTP)
# The interpreter runtime ignores these at startup; the ignored state survives exec.
CHILD_DEFAULT_SIGNALS = (*MANAGED_SIGNALS, signal.SIGPIPE, signal.SIGXFSZ)


class SignalPolicy:
    """How the interpreter treats interrupt and stop signals.

    In interactive mode stop requests are ignored and an interrupt only
    breaks a blocked line read. Outside :meth:`reading` the interrupt is a
    no-op, so a foreground wait is never aborted. Children get the default
    dispositions back through :meth:`restore_defaults`.
    """

    def __init__(self, interactive: bool) -> None:
        self.interactive = interactive
        self._reading = False

    def install(self) -> None:
        """Apply the interpreter's dispositions; called once before the loop."""
        if not self.interactive:
            signal.signal(signal.SIGINT, signal.SIG_DFL)
            return
        signal.signal(signal.SIGTSTP, signal.SIG_IGN)
        signal.signal(signal.SIGINT, self._on_interrupt)

    def restore_defaults(self) -> None:
        """Reset signals to their default action; called in each child before exec."""
        for signum in CHILD_DEFAULT_SIGNALS:
            signal.signal(signum, signal.SIG_DFL)

    @contextmanager
    def reading(self) -> Iterator[None]:
        """Mark the span during which an interrupt aborts the pending read."""
        self._reading = True
        try:
            yield
        finally:
            self._reading = False

    def _on_interrupt(self, signum: int, frame: FrameType | None) -> None:
        if self._reading:
            raise PromptInterrupted
