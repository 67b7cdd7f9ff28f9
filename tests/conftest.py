from __future__ import annotations

import signal
from collections.abc import Iterator

import pytest

from smallsh.config import Settings


@pytest.fixture(autouse=True)
def _restore_signal_handlers() -> Iterator[None]:
    managed = (signal.SIGINT, signal.SIGTSTP, signal.SIGPIPE, signal.SIGXFSZ)
    saved = {signum: signal.getsignal(signum) for signum in managed}
    yield
    for signum, handler in saved.items():
        signal.signal(signum, handler)


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None)
