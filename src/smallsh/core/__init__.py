"""Tokenize, expand, parse, execute and track commands."""

from .executor import ExecutionResult, Executor
from .expander import expand_word, expand_words, scan_parameter
from .jobs import JobTracker
from .parser import parse_command
from .signals import SignalPolicy
from .tokenizer import split_words
from .types import CommandRequest, Job, JobEvent, JobState, Redirection, RedirectKind, ShellState, TurnOutcome

__all__ = [
    "CommandRequest",
    "ExecutionResult",
    "Executor",
    "Job",
    "JobEvent",
    "JobState",
    "JobTracker",
    "RedirectKind",
    "Redirection",
    "ShellState",
    "SignalPolicy",
    "TurnOutcome",
    "expand_word",
    "expand_words",
    "parse_command",
    "scan_parameter",
    "split_words",
]
