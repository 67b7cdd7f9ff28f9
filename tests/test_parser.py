import os
import stat
from pathlib import Path

import pytest

from smallsh.core.parser import parse_command
from smallsh.core.types import Redirection, RedirectKind
from smallsh.errors import ParseError


@pytest.fixture(autouse=True)
def _in_tmp(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.chdir(tmp_path)


def test_read_and_write_redirections() -> None:
    request = parse_command(["cat", "<", "in.txt", ">", "out.txt"])
    assert request.argv == ["cat"]
    assert request.redirections == [
        Redirection(kind=RedirectKind.READ, path="in.txt"),
        Redirection(kind=RedirectKind.WRITE, path="out.txt"),
    ]
    assert request.background is False


def test_trailing_ampersand_requests_background() -> None:
    request = parse_command(["echo", "hi", "&"])
    assert request.background is True
    assert request.argv == ["echo", "hi"]


def test_ampersand_elsewhere_is_an_argument() -> None:
    request = parse_command(["echo", "&", "hi"])
    assert request.background is False
    assert request.argv == ["echo", "&", "hi"]


def test_empty_words_make_empty_request() -> None:
    request = parse_command([])
    assert request.empty
    assert parse_command(["&"]).empty


def test_redirections_keep_argument_order() -> None:
    request = parse_command(["sort", "-r", ">>", "log", "-u", "<", "data"])
    assert request.argv == ["sort", "-r", "-u"]
    assert request.stdin_redirect == Redirection(kind=RedirectKind.READ, path="data")
    assert request.stdout_redirect == Redirection(kind=RedirectKind.APPEND, path="log")


@pytest.mark.parametrize("operator", ["<", ">", ">>"])
def test_operator_without_path_is_an_error(operator: str) -> None:
    with pytest.raises(ParseError):
        parse_command(["cat", operator])


def test_background_marker_is_not_taken_as_a_path() -> None:
    with pytest.raises(ParseError):
        parse_command(["echo", ">", "&"])


def test_write_target_is_truncated_while_parsing(tmp_path: Path) -> None:
    target = tmp_path / "out.txt"
    target.write_text("old contents")
    parse_command(["true", ">", "out.txt"])
    assert target.read_text() == ""


def test_superseded_write_targets_are_still_created(tmp_path: Path) -> None:
    request = parse_command(["echo", ">", "first", ">>", "second", ">", "third"])
    assert request.stdout_redirect == Redirection(kind=RedirectKind.WRITE, path="third")
    assert (tmp_path / "first").exists()
    assert (tmp_path / "third").exists()
    assert not (tmp_path / "second").exists()


def test_later_read_redirection_wins() -> None:
    request = parse_command(["cat", "<", "a", "<", "b"])
    assert request.stdin_redirect == Redirection(kind=RedirectKind.READ, path="b")


def test_truncation_can_be_deferred(tmp_path: Path) -> None:
    target = tmp_path / "out.txt"
    target.write_text("keep")
    parse_command(["true", ">", "out.txt"], truncate_on_parse=False)
    assert target.read_text() == "keep"


def test_created_files_use_broad_mode_minus_umask(tmp_path: Path) -> None:
    old_umask = os.umask(0o022)
    try:
        parse_command(["true", ">", "made"])
    finally:
        os.umask(old_umask)
    assert stat.S_IMODE((tmp_path / "made").stat().st_mode) == 0o755


def test_unwritable_target_is_a_parse_error(tmp_path: Path) -> None:
    with pytest.raises(ParseError):
        parse_command(["true", ">", str(tmp_path / "missing" / "out.txt")])


def test_write_target_with_null_byte_is_a_parse_error() -> None:
    with pytest.raises(ParseError, match="embedded null byte"):
        parse_command(["echo", "hi", ">", "a\x00b"])
