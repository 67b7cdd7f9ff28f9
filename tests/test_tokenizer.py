import pytest

from smallsh.core.tokenizer import split_words
from smallsh.errors import TooManyWordsError


def test_split_on_mixed_whitespace() -> None:
    assert split_words("a  b\tc") == ["a", "b", "c"]


def test_empty_and_blank_lines_have_no_words() -> None:
    assert split_words("") == []
    assert split_words("   \t\n") == []


def test_escaped_space_stays_in_word() -> None:
    assert split_words("a\\ b") == ["a b"]


def test_backslash_makes_any_character_literal() -> None:
    assert split_words("x\\\\y \\#z") == ["x\\y", "#z"]


def test_trailing_backslash_is_dropped() -> None:
    assert split_words("abc\\") == ["abc"]


def test_comment_ends_line() -> None:
    assert split_words("foo # bar") == ["foo"]
    assert split_words("# whole line") == []


def test_hash_inside_word_is_not_a_comment() -> None:
    assert split_words("a#b c") == ["a#b", "c"]


def test_line_terminator_is_whitespace() -> None:
    assert split_words("echo hi\n") == ["echo", "hi"]


def test_word_limit_rejects_line() -> None:
    assert split_words("a b c", max_words=3) == ["a", "b", "c"]
    with pytest.raises(TooManyWordsError) as exc_info:
        split_words("a b c d", max_words=3)
    assert exc_info.value.limit == 3
