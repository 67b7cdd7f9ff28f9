"""Line splitting into words."""

from __future__ import annotations

from smallsh.errors import TooManyWordsError

COMMENT_CHAR = "#"
ESCAPE_CHAR = "\\"


def split_words(line: str, *, max_words: int | None = None) -> list[str]:
    """Split one input line into words.

    Words are separated by unescaped whitespace. A backslash makes the next
    character literal and is dropped itself. A word starting with ``#``
    discards the rest of the line.

    Raises:
        TooManyWordsError: if the line holds more than ``max_words`` words.
    """

    words: list[str] = []
    pos = 0
    length = len(line)

    while True:
        while pos < length and line[pos].isspace():
            pos += 1
        if pos >= length or line[pos] == COMMENT_CHAR:
            break

        chars: list[str] = []
        while pos < length and not line[pos].isspace():
            if line[pos] == ESCAPE_CHAR:
                pos += 1
                if pos >= length:
                    break
            chars.append(line[pos])
            pos += 1

        if max_words is not None and len(words) >= max_words:
            raise TooManyWordsError(max_words)
        words.append("".join(chars))

    return words
