"""Small text helpers used when reading scene description files."""

from __future__ import annotations

_SPACE_CODES = frozenset({ord(" "), *range(9, 14)})


def is_space(char: str | int) -> bool:
    """Return True for a blank or one of the control characters TAB..CR."""
    code = char if isinstance(char, int) else (ord(char) if len(char) == 1 else -1)
    return code in _SPACE_CODES


def atoi(text: str) -> int:
    """Parse a leading signed decimal integer, skipping leading blanks.

    Parsing stops at the first character that is not a digit; text with no
    digits yields 0.
    """
    pos = 0
    while pos < len(text) and is_space(text[pos]):
        pos += 1
    sign = 1
    if pos < len(text) and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    value = 0
    for char in text[pos:]:
        if not "0" <= char <= "9":
            break
        value = value * 10 + (ord(char) - ord("0"))
    return sign * value


def itoa(number: int) -> str:
    """Format an integer in decimal."""
    return str(int(number))


def split(text: str, sep: str) -> list[str]:
    """Split on a single separator character, dropping empty pieces."""
    if len(sep) != 1:
        raise ValueError("separator must be a single character")
    return [piece for piece in text.split(sep) if piece]


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` from ``start``.

    A start past the end of the text gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(text):
        return ""
    return text[start:start + length]


def strtrim(text: str, charset: str | None) -> str:
    """Strip characters of ``charset`` from both ends of ``text``.

    Trimming from the right never removes the first character; it is only
    dropped by trimming from the left.
    """
    if charset is None:
        return text
    start = len(text) - len(text.lstrip(charset)) if charset else 0
    end = len(text.rstrip(charset)) if charset else len(text)
    end = max(end, 1)
    if start >= end:
        return ""
    return text[start:end]