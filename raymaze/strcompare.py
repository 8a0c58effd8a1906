"""Bounded string search, comparison and copying."""

from __future__ import annotations


def _codes(text: str | bytes) -> bytes:
    if isinstance(text, bytes):
        return text
    return text.encode("utf-8", errors="surrogateescape")


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Return where ``needle`` first lies wholly inside ``haystack[:length]``.

    An empty needle is found at position 0; a missing one gives None.
    """
    if length < 0:
        raise ValueError("length must not be negative")
    if not needle:
        return 0
    position = haystack[:length].find(needle)
    return None if position < 0 else position


def strncmp(first: str | bytes, second: str | bytes, n: int) -> int:
    """Compare at most ``n`` bytes, returning the difference at the first mismatch.

    The end of either string counts as a zero byte, and comparison stops
    once both strings end together.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    left, right = _codes(first), _codes(second)
    for index in range(n):
        a = left[index] if index < len(left) else 0
        b = right[index] if index < len(right) else 0
        if a != b:
            return a - b
        if a == 0:
            return 0
    return 0


def strlcat(dest: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dest`` within a buffer of ``size`` characters.

    Returns the resulting text (at most ``size - 1`` characters long when
    anything was appended) and the length the full result would have had.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    dest_len, src_len = len(dest), len(src)
    result = dest
    if size > 0 and dest_len < size - 1:
        result = dest + src[:size - 1 - dest_len]
    if dest_len >= size:
        return result, size + src_len
    return result, dest_len + src_len


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters.

    Returns the copied text (empty when ``size`` is 0) and the length of ``src``.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    copied = src[:size - 1] if size > 0 else ""
    return copied, len(src)