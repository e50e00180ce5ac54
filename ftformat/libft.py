"""Small string helpers used by the formatter."""

from __future__ import annotations

from itertools import zip_longest

_ATOI_SPACE = "\t\n\v\f\r "


def atoi(text: str) -> int:
    """Parse a leading decimal integer, skipping blanks and one sign.

    Parsing stops at the first non-digit. A string with no digits gives 0.
    """
    rest = text.lstrip(_ATOI_SPACE)
    negative = False
    if rest[:1] == "-":
        negative = True
        rest = rest[1:]
    elif rest[:1] == "+":
        rest = rest[1:]
    digits = []
    for ch in rest:
        if not ("0" <= ch <= "9"):
            break
        digits.append(ch)
    value = int("".join(digits)) if digits else 0
    return -value if negative else value


def itoa(n: int) -> str:
    """Return the decimal representation of ``n``."""
    return str(int(n))


def split(s: str, sep: str) -> list[str]:
    """Split ``s`` on the character ``sep``, dropping empty pieces."""
    if not sep:
        return [s] if s else []
    if len(sep) != 1:
        raise ValueError("separator must be a single character")
    return [word for word in s.split(sep) if word]


def strtrim(s: str, chars: str) -> str:
    """Remove every character of ``chars`` from both ends of ``s``."""
    if not chars:
        return s
    return s.strip(chars)


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` beginning at ``start``.

    A start beyond the end of the string gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start > len(s):
        return ""
    return s[start:start + length]


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Find ``needle`` wholly inside the first ``length`` characters.

    Returns the index of the first match, or None. An empty needle
    matches at index 0.
    """
    if length < 0:
        raise ValueError("length must not be negative")
    if not needle:
        return 0
    index = haystack.find(needle, 0, length)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters; return the difference of the first mismatch.

    A string that ends early compares as if followed by a NUL character.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    for a, b in zip_longest(s1[:n], s2[:n], fillvalue="\0"):
        if a != b or a == "\0":
            return ord(a) - ord(b)
    return 0