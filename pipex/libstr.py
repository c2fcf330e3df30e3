"""String helpers used to parse command lines and search paths."""

from __future__ import annotations

from itertools import zip_longest

_WHITESPACE = " \n\t\v\f\r"
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


def _require_char(value: str, name: str) -> None:
    if not isinstance(value, str) or len(value) != 1:
        raise ValueError(f"{name} must be a single character, got {value!r}")


def _require_non_negative(value: int, name: str) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def atoi(text: str) -> int:
    """Parse a leading decimal integer, ignoring leading whitespace.

    An optional sign may precede the digits; parsing stops at the first
    non-digit. Text without digits yields 0.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = []
    for ch in rest:
        if not "0" <= ch <= "9":
            break
        digits.append(ch)
    if not digits:
        return 0
    return sign * int("".join(digits))


def itoa(n: int) -> str:
    """Render a 32-bit signed integer in decimal."""
    if not _INT_MIN <= n <= _INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit signed integer")
    return str(n)


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on ``sep``, dropping empty pieces."""
    _require_char(sep, "sep")
    return [piece for piece in text.split(sep) if piece]


def strtrim(text: str, charset: str) -> str:
    """Remove characters in ``charset`` from both ends of ``text``."""
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` from ``start``.

    A start past the end of the text gives an empty string.
    """
    _require_non_negative(start, "start")
    _require_non_negative(length, "length")
    return text[start:start + length]


def strnstr(haystack: str, needle: str, length: int) -> str | None:
    """Find ``needle`` wholly within the first ``length`` characters.

    Returns the tail of ``haystack`` starting at the match, the whole
    haystack for an empty needle, or None when there is no match.
    """
    _require_non_negative(length, "length")
    if not needle:
        return haystack
    index = haystack[:length].find(needle)
    if index < 0:
        return None
    return haystack[index:]


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters.

    Returns the code-point difference of the first differing characters,
    a shorter string comparing as if followed by a NUL; 0 if equal.
    """
    _require_non_negative(n, "n")
    for a, b in zip_longest(s1[:n], s2[:n], fillvalue="\0"):
        if a != b:
            return ord(a) - ord(b)
    return 0


def strrchr(text: str, char: str) -> str | None:
    """Return the tail of ``text`` from the last ``char``, or None.

    Searching for NUL yields the empty tail at the end of the text.
    """
    _require_char(char, "char")
    if char == "\0":
        return ""
    index = text.rfind(char)
    if index < 0:
        return None
    return text[index:]