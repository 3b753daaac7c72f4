"""String helpers: splitting, joining, searching, trimming and mapping."""

from __future__ import annotations

from itertools import zip_longest
from typing import Callable, List, Optional

_NUL = "\0"


def _check_char(char: str) -> None:
    if not isinstance(char, str) or len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")


def _check_count(value: int, what: str) -> None:
    if value < 0:
        raise ValueError(f"{what} must not be negative, got {value}")


def split(text: str, sep: str) -> List[str]:
    """Split text on sep, dropping the empty pieces between repeated separators."""
    _check_char(sep)
    return [word for word in text.split(sep) if word]


def strict_split(text: Optional[str], sep: str) -> Optional[List[str]]:
    """Split text on every sep, keeping empty pieces.

    There is always one more piece than there are separators. None gives None.
    """
    _check_char(sep)
    if text is None:
        return None
    return text.split(sep)


def strjoin(first: str, second: str) -> str:
    """Concatenate two strings."""
    return first + second


def sepjoin(first: str, second: str, sep: str) -> str:
    """Join two strings with a single separator character between them."""
    _check_char(sep)
    return f"{first}{sep}{second}"


def strchr(text: str, char: str) -> Optional[int]:
    """Index of the first occurrence of char, or None.

    Looking for the NUL character finds the end of the text.
    """
    _check_char(char)
    if char == _NUL:
        return len(text)
    index = text.find(char)
    return None if index < 0 else index


def strrchr(text: str, char: str) -> Optional[int]:
    """Index of the last occurrence of char, or None.

    Looking for the NUL character finds the end of the text.
    """
    _check_char(char)
    if char == _NUL:
        return len(text)
    index = text.rfind(char)
    return None if index < 0 else index


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most n characters.

    Returns 0 when they match, otherwise the difference of the character
    codes at the first mismatch; the end of a string counts as code 0.
    """
    _check_count(n, "count")
    for a, b in zip_longest(first[:n], second[:n], fillvalue=_NUL):
        if a != b:
            return ord(a) - ord(b)
        if a == _NUL:
            break
    return 0


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Find needle wholly inside the first length characters of haystack.

    Returns the index of the match, 0 for an empty needle, or None.
    """
    _check_count(length, "length")
    if not needle:
        return 0
    index = haystack.find(needle, 0, length)
    return None if index < 0 else index


def strtrim(text: str, charset: str) -> str:
    """Remove characters found in charset from both ends of text."""
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Return at most length characters of text beginning at start.

    A start past the end of the text gives an empty string.
    """
    _check_count(start, "start")
    _check_count(length, "length")
    if start > len(text):
        return ""
    return text[start:start + length]


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from func(index, char) for every character."""
    return "".join(func(index, char) for index, char in enumerate(text))