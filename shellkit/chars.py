"""Character classification and integer/text conversion helpers."""

from __future__ import annotations

_WHITESPACE = frozenset("\f\n\r\t\v ")
_INT_BITS = 32


def _to_int32(value: int) -> int:
    """Wrap an integer into the range of a signed 32-bit integer."""
    value &= (1 << _INT_BITS) - 1
    if value >= 1 << (_INT_BITS - 1):
        value -= 1 << _INT_BITS
    return value


def _code(char: str | int) -> int:
    """Return the character code of a one-character string or an int."""
    if isinstance(char, bool):
        raise TypeError("expected a one-character string or an int")
    if isinstance(char, int):
        return char
    if isinstance(char, str):
        if len(char) != 1:
            raise ValueError(f"expected a single character, got {char!r}")
        return ord(char)
    raise TypeError("expected a one-character string or an int")


def atoi(text: str) -> int:
    """Parse a leading decimal integer, C style.

    Leading whitespace is skipped, one optional sign is accepted and digits
    are read until the first non-digit. Text without digits gives 0. The
    result wraps around like a 32-bit signed integer.
    """
    pos = 0
    length = len(text)
    while pos < length and text[pos] in _WHITESPACE:
        pos += 1
    sign = 1
    if pos < length and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    start = pos
    while pos < length and "0" <= text[pos] <= "9":
        pos += 1
    digits = text[start:pos]
    value = int(digits) if digits else 0
    return _to_int32(value * sign)


def itoa(number: int) -> str:
    """Return the decimal text of a 32-bit signed integer."""
    return str(_to_int32(number))


def is_alpha(char: str | int) -> bool:
    """True for ASCII letters."""
    code = _code(char)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def is_digit(char: str | int) -> bool:
    """True for ASCII decimal digits."""
    code = _code(char)
    return ord("0") <= code <= ord("9")


def is_alnum(char: str | int) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(char) or is_digit(char)


def is_ascii(char: str | int) -> bool:
    """True for codes 0 to 127."""
    return 0 <= _code(char) <= 127


def is_print(char: str | int) -> bool:
    """True for printable ASCII, space included."""
    return 32 <= _code(char) <= 126


def to_upper(char: str | int) -> str | int:
    """Upper-case an ASCII letter; anything else comes back unchanged."""
    code = _code(char)
    if ord("a") <= code <= ord("z"):
        code = code - ord("a") + ord("A")
    return chr(code) if isinstance(char, str) else code


def to_lower(char: str | int) -> str | int:
    """Lower-case an ASCII letter; anything else comes back unchanged."""
    code = _code(char)
    if ord("A") <= code <= ord("Z"):
        code = code - ord("A") + ord("a")
    return chr(code) if isinstance(char, str) else code