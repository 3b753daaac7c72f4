"""A small printf: the conversions c, s, p, d, i, u, x, X and %."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any, Iterator, Optional, Tuple

from shellkit.output import put_str_fd

CONVERSIONS = frozenset("cspdiuxX%")
_FLAGS = "#-0+ "
_MASK32 = (1 << 32) - 1
_MASK64 = (1 << 64) - 1
_STDOUT = 1


def _int32(value: int) -> int:
    value &= _MASK32
    return value - (1 << 32) if value >= 1 << 31 else value


@dataclass(frozen=True)
class ConversionSpec:
    """One parsed conversion specification such as ``%-08.3d``."""

    conversion: str
    alternate: bool = False
    left: bool = False
    zero: bool = False
    sign: str = ""
    width: int = 0
    precision: Optional[int] = None
    width_star: bool = False
    precision_star: bool = False


def _read_number(fmt: str, index: int) -> Tuple[int, int]:
    value = 0
    while index < len(fmt) and "0" <= fmt[index] <= "9":
        value = value * 10 + ord(fmt[index]) - ord("0")
        index += 1
    return value, index


def parse_spec(fmt: str, index: int) -> Tuple[ConversionSpec, int]:
    """Parse the specification starting just after a ``%`` at ``index``.

    Returns the specification and the index just past its conversion
    character. Raises ValueError when the format ends too early.
    """
    alternate = left = zero = False
    sign = ""
    while index < len(fmt) and fmt[index] in _FLAGS:
        flag = fmt[index]
        if flag == "#":
            alternate = True
        elif flag == "-":
            left, zero = True, False
        elif flag == "0" and not left:
            zero = True
        elif flag == "+":
            sign = "+"
        elif flag == " " and sign != "+":
            sign = " "
        index += 1

    width_star = False
    if index < len(fmt) and fmt[index] == "*":
        width_star, width = True, 0
        index += 1
    else:
        width, index = _read_number(fmt, index)

    precision: Optional[int] = None
    precision_star = False
    if index < len(fmt) and fmt[index] == ".":
        index += 1
        if index < len(fmt) and fmt[index] == "*":
            precision_star, precision = True, 0
            index += 1
        else:
            precision, index = _read_number(fmt, index)

    if index >= len(fmt):
        raise ValueError("incomplete conversion specification at end of format")
    spec = ConversionSpec(
        conversion=fmt[index],
        alternate=alternate,
        left=left,
        zero=zero,
        sign=sign,
        width=width,
        precision=precision,
        width_star=width_star,
        precision_star=precision_star,
    )
    return spec, index + 1


def _digits(number: int, precision: Optional[int], upper: bool = False, base: int = 10) -> str:
    if number == 0:
        text = ""
    elif base == 16:
        text = format(number, "X" if upper else "x")
    else:
        text = str(number)
    minimum = 1 if precision is None else precision
    return text.rjust(minimum, "0")


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(int(value) & 0xFF)


def _string(value: Optional[str], precision: Optional[int]) -> str:
    if value is None:
        return "(null)" if precision is None or precision > 6 else ""
    if precision is None or precision < 0:
        return value
    return value[:precision]


def _pad(body: str, spec: ConversionSpec) -> str:
    padding = max(0, spec.width - len(body))
    kind = spec.conversion
    if spec.zero and kind in "diuxX" and spec.precision is None:
        prefix = ""
        if kind in "di" and body and not "0" <= body[0] <= "9":
            prefix, body = body[0], body[1:]
        elif kind in "xX" and ("x" in body or "X" in body):
            prefix, body = body[:2], body[2:]
        return prefix + "0" * padding + body
    if spec.left:
        return body + " " * padding
    return " " * padding + body


def render(spec: ConversionSpec, value: Any = None) -> str:
    """Render one value according to a resolved specification."""
    kind = spec.conversion
    if kind == "%":
        return "%"
    if kind == "c":
        body = _char(value)
    elif kind == "s":
        body = _string(value, spec.precision)
    elif kind in "di":
        number = _int32(int(value))
        sign = "-" if number < 0 else spec.sign
        body = sign + _digits(abs(number), spec.precision)
    elif kind == "u":
        body = _digits(int(value) & _MASK32, spec.precision)
    elif kind in "xX":
        number = int(value) & _MASK32
        body = _digits(number, spec.precision, kind == "X", 16)
        if spec.alternate and number != 0:
            body = ("0X" if kind == "X" else "0x") + body
    elif kind == "p":
        number = 0 if value is None else int(value) & _MASK64
        body = "(nil)" if number == 0 else "0x" + _digits(number, spec.precision, base=16)
    else:
        raise ValueError(f"unknown conversion {kind!r}")
    return _pad(body, spec)


def _pieces(fmt: str, args: Tuple[Any, ...]) -> Iterator[str]:
    remaining = iter(args)

    def take() -> Any:
        try:
            return next(remaining)
        except StopIteration:
            raise TypeError("not enough arguments for format string") from None

    index = 0
    while index < len(fmt):
        percent = fmt.find("%", index)
        if percent < 0:
            yield fmt[index:]
            return
        if percent > index:
            yield fmt[index:percent]
        spec, index = parse_spec(fmt, percent + 1)
        if spec.width_star:
            spec = dataclasses.replace(spec, width=_int32(int(take())))
        if spec.precision_star:
            spec = dataclasses.replace(spec, precision=_int32(int(take())))
        if spec.conversion == "%":
            yield "%"
            continue
        if spec.conversion not in CONVERSIONS:
            raise ValueError(f"unknown conversion {spec.conversion!r}")
        yield render(spec, take())


def format_string(fmt: str, *args: Any) -> str:
    """Format the arguments and return the text.

    Raises ValueError for an unknown or incomplete conversion and TypeError
    when arguments run out.
    """
    return "".join(_pieces(fmt, args))


def printf(fmt: Optional[str], *args: Any) -> int:
    """Write the formatted text to standard output.

    Returns the number of bytes written, or -1 when the format is missing or
    holds an invalid conversion; text before the bad conversion is written.
    """
    if fmt is None:
        return -1
    written = 0
    try:
        for piece in _pieces(fmt, args):
            written += put_str_fd(piece, _STDOUT)
    except ValueError:
        return -1
    return written