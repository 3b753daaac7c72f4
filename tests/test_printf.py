import pytest

from shellkit.printf import ConversionSpec, format_string, parse_spec, printf, render


@pytest.mark.parametrize(
    "fmt, value",
    [
        ("%d", 42),
        ("%i", -17),
        ("%5d", 42),
        ("%-5d|", 42),
        ("%05d", -42),
        ("%+d", 7),
        ("% d", 7),
        ("%+05d", 9),
        ("%.3d", 5),
        ("%x", 48879),
        ("%X", 48879),
        ("%#x", 255),
        ("%#X", 255),
        ("%#08x", 255),
        ("%s", "hello"),
        ("%.2s", "hello"),
        ("%10s|", "hi"),
        ("%-10s|", "hi"),
        ("%c", 65),
        ("%5c", "z"),
        ("%u", 123),
        ("%0-5d|", 42),
    ],
)
def test_matches_standard_formatting(fmt, value):
    assert format_string(fmt, value) == fmt % value


def test_percent_literal():
    assert format_string("100%%") == "100%"


def test_star_width_and_precision():
    assert format_string("%*d", 6, 42) == "%*d" % (6, 42)
    assert format_string("%.*s", 3, "abcdef") == "%.*s" % (3, "abcdef")


def test_unsigned_wraps():
    assert format_string("%u", -1) == str(2**32 - 1)


def test_signed_wraps_to_32_bits():
    assert format_string("%d", 2**31) == str(-(2**31))


def test_pointer():
    assert format_string("%p", 255) == hex(255)
    assert format_string("%p", 0) == "(nil)"
    assert format_string("%p", None) == "(nil)"


def test_null_string():
    assert format_string("%s", None) == "(null)"
    assert format_string("%.3s", None) == ""


def test_alternate_hex_zero_has_no_prefix():
    assert format_string("%#x", 0) == "0"


def test_zero_precision_zero_value_is_empty():
    assert format_string("[%.0d]", 0) == "[]"


def test_nul_character():
    assert format_string("%c", 0) == "\0"


def test_parse_spec_fields():
    spec, end = parse_spec("%-08.3d", 1)
    assert (spec.left, spec.zero, spec.width, spec.precision, spec.conversion) == (
        True,
        False,
        8,
        3,
        "d",
    )
    assert end == len("%-08.3d")


def test_parse_spec_stars():
    spec, end = parse_spec("%*.*s", 1)
    assert spec.width_star and spec.precision_star
    assert end == 5


def test_parse_spec_sign_priority():
    spec, _ = parse_spec("%+ d", 1)
    assert spec.sign == "+"


def test_parse_spec_incomplete():
    with pytest.raises(ValueError):
        parse_spec("%-5", 1)


def test_render_direct():
    assert render(ConversionSpec(conversion="s", width=4), "ab") == "  ab"
    assert render(ConversionSpec(conversion="%")) == "%"
    with pytest.raises(ValueError):
        render(ConversionSpec(conversion="q"), 1)


def test_format_errors():
    with pytest.raises(ValueError):
        format_string("%q", 1)
    with pytest.raises(ValueError):
        format_string("abc%")
    with pytest.raises(TypeError):
        format_string("%d %d", 1)


def test_printf_writes_and_counts(capfd):
    count = printf("%s=%d\n", "answer", 42)
    out, _ = capfd.readouterr()
    assert out == "answer=42\n"
    assert count == len(out)


def test_printf_error_returns_minus_one(capfd):
    assert printf("ab%q", 1) == -1
    out, _ = capfd.readouterr()
    assert out == "ab"


def test_printf_none_format():
    assert printf(None) == -1