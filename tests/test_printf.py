import io

import pytest

from ftformat.printf import format_string, ft_printf


def test_plain_text_passes_through():
    text = "no conversions here"
    assert format_string(text, macos=False) == text


def test_unknown_conversion_copies_character():
    assert format_string("a%qb", macos=False) == "aqb"


def test_trailing_percent_is_dropped():
    assert format_string("abc%", macos=False) == "abc"


def test_null_string():
    assert format_string("%s", None, macos=False) == "(null)"
    assert format_string("%s", None, macos=True) == "(null)"


def test_null_string_short_precision_differs_by_platform():
    assert format_string("%.3s", None, macos=False) == ""
    assert format_string("%.3s", None, macos=True) == "(null)"[:3]


def test_null_pointer_by_platform():
    assert format_string("%p", None, macos=False) == "(nil)"
    assert format_string("%p", 0, macos=True) == "0x0"


def test_pointer_matches_hex():
    assert format_string("%p", 0x1234, macos=False) == "0x" + "%x" % 0x1234


def test_percent_width_only_on_macos():
    assert format_string("%5%", macos=False) == "%"
    assert format_string("%5%", macos=True) == "%5s" % "%"


def test_ft_printf_writes_and_counts():
    out = io.StringIO()
    count = ft_printf("%s=%5d\n", "key", 17, file=out, macos=False)
    assert out.getvalue() == "%s=%5d\n" % ("key", 17)
    assert count == len(out.getvalue())


def test_ft_printf_counts_null_pointer_precision():
    out = io.StringIO()
    count = ft_printf("%.3p", None, file=out, macos=False)
    assert out.getvalue() == "(nil)"
    assert count == len("(nil)") + 3


def test_missing_argument_raises():
    with pytest.raises(ValueError):
        format_string("%d %d", 1, macos=False)


def test_missing_star_argument_raises():
    with pytest.raises(ValueError):
        format_string("%*d", macos=False)


def test_extra_arguments_are_ignored():
    assert format_string("%d", 3, 4, 5, macos=False) == "%d" % 3