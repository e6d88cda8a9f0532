import io

import pytest

from pipechain.printf import format_text, print_formatted, to_base


@pytest.mark.parametrize("number", [0, 1, 15, 16, 255, 123456])
def test_to_base_hex_matches_builtin(number):
    assert to_base(number, "0123456789abcdef") == format(number, "x")


def test_to_base_negative_binary():
    assert to_base(-5, "01") == "-" + format(5, "b")


def test_to_base_rejects_single_digit_alphabet():
    with pytest.raises(ValueError):
        to_base(3, "0")


def test_percent_literal():
    assert format_text("%%") == "%"


def test_null_string():
    assert format_text("%s", None) == "(null)"


def test_nil_pointer():
    assert format_text("%p", 0) == "(nil)"


def test_pointer_round_trip():
    text = format_text("%p", 0xDEAD)
    assert text.startswith("0x")
    assert int(text[2:], 16) == 0xDEAD


@pytest.mark.parametrize("number", [0, 7, 4095, 2**31 - 1])
def test_hex_round_trip(number):
    assert int(format_text("%x", number), 16) == number
    assert format_text("%X", number) == format_text("%x", number).upper()


def test_hex_of_negative_wraps_to_unsigned():
    assert int(format_text("%x", -1), 16) == 2**32 - 1


def test_unsigned_of_negative_wraps():
    assert int(format_text("%u", -1)) == 2**32 - 1


def test_signed_wraps_to_int_range():
    assert format_text("%d", 2**31) == str(-(2**31))
    assert format_text("%i", -42) == str(-42)


def test_char_from_code_and_string():
    assert format_text("%c%c", 65, "z") == chr(65) + "z"


def test_spaces_after_percent_are_skipped():
    assert format_text("% d", 7) == str(7)


def test_unknown_conversion_produces_nothing():
    assert format_text("a%qb") == "ab"


def test_template_ending_in_percent_raises():
    with pytest.raises(ValueError):
        format_text("abc %")


def test_missing_argument_raises():
    with pytest.raises(ValueError):
        format_text("%d")


def test_print_formatted_writes_and_counts():
    stream = io.StringIO()
    count = print_formatted("%s=%d\n", "x", 3, stream=stream)
    assert stream.getvalue() == format_text("%s=%d\n", "x", 3)
    assert count == len(stream.getvalue())


def test_print_formatted_defaults_to_stdout(capsys):
    count = print_formatted("%s", "out")
    assert capsys.readouterr().out == "out"
    assert count == len("out")