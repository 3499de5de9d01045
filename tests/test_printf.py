import io

import pytest

from phoenix.printf import convert_number, printf, sprintf


@pytest.mark.parametrize("number", [0, 1, 9, 10, 15, 16, 255, 4096, 123456789])
@pytest.mark.parametrize("base", [2, 8, 10, 16])
def test_convert_number_round_trip(number, base):
    assert int(convert_number(number, base), base) == number


def test_convert_number_case():
    upper = convert_number(48879, 16)
    lower = convert_number(48879, 16, lowercase=True)
    assert upper == upper.upper()
    assert lower == upper.lower()


def test_convert_number_digits_from_table():
    assert convert_number(15, 16) == "F"
    assert convert_number(0, 10) == "0"


def test_convert_number_errors():
    with pytest.raises(ValueError):
        convert_number(-1, 10)
    with pytest.raises(ValueError):
        convert_number(5, 17)


def test_sprintf_plain_text_and_percent():
    assert sprintf("100%%") == "100%"
    assert sprintf("plain") == "plain"


def test_sprintf_null_string():
    assert sprintf("%s", None) == "(null)"


def test_sprintf_string_and_char():
    assert sprintf("%s-%c-%c", "word", 65, "z") == "word-" + chr(65) + "-z"


@pytest.mark.parametrize("number", [0, 7, -42, 2147483647, -2147483648])
def test_sprintf_decimal(number):
    assert sprintf("%d", number) == str(number)
    assert sprintf("%i", number) == str(number)


def test_sprintf_decimal_wraps_to_int32():
    assert sprintf("%d", 2**31) == str(-(2**31))


def test_sprintf_unsigned_wraps():
    assert sprintf("%u", -1) == str(2**32 - 1)


@pytest.mark.parametrize("number", [0, 255, 48879, 2**32 - 1])
def test_sprintf_hex(number):
    assert sprintf("%x", number) == format(number, "x")
    assert sprintf("%X", number) == format(number, "X")


def test_sprintf_hex_negative():
    assert sprintf("%x", -1) == format(2**32 - 1, "x")


def test_sprintf_pointer():
    assert sprintf("%p", 0) == "0x0"
    assert sprintf("%p", 4096) == "0x" + format(4096, "x")


def test_sprintf_unknown_conversion_dropped():
    assert sprintf("a%qb") == "ab"


def test_sprintf_trailing_percent_dropped():
    assert sprintf("abc%") == "abc"


def test_sprintf_missing_argument():
    with pytest.raises(TypeError):
        sprintf("%d %d", 1)


def test_printf_writes_and_counts():
    stream = io.StringIO()
    count = printf("%s=%d%%", "x", -5, stream=stream)
    assert stream.getvalue() == sprintf("%s=%d%%", "x", -5)
    assert count == len(stream.getvalue())


def test_printf_default_stdout(capsys):
    count = printf("%s", None)
    assert capsys.readouterr().out == "(null)"
    assert count == len("(null)")