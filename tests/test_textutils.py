import pytest

from corevm.textutils import (
    char_number_kind,
    get_number,
    is_alpha_or_space,
    is_negative,
    is_number_string,
    mini_format,
    to_hex,
)


@pytest.mark.parametrize("char", ["a", "Z", " ", "m"])
def test_alpha_or_space_accepts(char):
    assert is_alpha_or_space(char) is True


@pytest.mark.parametrize("char", ["1", "-", "\x00", "_"])
def test_alpha_or_space_rejects(char):
    assert is_alpha_or_space(char) is False


def test_hex_of_zero():
    assert to_hex(0) == "00"


def test_hex_of_byte():
    assert to_hex(255) == "ff"


def test_hex_round_trip_and_even_length():
    for number in range(0, 5000, 7):
        text = to_hex(number)
        assert len(text) % 2 == 0
        assert int(text, 16) == number


def test_hex_of_negative_is_unsigned_long():
    assert int(to_hex(-1), 16) == 2**64 - 1


def test_format_player_alive():
    text = mini_format("The player %i (%s) is alive.\n", 2, "bob")
    assert text == "The player 2 (bob) is alive.\n"


def test_format_percent():
    assert mini_format("100%%") == "100%"


def test_format_null_pointer():
    assert mini_format("%p", None) == "0x0"


def test_format_hex_matches_to_hex():
    assert mini_format("%X ", 26) == to_hex(26) + " "


def test_format_char():
    assert mini_format("%c", 65) == "A"


def test_format_unknown_flag_prints_nothing():
    assert mini_format("a%qb") == "ab"


def test_format_missing_argument():
    with pytest.raises(TypeError):
        mini_format("%s")


def test_is_negative():
    assert is_negative("-5") is True
    assert is_negative("--5") is False
    assert is_negative("5") is False


def test_char_number_kind():
    assert char_number_kind("-") == "sign"
    assert char_number_kind("7") == "digit"
    assert char_number_kind("x") == "other"


def test_is_number_string():
    assert is_number_string("123") is True
    assert is_number_string("12a") is False
    assert is_number_string("-1") is False
    assert is_number_string("") is True


@pytest.mark.parametrize(
    "text, expected",
    [("42", 42), ("-42", -42), ("--7", 7), ("abc", 0), ("12ab", 12)],
)
def test_get_number(text, expected):
    assert get_number(text) == expected