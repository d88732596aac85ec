import pytest

from fractview.ctext import (
    atoi,
    isalnum,
    isalpha,
    isascii,
    isdigit,
    isprint,
    itoa,
    tolower,
    toupper,
)


@pytest.mark.parametrize("n", [0, 1, -1, 42, -42, 2147483647, -2147483648, 10**12])
def test_itoa_atoi_round_trip(n):
    assert atoi(itoa(n)) == n


def test_itoa_int_min():
    assert itoa(-2147483648) == "-2147483648"


def test_itoa_rejects_float():
    with pytest.raises(TypeError):
        itoa(1.5)


def test_atoi_skips_leading_whitespace():
    assert atoi(" \t\n\v\f\r123") == atoi("123")


def test_atoi_stops_at_non_digit():
    assert atoi("77abc9") == atoi("77")


def test_atoi_plus_sign():
    assert atoi("+15") == atoi("15")


def test_atoi_minus_sign():
    assert atoi("-15") == -atoi("15")


@pytest.mark.parametrize("text", ["", "abc", "--5", "+-5", "-", "   "])
def test_atoi_no_digits_is_zero(text):
    assert atoi(text) == 0


def test_atoi_ignores_non_ascii_digits():
    assert atoi("\u0663") == 0


@pytest.mark.parametrize("c", ["a", "z", "A", "Z", "m"])
def test_isalpha_letters(c):
    assert isalpha(c) is True
    assert isalnum(c) is True
    assert isdigit(c) is False


@pytest.mark.parametrize("c", ["0", "9", "5"])
def test_isdigit_digits(c):
    assert isdigit(c) is True
    assert isalnum(c) is True
    assert isalpha(c) is False


@pytest.mark.parametrize("c", ["@", "[", "`", "{", "/", ":", " "])
def test_boundaries_not_alnum(c):
    assert isalnum(c) is False


def test_classifiers_accept_ints():
    assert isalpha(ord("q")) is True
    assert isdigit(ord("q")) is False


def test_isascii_range():
    assert isascii(0) is True
    assert isascii(127) is True
    assert isascii(128) is False
    assert isascii(-1) is False


def test_isprint_range():
    assert isprint(" ") is True
    assert isprint("~") is True
    assert isprint(31) is False
    assert isprint(127) is False


def test_classifier_rejects_long_string():
    with pytest.raises(ValueError):
        isalpha("ab")


def test_toupper_and_tolower_chars():
    assert toupper("a") == "A"
    assert tolower("Z") == "z"
    assert toupper("5") == "5"
    assert tolower("!") == "!"


def test_case_round_trip_over_ascii():
    for code in range(128):
        c = chr(code)
        if isalpha(c):
            assert tolower(toupper(c)) == c.lower()
        else:
            assert toupper(c) == c
            assert tolower(c) == c


def test_case_mapping_keeps_int_type():
    assert toupper(ord("b")) == ord("B")
    assert tolower(ord("B")) == ord("b")
    assert toupper(200) == 200


def test_case_mapping_ascii_only():
    assert toupper("é") == "é"