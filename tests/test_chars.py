import string

import pytest

from pipex.chars import (
    isalnum,
    isalpha,
    isascii,
    isdigit,
    isprint,
    tolower,
    toupper,
)

ASCII = range(128)


@pytest.mark.parametrize("code", ASCII)
def test_isalpha_matches_ascii_letters(code):
    assert isalpha(code) == (chr(code) in string.ascii_letters)


@pytest.mark.parametrize("code", ASCII)
def test_isdigit_matches_ascii_digits(code):
    assert isdigit(code) == (chr(code) in string.digits)


@pytest.mark.parametrize("code", ASCII)
def test_isalnum_is_letter_or_digit(code):
    assert isalnum(code) == (isalpha(code) or isdigit(code))


def test_isascii_bounds():
    assert isascii(0) is True
    assert isascii(127) is True
    assert isascii(128) is False
    assert isascii(-1) is False


def test_isprint_bounds():
    assert isprint(" ") is True
    assert isprint("~") is True
    assert isprint(31) is False
    assert isprint(127) is False


@pytest.mark.parametrize("code", [0xE9, 0x3B1, 0x663])
def test_non_ascii_is_not_classified(code):
    assert isalpha(code) is False
    assert isdigit(code) is False
    assert isprint(code) is False


def test_accepts_strings_and_ints_alike():
    for ch in string.printable:
        assert isalpha(ch) == isalpha(ord(ch))
        assert isprint(ch) == isprint(ord(ch))


@pytest.mark.parametrize("ch", string.ascii_lowercase)
def test_case_round_trip_for_letters(ch):
    upper = toupper(ch)
    assert upper == ch.upper()
    assert tolower(upper) == ch


def test_case_conversion_keeps_int_type():
    assert toupper(ord("q")) == ord("Q")
    assert tolower(ord("Q")) == ord("q")


@pytest.mark.parametrize("ch", string.digits + string.punctuation + " ")
def test_case_conversion_leaves_non_letters(ch):
    assert toupper(ch) == ch
    assert tolower(ch) == ch


def test_case_conversion_leaves_non_ascii_letters():
    assert toupper("é") == "é"
    assert tolower("É") == "É"


@pytest.mark.parametrize("bad", ["", "ab"])
def test_rejects_multi_character_strings(bad):
    with pytest.raises(ValueError):
        isalpha(bad)


def test_rejects_other_types():
    with pytest.raises(TypeError):
        isdigit(1.5)