import math

import pytest

from irsol.protocol.utils import from_string, trim, validate_identifier


@pytest.mark.parametrize("identifier", ["x", "_x", "param[0]", "arr[1][2]", "qux_123", "A9"])
def test_validate_identifier_accepts_valid(identifier):
    assert validate_identifier(identifier) == identifier


@pytest.mark.parametrize("identifier", ["", "1abc", "a b", "a[x]", "a[]", "a-b", "a[1", "a?"])
def test_validate_identifier_rejects_invalid(identifier):
    with pytest.raises(ValueError, match="Invalid identifier"):
        validate_identifier(identifier)


@pytest.mark.parametrize("text", ["42", "-7", "+3", "0"])
def test_from_string_int_round_trip(text):
    assert from_string(text, int) == int(text)


def test_from_string_int_accepts_leading_whitespace():
    assert from_string("  12", int) == 12


@pytest.mark.parametrize("text", ["12 ", "1.5", "3e2", "7abc"])
def test_from_string_int_rejects_trailing_characters(text):
    with pytest.raises(ValueError, match="Extra characters after integer"):
        from_string(text, int)


@pytest.mark.parametrize("text", ["", "abc", "-", " "])
def test_from_string_int_rejects_non_numbers(text):
    with pytest.raises(ValueError):
        from_string(text, int)


@pytest.mark.parametrize("text", ["99999999999", "-2147483649", "2147483648"])
def test_from_string_int_out_of_range(text):
    with pytest.raises(OverflowError):
        from_string(text, int)


def test_from_string_int_limits():
    assert from_string("2147483647", int) == 2**31 - 1
    assert from_string("-2147483648", int) == -(2**31)


@pytest.mark.parametrize("text", ["3.14", "5", "-2.5", ".5", "1.", "2E3"])
def test_from_string_float_matches_decimal_literal(text):
    assert from_string(text, float) == float(text)


def test_from_string_float_scientific():
    assert from_string("1e-3", float) == pytest.approx(0.001)


def test_from_string_float_hex():
    assert from_string("0x1p4", float) == 16.0


def test_from_string_float_special_values():
    assert from_string("inf", float) == math.inf
    assert from_string("-Infinity", float) == -math.inf
    assert math.isnan(from_string("nan", float))


@pytest.mark.parametrize("text", ["1.5x", "1_0", "1e", "2.0 ", "1.2.3"])
def test_from_string_float_rejects_trailing_characters(text):
    with pytest.raises(ValueError, match="Extra characters after double"):
        from_string(text, float)


@pytest.mark.parametrize("text", ["", "abc", "'hello'", "{x}"])
def test_from_string_float_rejects_non_numbers(text):
    with pytest.raises(ValueError):
        from_string(text, float)


@pytest.mark.parametrize("text", ["1e999", "-1e999", "1e-999"])
def test_from_string_float_out_of_range(text):
    with pytest.raises(OverflowError):
        from_string(text, float)


def test_from_string_str_returns_input_unchanged():
    assert from_string("  hello world ", str) == "  hello world "


def test_from_string_unsupported_kind():
    with pytest.raises(TypeError):
        from_string("1", list)


def test_trim_removes_surrounding_whitespace():
    assert trim("  a b \t\r\n") == "a b"


@pytest.mark.parametrize("text", ["", "   ", "\t\r\n"])
def test_trim_blank_becomes_empty(text):
    assert trim(text) == ""


def test_trim_keeps_other_whitespace():
    assert trim("\vx\f") == "\vx\f"


@pytest.mark.parametrize("text", ["  foo=1 ", "bar?\n", "\tcmd", "x"])
def test_trim_is_idempotent(text):
    once = trim(text)
    assert trim(once) == once
    assert once == once.strip(" \t\r\n")