import io
import sys

import pytest

from lessonkit import roman
from lessonkit.roman import (
    InvalidSymbolError,
    RomanNumeralError,
    WrongOrderError,
    to_arabic,
    to_roman,
)


def run_main(monkeypatch, capsys, text):
    monkeypatch.setattr(sys, "stdin", io.StringIO(text))
    code = roman.main([])
    return code, capsys.readouterr().out


@pytest.mark.parametrize("number", range(1, 29))
def test_round_trip_small_numbers(number):
    assert to_arabic(to_roman(number)) == number


def test_round_trip_or_order_error_everywhere():
    for number in range(1, 4000):
        numeral = to_roman(number)
        try:
            assert to_arabic(numeral) == number
        except WrongOrderError:
            pass


def test_to_roman_uses_only_roman_symbols():
    for number in (1, 49, 444, 999, 3888, 5000):
        assert set(to_roman(number)) <= set("IVXLCDM")


@pytest.mark.parametrize("number", [0, -1, -100])
def test_to_roman_rejects_non_positive(number):
    with pytest.raises(RomanNumeralError):
        to_roman(number)


@pytest.mark.parametrize(
    "symbol, value",
    list(zip("IVXLCDM", (1, 5, 10, 50, 100, 500, 1000))),
)
def test_single_symbols(symbol, value):
    assert to_arabic(symbol) == value


def test_known_numerals():
    assert to_arabic("MCMXC") == 1990
    assert to_arabic("MMXXIV") == 2024


def test_lower_case_is_accepted():
    assert to_arabic("xiv") == to_arabic("XIV")


@pytest.mark.parametrize("text", ["ABC", "X1", "IVA", "M M"])
def test_invalid_symbols(text):
    with pytest.raises(InvalidSymbolError):
        to_arabic(text)


def test_invalid_symbol_is_roman_error():
    with pytest.raises(RomanNumeralError):
        to_arabic("Q")


@pytest.mark.parametrize("text", ["IIII", "VX", "IL", "IC", "XD", "DM", "VV", "LL", "DD", "XXXX"])
def test_wrong_order(text):
    with pytest.raises(WrongOrderError):
        to_arabic(text)


def test_empty_numeral():
    with pytest.raises(RomanNumeralError):
        to_arabic("")


def test_main_converts_arabic(monkeypatch, capsys):
    code, out = run_main(monkeypatch, capsys, "1\n14\nq\n")
    assert code == 0
    assert f"Your number: {to_roman(14)}" in out
    assert "Bye!" in out


def test_main_converts_roman(monkeypatch, capsys):
    _, out = run_main(monkeypatch, capsys, "2\nxiv\nq\n")
    assert f"Your number: {to_arabic('XIV')}" in out


def test_main_reports_bad_symbols(monkeypatch, capsys):
    _, out = run_main(monkeypatch, capsys, "2\nABC\nq\n")
    assert "Input error!" in out
    assert "Some of your symbols cannot be roman numerals." in out


def test_main_reports_wrong_order(monkeypatch, capsys):
    _, out = run_main(monkeypatch, capsys, "2\nIIII\nq\n")
    assert "Wrong order." in out


def test_main_bad_arabic_input(monkeypatch, capsys):
    _, out = run_main(monkeypatch, capsys, "1\n-3\n1\nabc\nq\n")
    assert out.count("Input error!") == 2


def test_main_unknown_choice(monkeypatch, capsys):
    _, out = run_main(monkeypatch, capsys, "7\nq\n")
    assert "Pay attention!" in out


def test_main_quits_at_end_of_input(monkeypatch, capsys):
    code, out = run_main(monkeypatch, capsys, "")
    assert code == 0
    assert "Bye!" in out