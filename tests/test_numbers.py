from __future__ import annotations

from decimal import Decimal

from fabric_erp.utils.numbers import (
    format_currency,
    format_quantity,
    non_negative,
    quantize_money,
    to_decimal,
)


def test_to_decimal_goes_through_str_for_floats():
    assert to_decimal(0.1) == Decimal("0.1")
    assert to_decimal("12.50") == Decimal("12.50")
    assert to_decimal(7) == Decimal("7")


def test_to_decimal_falls_back_to_default():
    assert to_decimal(None) == Decimal("0")
    assert to_decimal("abc") == Decimal("0")
    assert to_decimal(True) == Decimal("0")
    assert to_decimal(float("nan")) == Decimal("0")
    assert to_decimal(float("inf")) == Decimal("0")
    assert to_decimal("abc", default=None) is None


def test_non_negative():
    assert non_negative("-5") == Decimal("0")
    assert non_negative(None) == Decimal("0")
    assert non_negative("3.5") == Decimal("3.5")


def test_quantize_money_rounds_half_up():
    assert quantize_money("2.345") == Decimal("2.35")
    assert quantize_money(Decimal("0.005")) == Decimal("0.01")


def test_format_currency_uses_indian_grouping():
    assert format_currency(1234567.5) == "12,34,567.5"
    assert format_currency(100000) == "1,00,000"
    assert format_currency(1200) == "1,200"
    assert format_currency(123) == "123"
    assert format_currency(0) == "0"


def test_format_currency_trims_fraction_and_keeps_sign():
    assert format_currency(Decimal("99.999")) == "100"
    assert format_currency(-1500.25) == "-1,500.25"
    assert format_currency("abc") == "0"


def test_format_quantity():
    assert format_quantity(Decimal("22.50")) == "22.5"
    assert format_quantity(Decimal("11.00")) == "11"
    assert format_quantity(None) == "0"
    assert format_quantity(100.0) == "100"


def test_formatting_very_large_amounts():
    assert format_currency("1e40").replace(",", "") == "1" + "0" * 40
    assert format_currency("1e27").startswith("1,00,00,")
    assert quantize_money("1e30") == Decimal("1e30")
    assert format_quantity("1e30") == "1" + "0" * 30
