from __future__ import annotations

from decimal import Decimal

from fabric_erp.constants import MeasuringUnit, StockType
from fabric_erp.utils.measuring_units import (
    aggregate_quantities_by_unit,
    format_quantities_by_unit,
    format_quantity_with_unit,
    get_canonical_unit,
    get_measuring_unit_abbreviation,
    pluralize_measuring_unit_abbreviation,
)


def test_piece_stock_is_always_counted_in_pieces():
    assert get_canonical_unit(StockType.PIECE, MeasuringUnit.METRE) == MeasuringUnit.PIECE
    assert get_canonical_unit("piece", None) == MeasuringUnit.PIECE


def test_batch_stock_is_always_counted_in_units():
    assert get_canonical_unit("batch", "kilogram") == MeasuringUnit.UNIT


def test_roll_stock_keeps_stored_unit():
    assert get_canonical_unit("roll", "yard") == MeasuringUnit.YARD
    assert get_canonical_unit(StockType.ROLL, MeasuringUnit.METRE) == MeasuringUnit.METRE


def test_missing_or_unknown_unit_falls_back_to_piece():
    assert get_canonical_unit("roll", None) == MeasuringUnit.PIECE
    assert get_canonical_unit(None, "furlong") == MeasuringUnit.PIECE
    assert get_canonical_unit("bolt", None) == MeasuringUnit.PIECE


def test_abbreviations():
    assert get_measuring_unit_abbreviation(MeasuringUnit.METRE) == "mtr"
    assert get_measuring_unit_abbreviation("yard") == "yd"
    assert get_measuring_unit_abbreviation("kilogram") == "kg"
    assert get_measuring_unit_abbreviation(MeasuringUnit.UNIT) == "unit"
    assert get_measuring_unit_abbreviation(MeasuringUnit.PIECE) == "pc"
    assert get_measuring_unit_abbreviation(None) == "pc"


def test_only_count_units_take_a_plural():
    plural_changes = set()
    for unit in MeasuringUnit:
        abbreviation = get_measuring_unit_abbreviation(unit)
        assert abbreviation
        if pluralize_measuring_unit_abbreviation(2, abbreviation) != pluralize_measuring_unit_abbreviation(1, abbreviation):
            plural_changes.add(unit)
    assert plural_changes == {MeasuringUnit.PIECE, MeasuringUnit.UNIT}


def test_pluralize_keeps_singular_for_exactly_one():
    assert pluralize_measuring_unit_abbreviation(Decimal("1.00"), "pc") == "pc"
    assert pluralize_measuring_unit_abbreviation(0, "pc") == "pcs"
    assert pluralize_measuring_unit_abbreviation(Decimal("0.5"), "unit") == "units"
    assert pluralize_measuring_unit_abbreviation(5, "mtr") == "mtr"


def test_format_quantity_with_unit():
    assert format_quantity_with_unit(Decimal("22.50"), "metre") == "22.5 mtr"
    assert format_quantity_with_unit(3, MeasuringUnit.PIECE) == "3 pcs"
    assert format_quantity_with_unit(1, MeasuringUnit.PIECE) == "1 pc"
    assert format_quantity_with_unit(11, MeasuringUnit.UNIT) == "11 units"


def test_aggregate_quantities_keeps_first_seen_order():
    totals = aggregate_quantities_by_unit([("mtr", 100), ("kg", "50"), ("mtr", Decimal("20.5"))])
    assert list(totals) == ["mtr", "kg"]
    assert totals["mtr"] == Decimal("120.5")
    assert totals["kg"] == Decimal("50")


def test_aggregate_accepts_objects_with_unit_and_quantity():
    class _Row:
        def __init__(self, unit, quantity):
            self.unit = unit
            self.quantity = quantity

    totals = aggregate_quantities_by_unit([_Row("yd", 2), _Row("yd", 3)])
    assert totals == {"yd": Decimal("5")}


def test_format_quantities_by_unit():
    assert format_quantities_by_unit({"mtr": Decimal("100"), "kg": Decimal("50")}) == "100.00 mtr + 50.00 kg"
    assert format_quantities_by_unit({}) == "0"


def test_format_quantities_by_unit_hides_zeros_unless_asked():
    totals = {"mtr": Decimal("0"), "kg": Decimal("2.5")}
    assert format_quantities_by_unit(totals) == "2.50 kg"
    assert format_quantities_by_unit(totals, hide_zeros=False) == "0.00 mtr + 2.50 kg"
    assert format_quantities_by_unit({"mtr": Decimal("0")}) == "0"
