# fabric_erp/utils/measuring_units.py

from decimal import Decimal
from typing import Any, Dict, Iterable, Optional, Tuple, Union
import logging

from fabric_erp.constants import MeasuringUnit, StockType
from fabric_erp.utils.numbers import ZERO, format_quantity, to_decimal

logger = logging.getLogger(__name__)

MEASURING_UNIT_ABBREVIATIONS: Dict[MeasuringUnit, str] = {
    MeasuringUnit.METRE: "mtr",
    MeasuringUnit.YARD: "yd",
    MeasuringUnit.KILOGRAM: "kg",
    MeasuringUnit.UNIT: "unit",
    MeasuringUnit.PIECE: "pc",
}

# Only counted units take a plural; physical quantities (mtr, yd, kg) never do
PLURAL_ABBREVIATIONS: Dict[str, str] = {
    "pc": "pcs",
    "unit": "units",
}

DEFAULT_UNIT = MeasuringUnit.PIECE


def parse_stock_type(value: Any) -> Optional[StockType]:
    if isinstance(value, StockType):
        return value
    if not value:
        return None
    try:
        return StockType(str(value).strip().lower())
    except ValueError:
        logger.warning(f"Unknown stock type {value!r}.")
        return None


def parse_measuring_unit(value: Any) -> Optional[MeasuringUnit]:
    if isinstance(value, MeasuringUnit):
        return value
    if not value:
        return None
    try:
        return MeasuringUnit(str(value).strip().lower())
    except ValueError:
        logger.warning(f"Unknown measuring unit {value!r}.")
        return None


def get_canonical_unit(stock_type: Any, measuring_unit: Any) -> MeasuringUnit:
    """
    The unit quantities of a product are counted in.
    Piece stock is always counted in pieces and batch stock in generic units,
    whatever unit happens to be stored on the product.
    """
    stock = parse_stock_type(stock_type)
    if stock == StockType.PIECE:
        return MeasuringUnit.PIECE
    if stock == StockType.BATCH:
        return MeasuringUnit.UNIT
    return parse_measuring_unit(measuring_unit) or DEFAULT_UNIT


def get_measuring_unit_abbreviation(unit: Any) -> str:
    parsed = parse_measuring_unit(unit)
    if parsed is None:
        return MEASURING_UNIT_ABBREVIATIONS[DEFAULT_UNIT]
    return MEASURING_UNIT_ABBREVIATIONS[parsed]


def pluralize_measuring_unit_abbreviation(quantity: Any, abbreviation: str) -> str:
    if to_decimal(quantity) == 1:
        return abbreviation
    return PLURAL_ABBREVIATIONS.get(abbreviation, abbreviation)


def format_quantity_with_unit(quantity: Any, unit: Any) -> str:
    """22.5 metre -> "22.5 mtr", 3 piece -> "3 pcs"."""
    abbreviation = get_measuring_unit_abbreviation(unit)
    return f"{format_quantity(quantity)} {pluralize_measuring_unit_abbreviation(quantity, abbreviation)}"


QuantityByUnit = Union[Tuple[str, Any], Any]


def aggregate_quantities_by_unit(items: Iterable[QuantityByUnit]) -> Dict[str, Decimal]:
    """
    Sums quantities per unit abbreviation, keeping first-seen order.
    Items are (unit, quantity) pairs or objects with `unit` and `quantity` attributes.
    """
    totals: Dict[str, Decimal] = {}
    for item in items:
        if isinstance(item, tuple):
            unit, quantity = item
        else:
            unit, quantity = item.unit, item.quantity
        totals[unit] = totals.get(unit, ZERO) + to_decimal(quantity)
    return totals


def format_quantities_by_unit(totals: Dict[str, Decimal], hide_zeros: bool = True) -> str:
    """{"mtr": 100, "kg": 50} -> "100.00 mtr + 50.00 kg"; "0" when nothing is left to show."""
    entries = [
        f"{to_decimal(quantity):.2f} {unit}"
        for unit, quantity in totals.items()
        if not hide_zeros or to_decimal(quantity) > 0
    ]
    return " + ".join(entries) if entries else "0"
