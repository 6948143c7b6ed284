# fabric_erp/business_logic/financial_calculator.py

from decimal import Decimal
from typing import Any, Iterable, Optional, Tuple
import logging

from fabric_erp.constants import DiscountType, TaxType, DISCOUNT_TYPE_ALIASES
from fabric_erp.business_logic.entities.financial_breakdown_entity import FinancialBreakdown
from fabric_erp.business_logic.entities.line_item_entity import LineItemEntity
from fabric_erp.utils.numbers import ZERO, HUNDRED, to_decimal, non_negative, quantize

logger = logging.getLogger(__name__)

TWO = Decimal("2")
DEFAULT_ROUND_OFF_UNIT = Decimal("1")


def parse_discount_type(value: Any) -> DiscountType:
    if isinstance(value, DiscountType):
        return value
    if not value:
        return DiscountType.NONE
    key = str(value).strip().lower()
    if key in DISCOUNT_TYPE_ALIASES:
        return DISCOUNT_TYPE_ALIASES[key]
    try:
        return DiscountType(key)
    except ValueError:
        logger.warning(f"Unknown discount type {value!r}, no discount applied.")
        return DiscountType.NONE


def parse_tax_type(value: Any) -> TaxType:
    if isinstance(value, TaxType):
        return value
    if not value:
        return TaxType.NO_TAX
    try:
        return TaxType(str(value).strip().lower())
    except ValueError:
        logger.warning(f"Unknown tax type {value!r}, no tax applied.")
        return TaxType.NO_TAX


def calculate_item_total(items: Iterable[LineItemEntity]) -> Decimal:
    return sum((to_decimal(item.total_amount) for item in items or ()), ZERO)


def calculate_discount_amount(item_total: Any,
                              discount_type: Any,
                              discount_value: Any,
                              clamp: bool = True) -> Decimal:
    """
    percentage: item_total x value / 100
    flat_amount: value
    none: 0
    With `clamp` the discount never exceeds the item total, so the taxable
    amount cannot go negative.
    """
    total = to_decimal(item_total)
    value = non_negative(discount_value)
    kind = parse_discount_type(discount_type)

    if kind == DiscountType.PERCENTAGE:
        discount = total * value / HUNDRED
    elif kind == DiscountType.FLAT_AMOUNT:
        discount = value
    else:
        discount = ZERO

    if clamp:
        discount = max(ZERO, min(discount, max(total, ZERO)))
    return discount


def calculate_tax(taxable_amount: Any, tax_type: Any, tax_rate: Any) -> Tuple[Decimal, Decimal, Decimal]:
    """Returns (cgst, sgst, igst). GST is split evenly between CGST and SGST."""
    taxable = to_decimal(taxable_amount)
    rate = non_negative(tax_rate)
    kind = parse_tax_type(tax_type)

    if kind == TaxType.GST:
        half = taxable * (rate / TWO) / HUNDRED
        return half, half, ZERO
    if kind == TaxType.IGST:
        return ZERO, ZERO, taxable * rate / HUNDRED
    return ZERO, ZERO, ZERO


def calculate_round_off(amount: Any, unit: Any = DEFAULT_ROUND_OFF_UNIT) -> Decimal:
    """
    Signed adjustment that brings `amount` to the nearest multiple of `unit`.
    Halves round away from zero, so -100.5 ends at -101.
    """
    value = to_decimal(amount)
    rounding_unit = to_decimal(unit, DEFAULT_ROUND_OFF_UNIT)
    if rounding_unit <= ZERO:
        return ZERO
    rounded = quantize(value / rounding_unit, Decimal("1")) * rounding_unit
    return rounded - value


def calculate_financial_breakdown(item_total: Any,
                                  discount_type: Any = DiscountType.NONE,
                                  discount_value: Any = None,
                                  tax_type: Any = TaxType.NO_TAX,
                                  tax_rate: Any = None,
                                  round_off: Optional[Any] = None,
                                  round_off_unit: Any = DEFAULT_ROUND_OFF_UNIT,
                                  clamp_discount: bool = True) -> FinancialBreakdown:
    """
    Discount first, then tax on the discounted amount, then round-off.

    A persisted `round_off` is used as given. Otherwise the round-off is the
    distance from the unrounded total to the nearest `round_off_unit`.
    No intermediate value is rounded; use FinancialBreakdown.as_dict() for display.
    Never raises: missing rates and values count as 0.
    """
    total = to_decimal(item_total)
    discount_amount = calculate_discount_amount(total, discount_type, discount_value, clamp=clamp_discount)
    taxable_amount = total - discount_amount
    cgst, sgst, igst = calculate_tax(taxable_amount, tax_type, tax_rate)
    total_tax = cgst + sgst + igst
    total_before_round_off = taxable_amount + total_tax

    if round_off is not None:
        round_off_amount = to_decimal(round_off)
    else:
        round_off_amount = calculate_round_off(total_before_round_off, round_off_unit)

    logger.debug(
        f"Breakdown: item_total={total}, discount={discount_amount}, taxable={taxable_amount}, "
        f"tax={total_tax}, round_off={round_off_amount}"
    )
    return FinancialBreakdown(
        item_total=total,
        discount_amount=discount_amount,
        taxable_amount=taxable_amount,
        cgst=cgst,
        sgst=sgst,
        igst=igst,
        total_tax=total_tax,
        total_before_round_off=total_before_round_off,
        round_off=round_off_amount,
        total_amount=total_before_round_off + round_off_amount,
    )
