# fabric_erp/utils/numbers.py

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP, localcontext
from typing import Any
import logging

logger = logging.getLogger(__name__)

ZERO = Decimal("0")
HUNDRED = Decimal("100")
MONEY_QUANT = Decimal("0.01")


def to_decimal(value: Any, default: Decimal = ZERO) -> Decimal:
    """Coerce a database/UI value to Decimal, falling back to `default` instead of raising."""
    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, Decimal):
        return value if value.is_finite() else default
    try:
        # float goes through str() so 0.1 stays 0.1
        result = Decimal(str(value).strip())
    except (InvalidOperation, ValueError, TypeError):
        logger.warning(f"Could not convert {value!r} to Decimal. Using {default}.")
        return default
    if not result.is_finite():
        logger.warning(f"Non-finite number {value!r} replaced with {default}.")
        return default
    return result


def non_negative(value: Any) -> Decimal:
    return max(to_decimal(value), ZERO)


def quantize(value: Any, exponent: Decimal, rounding: str = ROUND_HALF_UP) -> Decimal:
    """
    Decimal.quantize that works for any finite magnitude. The default context
    only holds 28 digits, so very large amounts would otherwise raise InvalidOperation.
    """
    number = to_decimal(value)
    digits_needed = max(number.adjusted(), 0) - exponent.as_tuple().exponent + 2
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, digits_needed)
        return number.quantize(exponent, rounding=rounding)


def quantize_money(value: Any) -> Decimal:
    return quantize(value, MONEY_QUANT)


def _group_indian(integer_digits: str) -> str:
    # 1234567 -> 12,34,567
    if len(integer_digits) <= 3:
        return integer_digits
    head, tail = integer_digits[:-3], integer_digits[-3:]
    groups = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    return ",".join(groups + [tail])


def format_currency(value: Any) -> str:
    """
    Formats an amount with Indian digit grouping and at most two decimals.
    Example: 1234567.5 -> "12,34,567.5"
    """
    amount = quantize_money(value)
    sign = "-" if amount < 0 else ""
    integer_part, _, fraction = f"{amount.copy_abs():.2f}".partition(".")
    fraction = fraction.rstrip("0")
    formatted = _group_indian(integer_part)
    return f"{sign}{formatted}.{fraction}" if fraction else f"{sign}{formatted}"


def format_quantity(value: Any) -> str:
    """Up to two decimals, trailing zeros trimmed: 22.50 -> "22.5", 11.00 -> "11"."""
    quantity = quantize_money(value)
    text = f"{quantity:.2f}".rstrip("0").rstrip(".")
    return "0" if text in ("", "-0") else text
