# fabric_erp/business_logic/fulfillment_calculator.py

from decimal import Decimal
from typing import Iterable, Tuple
import logging

from fabric_erp.business_logic.entities.line_item_entity import LineItemEntity
from fabric_erp.utils.numbers import ZERO, HUNDRED, non_negative, quantize

logger = logging.getLogger(__name__)


def _sum_quantities(items: Iterable[LineItemEntity]) -> Tuple[Decimal, Decimal]:
    total_required = ZERO
    total_fulfilled = ZERO
    for item in items or ():
        total_required += non_negative(getattr(item, "required_quantity", None))
        total_fulfilled += non_negative(getattr(item, "fulfilled_quantity", None))
    return total_required, total_fulfilled


def calculate_completion_percentage(items: Iterable[LineItemEntity]) -> int:
    """
    Fulfilled quantity as a whole-number percentage of required quantity, summed
    over all items. An order with nothing required is 0% complete.
    Over-delivery is not capped, so the result can exceed 100.
    """
    total_required, total_fulfilled = _sum_quantities(items)
    if total_required <= ZERO:
        return 0

    ratio = total_fulfilled * HUNDRED / total_required
    logger.debug(f"Completion: fulfilled {total_fulfilled} of required {total_required}")
    # halves round away from zero
    return int(quantize(ratio, Decimal("1")))


def clamp_progress(percentage: int) -> int:
    """Progress-bar value: the completion percentage limited to 0..100."""
    return max(0, min(100, int(percentage)))


def is_over_fulfilled(items: Iterable[LineItemEntity]) -> bool:
    total_required, total_fulfilled = _sum_quantities(items)
    return total_fulfilled > total_required
