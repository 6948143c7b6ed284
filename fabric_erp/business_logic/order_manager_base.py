# fabric_erp/business_logic/order_manager_base.py

from typing import Any, Callable, Iterable, List, Optional, Sequence
import logging

from fabric_erp.config import settings as default_settings, Settings
from fabric_erp.business_logic.entities.line_item_entity import LineItemEntity
from fabric_erp.business_logic.entities.order_entity import OrderEntity
from fabric_erp.business_logic.entities.order_summary_entity import OrderSummary
from fabric_erp.business_logic.display_status_resolver import get_order_display_status
from fabric_erp.business_logic.fulfillment_calculator import (
    calculate_completion_percentage, clamp_progress, is_over_fulfilled,
)
from fabric_erp.business_logic.financial_calculator import calculate_financial_breakdown
from fabric_erp.utils.date_converter import Clock, system_clock
from fabric_erp.utils.measuring_units import (
    aggregate_quantities_by_unit, format_quantities_by_unit, format_quantity_with_unit,
    get_measuring_unit_abbreviation,
)

logger = logging.getLogger(__name__)


def get_product_summary(items: Sequence[LineItemEntity],
                        quantity: Callable[[LineItemEntity], Any] = lambda item: item.required_quantity) -> str:
    """
    Example: Designer Silk (22 mtr), Cotton Denim (11 units)
    """
    if not items:
        return "No products"
    return ", ".join(
        f"{item.product_name or 'Unknown product'} ({format_quantity_with_unit(quantity(item), item.unit)})"
        for item in items
    )


def get_quantities_summary(items: Iterable[LineItemEntity]) -> str:
    """Required quantity per unit: "100.00 mtr + 20.00 pc"."""
    totals = aggregate_quantities_by_unit(
        (get_measuring_unit_abbreviation(item.unit), item.required_quantity) for item in items
    )
    return format_quantities_by_unit(totals)


class BaseOrderManager:
    """
    Turns a stored order (purchase or sales) into the generic OrderEntity and
    computes everything the order screens and documents show for it.
    Subclasses only provide the adapter `to_order`.
    """

    def __init__(self, clock: Optional[Clock] = None, settings: Optional[Settings] = None):
        self.clock: Clock = clock or system_clock
        self.settings = settings or default_settings

    def to_order(self, entity: Any) -> OrderEntity:
        raise NotImplementedError

    def summarize(self, entity: Any) -> OrderSummary:
        order = self.to_order(entity)
        today = self.clock()
        display_status, status_text = get_order_display_status(
            order.status, order.due_date, today, self.settings.DUE_SOON_WINDOW_DAYS
        )
        completion = calculate_completion_percentage(order.items)
        breakdown = calculate_financial_breakdown(
            order.item_total,
            order.discount_type,
            order.discount_value,
            order.tax_type,
            order.tax_rate,
            round_off=order.round_off,
            round_off_unit=self.settings.ROUND_OFF_UNIT,
            clamp_discount=self.settings.CLAMP_FIXED_DISCOUNT,
        )
        pending_items = [item for item in order.items if item.pending_quantity > 0]
        return OrderSummary(
            order_number=order.order_number,
            status=order.status,
            display_status=display_status,
            status_text=status_text,
            completion_percentage=completion,
            progress=clamp_progress(completion),
            is_over_fulfilled=is_over_fulfilled(order.items),
            product_summary=get_product_summary(order.items),
            pending_summary=get_product_summary(pending_items, lambda item: item.pending_quantity),
            quantities_summary=get_quantities_summary(order.items),
            breakdown=breakdown,
        )

    def summarize_all(self, entities: Iterable[Any]) -> List[OrderSummary]:
        return [self.summarize(entity) for entity in entities]
