# fabric_erp/business_logic/entities/order_entity.py
from dataclasses import dataclass, field
from typing import Optional, List
from datetime import date
from decimal import Decimal
from fabric_erp.constants import OrderStatus, DiscountType, TaxType
from .line_item_entity import LineItemEntity

@dataclass
class OrderEntity:
    """
    Generic order-like document: the common shape purchase orders and sales
    orders are mapped into before status, progress and totals are computed.
    """
    order_number: str
    status: OrderStatus
    due_date: Optional[date] = field(default=None)
    items: List[LineItemEntity] = field(default_factory=list)
    discount_type: DiscountType = field(default=DiscountType.NONE)
    discount_value: Decimal = field(default_factory=lambda: Decimal("0"))
    tax_type: TaxType = field(default=TaxType.NO_TAX)
    tax_rate: Decimal = field(default_factory=lambda: Decimal("0"))
    round_off: Optional[Decimal] = field(default=None) # persisted round-off, if the source stores one

    @property
    def item_total(self) -> Decimal:
        return sum((item.total_amount for item in self.items), Decimal("0"))
