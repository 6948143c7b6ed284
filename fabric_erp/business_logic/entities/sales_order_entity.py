# fabric_erp/business_logic/entities/sales_order_entity.py
from dataclasses import dataclass, field
from typing import Optional, List
from datetime import date
from decimal import Decimal
from .base_entity import BaseEntity
from fabric_erp.constants import OrderStatus, DiscountType, TaxType
from .sales_order_item_entity import SalesOrderItemEntity

@dataclass
class SalesOrderEntity(BaseEntity):
    sequence_number: int
    customer_id: int
    order_date: date
    status: OrderStatus

    expected_delivery_date: Optional[date] = field(default=None)
    discount_type: DiscountType = field(default=DiscountType.NONE)
    discount_value: Optional[Decimal] = field(default=None)
    tax_type: Optional[TaxType] = field(default=None)
    gst_rate: Optional[Decimal] = field(default=None)
    advance_amount: Optional[Decimal] = field(default=None)
    total_amount: Optional[Decimal] = field(default=None)
    notes: Optional[str] = field(default=None)

    items: List[SalesOrderItemEntity] = field(default_factory=list)

    @property
    def order_number(self) -> str:
        return f"SO-{self.sequence_number}"
