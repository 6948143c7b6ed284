# fabric_erp/business_logic/entities/purchase_order_entity.py
from dataclasses import dataclass, field
from typing import Optional, List
from datetime import date
from decimal import Decimal
from .base_entity import BaseEntity
from fabric_erp.constants import OrderStatus, DiscountType, TaxType
from .purchase_order_item_entity import PurchaseOrderItemEntity

@dataclass
class PurchaseOrderEntity(BaseEntity):
    sequence_number: int
    supplier_id: int # Foreign Key to the supplier partner
    order_date: date
    status: OrderStatus

    delivery_due_date: Optional[date] = field(default=None)
    discount_type: DiscountType = field(default=DiscountType.NONE)
    discount_value: Optional[Decimal] = field(default=None)
    tax_type: Optional[TaxType] = field(default=None)
    gst_rate: Optional[Decimal] = field(default=None)
    advance_amount: Optional[Decimal] = field(default=None)
    total_amount: Optional[Decimal] = field(default=None) # as stored, may lag behind the items
    notes: Optional[str] = field(default=None)

    items: List[PurchaseOrderItemEntity] = field(default_factory=list) # filled by the manager, not a DB column

    @property
    def order_number(self) -> str:
        return f"PO-{self.sequence_number}"
