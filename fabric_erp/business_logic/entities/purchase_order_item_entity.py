# fabric_erp/business_logic/entities/purchase_order_item_entity.py
from dataclasses import dataclass, field
from typing import Optional
from decimal import Decimal
from .base_entity import BaseEntity
from fabric_erp.constants import StockType, MeasuringUnit

@dataclass
class PurchaseOrderItemEntity(BaseEntity):
    purchase_order_id: int # Foreign Key to PurchaseOrderEntity
    product_id: int # Foreign Key to ProductEntity
    required_quantity: Decimal
    unit_rate: Decimal # Expected price
    received_quantity: Optional[Decimal] = field(default=None)
    line_total: Optional[Decimal] = field(default=None)
    notes: Optional[str] = field(default=None)

    # --- joined from products, display only ---
    product_name: Optional[str] = field(default=None, compare=False, repr=False)
    product_stock_type: Optional[StockType] = field(default=None, compare=False, repr=False)
    product_measuring_unit: Optional[MeasuringUnit] = field(default=None, compare=False, repr=False)
