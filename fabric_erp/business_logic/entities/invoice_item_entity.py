# fabric_erp/business_logic/entities/invoice_item_entity.py
from dataclasses import dataclass, field
from typing import Optional
from decimal import Decimal
from .base_entity import BaseEntity
from fabric_erp.constants import StockType, MeasuringUnit
from fabric_erp.utils.numbers import non_negative

@dataclass
class InvoiceItemEntity(BaseEntity):
    # --- stored columns ---
    invoice_id: Optional[int] = None
    product_id: Optional[int] = None
    quantity: Decimal = field(default_factory=lambda: Decimal("0"))
    rate: Decimal = field(default_factory=lambda: Decimal("0"))

    # --- product snapshot taken when the invoice was issued ---
    product_name: Optional[str] = field(default=None, compare=False, repr=False)
    product_stock_type: Optional[StockType] = field(default=None, compare=False, repr=False)
    product_measuring_unit: Optional[MeasuringUnit] = field(default=None, compare=False, repr=False)

    @property
    def amount(self) -> Decimal:
        """quantity x rate for this row."""
        return non_negative(self.quantity) * non_negative(self.rate)
