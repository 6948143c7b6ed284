# fabric_erp/business_logic/entities/line_item_entity.py
from dataclasses import dataclass, field
from typing import Optional
from decimal import Decimal
from fabric_erp.constants import MeasuringUnit
from fabric_erp.utils.numbers import non_negative, to_decimal

@dataclass
class LineItemEntity:
    """One product row of an order-like document, in the shape the calculators understand."""
    required_quantity: Decimal = field(default_factory=lambda: Decimal("0"))
    fulfilled_quantity: Optional[Decimal] = field(default=None) # received or dispatched so far
    unit_rate: Decimal = field(default_factory=lambda: Decimal("0"))
    line_total: Optional[Decimal] = field(default=None) # precomputed by the database when present

    # --- display-only fields ---
    product_name: Optional[str] = field(default=None, compare=False)
    unit: MeasuringUnit = field(default=MeasuringUnit.PIECE, compare=False)

    @property
    def total_amount(self) -> Decimal:
        if self.line_total is not None:
            return to_decimal(self.line_total)
        return non_negative(self.required_quantity) * non_negative(self.unit_rate)

    @property
    def pending_quantity(self) -> Decimal:
        pending = non_negative(self.required_quantity) - non_negative(self.fulfilled_quantity)
        return max(pending, Decimal("0"))
