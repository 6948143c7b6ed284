# fabric_erp/business_logic/entities/invoice_entity.py
from dataclasses import dataclass, field
from typing import Optional, List
from datetime import date
from decimal import Decimal
from .base_entity import BaseEntity
from fabric_erp.constants import InvoiceType, InvoiceStatus, DiscountType, TaxType
from .invoice_item_entity import InvoiceItemEntity

@dataclass
class InvoiceEntity(BaseEntity):
    invoice_number: str
    invoice_type: InvoiceType
    invoice_date: date
    party_ledger_id: int

    status: InvoiceStatus = field(default=InvoiceStatus.OPEN)
    due_date: Optional[date] = field(default=None)
    discount_type: DiscountType = field(default=DiscountType.NONE)
    discount_value: Optional[Decimal] = field(default=None)
    tax_type: Optional[TaxType] = field(default=None)
    gst_rate: Optional[Decimal] = field(default=None)
    round_off_amount: Optional[Decimal] = field(default=None) # written once by the database
    total_amount: Optional[Decimal] = field(default=None)
    outstanding_amount: Optional[Decimal] = field(default=None)
    notes: Optional[str] = field(default=None)
    items: List[InvoiceItemEntity] = field(default_factory=list)

    @property
    def item_total(self) -> Decimal:
        return sum((item.amount for item in self.items), Decimal("0"))
