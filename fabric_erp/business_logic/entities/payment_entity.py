# fabric_erp/business_logic/entities/payment_entity.py
from dataclasses import dataclass, field
from typing import Optional
from datetime import date
from decimal import Decimal
from .base_entity import BaseEntity
from fabric_erp.constants import PaymentMode

@dataclass
class PaymentEntity(BaseEntity):
    payment_number: str
    payment_date: date
    party_ledger_id: int
    payment_mode: PaymentMode
    total_amount: Decimal = field(default_factory=lambda: Decimal("0"))
    tds_applicable: bool = field(default=False)
    tds_rate: Optional[Decimal] = field(default=None)
    is_cancelled: bool = field(default=False)
    notes: Optional[str] = field(default=None)
