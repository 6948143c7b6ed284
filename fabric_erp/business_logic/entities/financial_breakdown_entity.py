# fabric_erp/business_logic/entities/financial_breakdown_entity.py
from dataclasses import dataclass, field, fields
from typing import Dict
from decimal import Decimal
from fabric_erp.utils.numbers import quantize_money

def _zero() -> Decimal:
    return Decimal("0")

@dataclass(frozen=True)
class FinancialBreakdown:
    """
    Discount and tax adjusted totals of a document.
    Amounts keep full precision; round only when presenting them.
    total_amount == taxable_amount + total_tax + round_off
    """
    item_total: Decimal = field(default_factory=_zero)
    discount_amount: Decimal = field(default_factory=_zero)
    taxable_amount: Decimal = field(default_factory=_zero)
    cgst: Decimal = field(default_factory=_zero)
    sgst: Decimal = field(default_factory=_zero)
    igst: Decimal = field(default_factory=_zero)
    total_tax: Decimal = field(default_factory=_zero)
    total_before_round_off: Decimal = field(default_factory=_zero)
    round_off: Decimal = field(default_factory=_zero)
    total_amount: Decimal = field(default_factory=_zero)

    def as_dict(self) -> Dict[str, str]:
        """Plain strings with two decimals, safe to hand to the PDF renderer or json.dumps."""
        return {f.name: f"{quantize_money(getattr(self, f.name)):.2f}" for f in fields(self)}
