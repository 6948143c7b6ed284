# fabric_erp/business_logic/entities/order_summary_entity.py
from dataclasses import dataclass, field
from typing import Any, Dict, Optional
from fabric_erp.constants import OrderStatus, DisplayStatus, InvoiceStatus, InvoiceDisplayStatus
from .financial_breakdown_entity import FinancialBreakdown

@dataclass
class OrderSummary:
    order_number: str
    status: OrderStatus
    display_status: DisplayStatus
    status_text: str
    completion_percentage: int # raw, may exceed 100 on over-delivery
    progress: int # clamped to 0..100 for progress bars
    is_over_fulfilled: bool
    product_summary: str
    pending_summary: str
    quantities_summary: str
    breakdown: FinancialBreakdown = field(default_factory=FinancialBreakdown)

    def as_dict(self) -> Dict[str, Any]:
        return {
            "order_number": self.order_number,
            "status": self.status.value,
            "display_status": self.display_status.value,
            "status_text": self.status_text,
            "completion_percentage": self.completion_percentage,
            "progress": self.progress,
            "is_over_fulfilled": self.is_over_fulfilled,
            "product_summary": self.product_summary,
            "pending_summary": self.pending_summary,
            "quantities_summary": self.quantities_summary,
            "breakdown": self.breakdown.as_dict(),
        }

@dataclass
class InvoiceSummary:
    invoice_number: str
    status: InvoiceStatus
    display_status: InvoiceDisplayStatus
    status_text: str
    item_summary: str
    info: str
    breakdown: FinancialBreakdown = field(default_factory=FinancialBreakdown)
    outstanding_amount: Optional[str] = None

    def as_dict(self) -> Dict[str, Any]:
        return {
            "invoice_number": self.invoice_number,
            "status": self.status.value,
            "display_status": self.display_status.value,
            "status_text": self.status_text,
            "item_summary": self.item_summary,
            "info": self.info,
            "outstanding_amount": self.outstanding_amount,
            "breakdown": self.breakdown.as_dict(),
        }
