# fabric_erp/constants.py

from enum import Enum

# General
DATE_FORMAT = "%Y-%m-%d"
DISPLAY_DATE_FORMAT = "%d %b %Y"


class StockType(Enum):
    ROLL = "roll"
    BATCH = "batch"
    PIECE = "piece"


class MeasuringUnit(Enum):
    METRE = "metre"
    YARD = "yard"
    KILOGRAM = "kilogram"
    UNIT = "unit"
    PIECE = "piece"  # never stored on a product, only derived from StockType.PIECE


class OrderStatus(Enum):
    """Persisted lifecycle of purchase and sales orders."""
    APPROVAL_PENDING = "approval_pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class DisplayStatus(Enum):
    APPROVAL_PENDING = "approval_pending"
    IN_PROGRESS = "in_progress"
    OVERDUE = "overdue"  # derived, never persisted
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class InvoiceType(Enum):
    SALES = "sales"
    PURCHASE = "purchase"


class InvoiceStatus(Enum):
    OPEN = "open"
    PARTIALLY_PAID = "partially_paid"
    SETTLED = "settled"
    CANCELLED = "cancelled"


class InvoiceDisplayStatus(Enum):
    OPEN = "open"
    PARTIALLY_PAID = "partially_paid"
    OVERDUE = "overdue"
    SETTLED = "settled"
    CANCELLED = "cancelled"


class DiscountType(Enum):
    NONE = "none"
    PERCENTAGE = "percentage"
    FLAT_AMOUNT = "flat_amount"


class TaxType(Enum):
    NO_TAX = "no_tax"
    GST = "gst"    # intra-state, split into CGST + SGST
    IGST = "igst"  # inter-state


class PaymentMode(Enum):
    CASH = "cash"
    CHEQUE = "cheque"
    DEMAND_DRAFT = "demand_draft"
    NEFT = "neft"
    RTGS = "rtgs"
    IMPS = "imps"
    UPI = "upi"
    CARD = "card"


# Aliases accepted when reading discount types from loosely typed sources
DISCOUNT_TYPE_ALIASES = {
    "fixed": DiscountType.FLAT_AMOUNT,
    "flat": DiscountType.FLAT_AMOUNT,
}

ORDER_STATUS_LABELS = {
    DisplayStatus.APPROVAL_PENDING: "Approval Pending",
    DisplayStatus.IN_PROGRESS: "In Progress",
    DisplayStatus.OVERDUE: "Overdue",
    DisplayStatus.COMPLETED: "Completed",
    DisplayStatus.CANCELLED: "Cancelled",
}

INVOICE_STATUS_LABELS = {
    InvoiceDisplayStatus.OPEN: "Open",
    InvoiceDisplayStatus.PARTIALLY_PAID: "Partially Paid",
    InvoiceDisplayStatus.OVERDUE: "Overdue",
    InvoiceDisplayStatus.SETTLED: "Settled",
    InvoiceDisplayStatus.CANCELLED: "Cancelled",
}

# Order statuses that never change the displayed state again
TERMINAL_ORDER_STATUSES = (OrderStatus.COMPLETED, OrderStatus.CANCELLED)
