# fabric_erp/business_logic/display_status_resolver.py

from datetime import date
from typing import Any, Optional, Tuple
import logging

from fabric_erp.constants import (
    OrderStatus, DisplayStatus, InvoiceStatus, InvoiceDisplayStatus,
    ORDER_STATUS_LABELS, INVOICE_STATUS_LABELS,
)
from fabric_erp.utils.date_converter import to_date, format_due_time
from fabric_erp.utils.numbers import to_decimal

logger = logging.getLogger(__name__)

DEFAULT_DUE_SOON_WINDOW_DAYS = 14


def parse_order_status(value: Any) -> OrderStatus:
    """Unknown or missing statuses are read as in_progress."""
    if isinstance(value, OrderStatus):
        return value
    try:
        return OrderStatus(str(value).strip().lower())
    except ValueError:
        logger.warning(f"Unknown order status {value!r}, treating it as in_progress.")
        return OrderStatus.IN_PROGRESS


def resolve_display_status(status: Any, due_date: Any, today: date) -> DisplayStatus:
    """
    Status shown to users for a persisted order status.

    completed, cancelled and approval_pending are shown as they are.
    in_progress becomes the derived `overdue` once the due date (date only) is
    before `today`; a missing or unparseable due date never makes an order overdue.
    Callers must pass the current date on every read: overdue is never stored.
    """
    order_status = parse_order_status(status)
    if order_status == OrderStatus.COMPLETED:
        return DisplayStatus.COMPLETED
    if order_status == OrderStatus.CANCELLED:
        return DisplayStatus.CANCELLED
    if order_status == OrderStatus.APPROVAL_PENDING:
        return DisplayStatus.APPROVAL_PENDING

    due = to_date(due_date)
    if due is not None and due < today:
        return DisplayStatus.OVERDUE
    return DisplayStatus.IN_PROGRESS


def get_order_display_status(status: Any,
                             due_date: Any,
                             today: date,
                             window_days: int = DEFAULT_DUE_SOON_WINDOW_DAYS
                             ) -> Tuple[DisplayStatus, str]:
    """
    Display status plus badge text, e.g. (IN_PROGRESS, "Due in 3 days").
    Open orders due further away than `window_days` read "In Progress".
    """
    display_status = resolve_display_status(status, due_date, today)
    if display_status in (DisplayStatus.IN_PROGRESS, DisplayStatus.OVERDUE):
        due_text = format_due_time(due_date, today, window_days)
        if due_text:
            return display_status, due_text
    return display_status, ORDER_STATUS_LABELS[display_status]


def parse_invoice_status(value: Any) -> InvoiceStatus:
    if isinstance(value, InvoiceStatus):
        return value
    try:
        return InvoiceStatus(str(value).strip().lower())
    except ValueError:
        logger.warning(f"Unknown invoice status {value!r}, treating it as open.")
        return InvoiceStatus.OPEN


def get_invoice_display_status(status: Any,
                               due_date: Any,
                               outstanding_amount: Any,
                               today: date,
                               window_days: int = DEFAULT_DUE_SOON_WINDOW_DAYS
                               ) -> Tuple[InvoiceDisplayStatus, str]:
    """
    Invoices follow the same idea as orders: settled and cancelled are final,
    and an invoice with money still outstanding turns overdue after its due date.
    """
    invoice_status = parse_invoice_status(status)
    if invoice_status == InvoiceStatus.SETTLED:
        return InvoiceDisplayStatus.SETTLED, INVOICE_STATUS_LABELS[InvoiceDisplayStatus.SETTLED]
    if invoice_status == InvoiceStatus.CANCELLED:
        return InvoiceDisplayStatus.CANCELLED, INVOICE_STATUS_LABELS[InvoiceDisplayStatus.CANCELLED]

    current = InvoiceDisplayStatus(invoice_status.value)
    due: Optional[date] = to_date(due_date)
    if due is not None and to_decimal(outstanding_amount) > 0:
        due_text = format_due_time(due, today, window_days)
        if due < today:
            return InvoiceDisplayStatus.OVERDUE, due_text or INVOICE_STATUS_LABELS[InvoiceDisplayStatus.OVERDUE]
        if due_text:
            return current, due_text
    return current, INVOICE_STATUS_LABELS[current]
