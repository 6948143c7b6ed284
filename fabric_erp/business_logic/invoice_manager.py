# fabric_erp/business_logic/invoice_manager.py

from typing import Optional, List, Tuple, TYPE_CHECKING
from datetime import date
import logging

from fabric_erp.business_logic.entities.invoice_entity import InvoiceEntity
from fabric_erp.business_logic.entities.invoice_item_entity import InvoiceItemEntity
from fabric_erp.business_logic.entities.order_summary_entity import InvoiceSummary
from fabric_erp.business_logic.entities.financial_breakdown_entity import FinancialBreakdown
from fabric_erp.business_logic.display_status_resolver import get_invoice_display_status, parse_invoice_status
from fabric_erp.business_logic.financial_calculator import calculate_financial_breakdown
from fabric_erp.config import settings as default_settings, Settings
from fabric_erp.constants import InvoiceDisplayStatus, InvoiceType
from fabric_erp.utils.date_converter import Clock, system_clock, format_due_time, format_display_date
from fabric_erp.utils.measuring_units import format_quantity_with_unit, get_canonical_unit
from fabric_erp.utils.numbers import format_currency, to_decimal

if TYPE_CHECKING:
    from fabric_erp.data_access.invoices_repository import InvoicesRepository
    from fabric_erp.data_access.invoice_items_repository import InvoiceItemsRepository

logger = logging.getLogger(__name__)

class InvoiceManager:
    def __init__(self,
                 invoices_repository: 'InvoicesRepository',
                 invoice_items_repository: 'InvoiceItemsRepository',
                 clock: Optional[Clock] = None,
                 settings: Optional[Settings] = None):
        """
        Initializes the InvoiceManager.
        `clock` supplies today's date for overdue checks; it defaults to the system date.
        """
        if invoices_repository is None: raise ValueError("invoices_repository cannot be None")
        if invoice_items_repository is None: raise ValueError("invoice_items_repository cannot be None")
        self.invoices_repo = invoices_repository
        self.invoice_items_repo = invoice_items_repository
        self.clock: Clock = clock or system_clock
        self.settings = settings or default_settings

    def get_invoice_with_items(self, invoice_number: str) -> Optional[InvoiceEntity]:
        logger.debug(f"Fetching invoice with items for number: {invoice_number}")
        invoice = self.invoices_repo.get_by_invoice_number(invoice_number)
        if not invoice:
            logger.warning(f"Invoice {invoice_number} not found.")
            return None
        invoice.items = self.invoice_items_repo.get_by_invoice_id(invoice.id)
        return invoice

    def get_invoice_display_status(self, invoice: InvoiceEntity, today: Optional[date] = None) -> Tuple[InvoiceDisplayStatus, str]:
        return get_invoice_display_status(
            invoice.status,
            invoice.due_date,
            invoice.outstanding_amount,
            today or self.clock(),
            self.settings.DUE_SOON_WINDOW_DAYS,
        )

    def calculate_breakdown(self, invoice: InvoiceEntity) -> FinancialBreakdown:
        """
        Totals for the invoice document. The round-off the database stored when
        the invoice was issued wins over a recomputed one.
        """
        return calculate_financial_breakdown(
            invoice.item_total,
            invoice.discount_type,
            invoice.discount_value,
            invoice.tax_type,
            invoice.gst_rate,
            round_off=invoice.round_off_amount,
            round_off_unit=self.settings.ROUND_OFF_UNIT,
            clamp_discount=self.settings.CLAMP_FIXED_DISCOUNT,
        )

    @staticmethod
    def get_invoice_item_summary(items: List[InvoiceItemEntity]) -> str:
        """Cotton Denim (100 mtr), Buttons (40 pcs)"""
        if not items:
            return "No items"
        return ", ".join(
            f"{item.product_name or 'Unknown product'} "
            f"({format_quantity_with_unit(item.quantity, get_canonical_unit(item.product_stock_type, item.product_measuring_unit))})"
            for item in items
        )

    def get_invoice_info(self, invoice: InvoiceEntity, today: Optional[date] = None) -> str:
        """Due in 3 days • Outstanding: 1,200"""
        info = []
        if invoice.due_date:
            due_text = format_due_time(invoice.due_date, today or self.clock(), self.settings.DUE_SOON_WINDOW_DAYS)
            info.append(due_text or f"Due on {format_display_date(invoice.due_date)}")
        if to_decimal(invoice.outstanding_amount) > 0:
            info.append(f"Outstanding: {format_currency(invoice.outstanding_amount)}")
        return " • ".join(info)

    def summarize(self, invoice: InvoiceEntity) -> InvoiceSummary:
        today = self.clock()
        display_status, status_text = self.get_invoice_display_status(invoice, today)
        outstanding = None
        if invoice.outstanding_amount is not None:
            outstanding = f"{to_decimal(invoice.outstanding_amount):.2f}"
        return InvoiceSummary(
            invoice_number=invoice.invoice_number,
            status=parse_invoice_status(invoice.status),
            display_status=display_status,
            status_text=status_text,
            item_summary=self.get_invoice_item_summary(invoice.items),
            info=self.get_invoice_info(invoice, today),
            breakdown=self.calculate_breakdown(invoice),
            outstanding_amount=outstanding,
        )

    def get_invoice_summary(self, invoice_number: str) -> Optional[InvoiceSummary]:
        invoice = self.get_invoice_with_items(invoice_number)
        if not invoice:
            return None
        logger.info(f"Building summary for invoice {invoice.invoice_number}.")
        return self.summarize(invoice)

    def get_unsettled_invoice_summaries(self, invoice_type: Optional[InvoiceType] = None) -> List[InvoiceSummary]:
        invoices = self.invoices_repo.get_unsettled(invoice_type)
        for invoice in invoices:
            invoice.items = self.invoice_items_repo.get_by_invoice_id(invoice.id)
        logger.info(f"Building summaries for {len(invoices)} unsettled invoices.")
        return [self.summarize(invoice) for invoice in invoices]

    def get_overdue_invoices(self, invoice_type: Optional[InvoiceType] = None) -> List[InvoiceEntity]:
        """Unsettled invoices whose displayed status is overdue today."""
        today = self.clock()
        overdue = [
            invoice for invoice in self.invoices_repo.get_unsettled(invoice_type)
            if self.get_invoice_display_status(invoice, today)[0] == InvoiceDisplayStatus.OVERDUE
        ]
        logger.info(f"{len(overdue)} overdue invoice(s) as of {today}.")
        return overdue
