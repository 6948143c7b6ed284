# fabric_erp/main_app.py
import sys
import json
import argparse
import logging
from datetime import date, datetime
from typing import Any, List, Optional

# --- Configuration and Constants ---
from fabric_erp.config import settings, setup_logging
from fabric_erp.constants import DATE_FORMAT
from fabric_erp.utils.date_converter import Clock, system_clock

# --- Data Access Layer (DAL) ---
from fabric_erp.data_access.database_manager import DatabaseManager
from fabric_erp.data_access.purchase_orders_repository import PurchaseOrdersRepository
from fabric_erp.data_access.purchase_order_items_repository import PurchaseOrderItemsRepository
from fabric_erp.data_access.sales_orders_repository import SalesOrdersRepository
from fabric_erp.data_access.sales_order_items_repository import SalesOrderItemsRepository
from fabric_erp.data_access.invoices_repository import InvoicesRepository
from fabric_erp.data_access.invoice_items_repository import InvoiceItemsRepository
from fabric_erp.data_access.payments_repository import PaymentsRepository

# --- Business Logic Layer (BLL) ---
from fabric_erp.business_logic.purchase_order_manager import PurchaseOrderManager
from fabric_erp.business_logic.sales_order_manager import SalesOrderManager
from fabric_erp.business_logic.invoice_manager import InvoiceManager
from fabric_erp.business_logic.payment_manager import PaymentManager

logger = logging.getLogger(__name__)

COMMANDS = ("purchase-order", "sales-order", "invoice", "unsettled-invoices", "payment", "active-orders")


class ErpApplication:
    """Wires repositories and managers over one database, the way every entry point needs them."""

    def __init__(self, db_path: Optional[str] = None, clock: Optional[Clock] = None):
        logger.info("Initializing Database Manager and creating tables...")
        self.db_manager = DatabaseManager(db_path or settings.DATABASE_PATH)
        self.db_manager.create_tables()
        self.clock: Clock = clock or system_clock

        self.po_repo = PurchaseOrdersRepository(self.db_manager)
        self.po_items_repo = PurchaseOrderItemsRepository(self.db_manager)
        self.so_repo = SalesOrdersRepository(self.db_manager)
        self.so_items_repo = SalesOrderItemsRepository(self.db_manager)
        self.invoices_repo = InvoicesRepository(self.db_manager)
        self.invoice_items_repo = InvoiceItemsRepository(self.db_manager)
        self.payments_repo = PaymentsRepository(self.db_manager)

        self.purchase_order_manager = PurchaseOrderManager(self.po_repo, self.po_items_repo, clock=self.clock)
        self.sales_order_manager = SalesOrderManager(self.so_repo, self.so_items_repo, clock=self.clock)
        self.invoice_manager = InvoiceManager(self.invoices_repo, self.invoice_items_repo, clock=self.clock)
        self.payment_manager = PaymentManager(self.payments_repo)
        logger.info("Managers initialized.")

    def run(self, command: str, number: Optional[str]) -> Any:
        """Result for the command as plain JSON-ready data, or None when the document is missing."""
        if command == "purchase-order":
            summary = self.purchase_order_manager.get_order_summary(_parse_sequence_number(number))
            return summary.as_dict() if summary else None
        if command == "sales-order":
            summary = self.sales_order_manager.get_order_summary(_parse_sequence_number(number))
            return summary.as_dict() if summary else None
        if command == "invoice":
            summary = self.invoice_manager.get_invoice_summary(number)
            return summary.as_dict() if summary else None
        if command == "unsettled-invoices":
            return [s.as_dict() for s in self.invoice_manager.get_unsettled_invoice_summaries()]
        if command == "payment":
            return self.payment_manager.get_payment_amounts(number)
        if command == "active-orders":
            return {
                "purchase_orders": [s.as_dict() for s in self.purchase_order_manager.get_active_order_summaries()],
                "sales_orders": [s.as_dict() for s in self.sales_order_manager.get_active_order_summaries()],
            }
        raise ValueError(f"Unknown command: {command}")


def _parse_sequence_number(number: Optional[str]) -> int:
    """Accepts "12" as well as "PO-12" / "SO-12"."""
    text = (number or "").strip().upper()
    for prefix in ("PO-", "SO-"):
        if text.startswith(prefix):
            text = text[len(prefix):]
    return int(text)


def _parse_today(value: str) -> date:
    try:
        return datetime.strptime(value, DATE_FORMAT).date()
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid date {value!r}, expected YYYY-MM-DD")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fabric-erp",
        description="Order and invoice summaries (status, fulfilment, totals) as JSON.",
    )
    parser.add_argument("--db", default=None, help="SQLite database path (defaults to DATABASE_PATH).")
    parser.add_argument("--today", type=_parse_today, default=None,
                        help="Evaluate overdue states as of this date (YYYY-MM-DD).")
    parser.add_argument("--log-level", default=None, help="Overrides LOG_LEVEL.")
    parser.add_argument("command", choices=COMMANDS)
    parser.add_argument("number", nargs="?", default=None,
                        help="Order sequence number (12 or PO-12), invoice or payment number.")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    if args.command not in ("active-orders", "unsettled-invoices") and not args.number:
        parser.error(f"{args.command} needs a document number")

    clock = (lambda: args.today) if args.today else None
    app = ErpApplication(db_path=args.db, clock=clock)
    try:
        result = app.run(args.command, args.number)
    except ValueError as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return 1

    if result is None:
        print(f"[ERROR] {args.command} {args.number} not found.", file=sys.stderr)
        return 1
    print(json.dumps(result, indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
