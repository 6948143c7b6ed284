from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from fabric_erp.business_logic.purchase_order_manager import PurchaseOrderManager
from fabric_erp.constants import DisplayStatus, MeasuringUnit, OrderStatus
from fabric_erp.data_access.database_manager import DatabaseManager
from fabric_erp.data_access.purchase_order_items_repository import PurchaseOrderItemsRepository
from fabric_erp.data_access.purchase_orders_repository import PurchaseOrdersRepository

TODAY = date(2025, 1, 15)


def _setup_tmp_db(tmp_path) -> DatabaseManager:
    db = DatabaseManager(str(tmp_path / "erp.db"))
    db.create_tables()
    db.execute_query(
        "INSERT INTO products (id, sequence_number, name, stock_type, measuring_unit) VALUES (?, ?, ?, ?, ?)",
        (1, 1, "Cotton Denim", "roll", "metre"),
    )
    # stale measuring unit on piece stock
    db.execute_query(
        "INSERT INTO products (id, sequence_number, name, stock_type, measuring_unit) VALUES (?, ?, ?, ?, ?)",
        (2, 2, "Buttons", "piece", "metre"),
    )
    return db


def _insert_po(db, po_id, status, due, discount=("none", None), tax=(None, None)):
    db.execute_query(
        "INSERT INTO purchase_orders (id, sequence_number, supplier_id, order_date, status, delivery_due_date, "
        "discount_type, discount_value, tax_type, gst_rate) VALUES (?, ?, 1, '2025-01-01', ?, ?, ?, ?, ?, ?)",
        (po_id, po_id, status, due, discount[0], discount[1], tax[0], tax[1]),
    )


def _insert_item(db, po_id, product_id, required, received, rate):
    db.execute_query(
        "INSERT INTO purchase_order_items (purchase_order_id, product_id, required_quantity, received_quantity, unit_rate) "
        "VALUES (?, ?, ?, ?, ?)",
        (po_id, product_id, required, received, rate),
    )


def _manager(db) -> PurchaseOrderManager:
    return PurchaseOrderManager(
        PurchaseOrdersRepository(db), PurchaseOrderItemsRepository(db), clock=lambda: TODAY
    )


def test_requires_repositories(tmp_path):
    db = DatabaseManager(str(tmp_path / "erp.db"))
    with pytest.raises(ValueError):
        PurchaseOrderManager(None, PurchaseOrderItemsRepository(db))
    with pytest.raises(ValueError):
        PurchaseOrderManager(PurchaseOrdersRepository(db), None)


def test_pending_purchase_order_not_yet_due(tmp_path):
    db = _setup_tmp_db(tmp_path)
    _insert_po(db, 1, "in_progress", "2025-01-25", discount=("percentage", 10), tax=("gst", 12))
    _insert_item(db, 1, 1, 100, 40, 50)
    _insert_item(db, 1, 2, 50, 50, 2)

    summary = _manager(db).get_order_summary(1)

    assert summary.order_number == "PO-1"
    assert summary.status == OrderStatus.IN_PROGRESS
    assert summary.display_status == DisplayStatus.IN_PROGRESS
    assert summary.status_text == "Due in 10 days"
    assert summary.completion_percentage == 60
    assert summary.progress == 60
    assert not summary.is_over_fulfilled
    assert summary.product_summary == "Cotton Denim (100 mtr), Buttons (50 pcs)"
    assert summary.pending_summary == "Cotton Denim (60 mtr)"
    assert summary.quantities_summary == "100.00 mtr + 50.00 pc"

    breakdown = summary.breakdown
    assert breakdown.item_total == Decimal("5100")
    assert breakdown.discount_amount == Decimal("510")
    assert breakdown.cgst == breakdown.sgst == Decimal("275.4")
    assert breakdown.total_amount == Decimal("5141")


def test_to_order_uses_received_quantity_and_canonical_unit(tmp_path):
    db = _setup_tmp_db(tmp_path)
    _insert_po(db, 1, "in_progress", None)
    _insert_item(db, 1, 2, 10, 4, 2)

    manager = _manager(db)
    order = manager.to_order(manager.get_purchase_order_with_items(1))

    assert order.due_date is None
    assert order.items[0].fulfilled_quantity == Decimal("4")
    assert order.items[0].unit == MeasuringUnit.PIECE


def test_over_received_order(tmp_path):
    db = _setup_tmp_db(tmp_path)
    _insert_po(db, 3, "in_progress", "2025-01-10")
    _insert_item(db, 3, 1, 10, 15, 100)

    summary = _manager(db).get_order_summary(3)

    assert summary.display_status == DisplayStatus.OVERDUE
    assert summary.completion_percentage == 150
    assert summary.progress == 100
    assert summary.is_over_fulfilled
    assert summary.pending_summary == "No products"


def test_missing_order_returns_none(tmp_path):
    db = _setup_tmp_db(tmp_path)
    assert _manager(db).get_order_summary(42) is None


def test_active_summaries_skip_terminal_orders(tmp_path):
    db = _setup_tmp_db(tmp_path)
    _insert_po(db, 1, "in_progress", "2025-01-25")
    _insert_po(db, 2, "completed", "2025-01-01")
    _insert_po(db, 3, "approval_pending", "2025-01-20")
    _insert_po(db, 4, "cancelled", None)
    _insert_item(db, 1, 1, 10, 5, 1)

    summaries = _manager(db).get_active_order_summaries()

    assert [s.order_number for s in summaries] == ["PO-3", "PO-1"]
    assert summaries[0].product_summary == "No products"
    assert summaries[1].completion_percentage == 50


def test_summary_as_dict_is_json_ready(tmp_path):
    db = _setup_tmp_db(tmp_path)
    _insert_po(db, 1, "completed", "2025-01-01")
    _insert_item(db, 1, 1, 10, 10, 10)

    data = _manager(db).get_order_summary(1).as_dict()

    assert data["display_status"] == "completed"
    assert data["status_text"] == "Completed"
    assert data["breakdown"]["total_amount"] == "100.00"
