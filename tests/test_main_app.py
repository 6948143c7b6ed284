from __future__ import annotations

import json

from fabric_erp import main_app
from fabric_erp.data_access.database_manager import DatabaseManager


def _setup_tmp_db(tmp_path, monkeypatch) -> str:
    # keep pytest's own log capture in place
    monkeypatch.setattr(main_app, "setup_logging", lambda level=None: None)
    db_path = str(tmp_path / "erp.db")
    db = DatabaseManager(db_path)
    db.create_tables()
    db.execute_query("INSERT INTO products (id, name, stock_type, measuring_unit) VALUES (1, 'Cotton Denim', 'roll', 'metre')")
    db.execute_query(
        "INSERT INTO purchase_orders (id, sequence_number, supplier_id, order_date, status, delivery_due_date) "
        "VALUES (1, 1, 1, '2025-01-01', 'in_progress', '2025-01-25')"
    )
    db.execute_query(
        "INSERT INTO purchase_order_items (purchase_order_id, product_id, required_quantity, received_quantity, unit_rate) "
        "VALUES (1, 1, 150, 90, 10)"
    )
    db.execute_query(
        "INSERT INTO invoices (invoice_number, invoice_type, invoice_date, party_ledger_id, status, due_date, outstanding_amount) "
        "VALUES ('INV-1', 'sales', '2025-01-01', 1, 'open', '2025-01-10', 300)"
    )
    return db_path


def test_purchase_order_summary_as_json(tmp_path, capsys, monkeypatch):
    db_path = _setup_tmp_db(tmp_path, monkeypatch)

    exit_code = main_app.main(["--db", db_path, "--today", "2025-01-15", "purchase-order", "PO-1"])

    assert exit_code == 0
    data = json.loads(capsys.readouterr().out)
    assert data["order_number"] == "PO-1"
    assert data["completion_percentage"] == 60
    assert data["status_text"] == "Due in 10 days"
    assert data["breakdown"]["item_total"] == "1500.00"


def test_today_drives_overdue_state(tmp_path, capsys, monkeypatch):
    db_path = _setup_tmp_db(tmp_path, monkeypatch)

    assert main_app.main(["--db", db_path, "--today", "2025-02-01", "purchase-order", "1"]) == 0
    assert json.loads(capsys.readouterr().out)["display_status"] == "overdue"


def test_invoice_and_active_orders(tmp_path, capsys, monkeypatch):
    db_path = _setup_tmp_db(tmp_path, monkeypatch)

    assert main_app.main(["--db", db_path, "--today", "2025-01-15", "invoice", "INV-1"]) == 0
    assert json.loads(capsys.readouterr().out)["display_status"] == "overdue"

    assert main_app.main(["--db", db_path, "--today", "2025-01-15", "active-orders"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert [s["order_number"] for s in data["purchase_orders"]] == ["PO-1"]
    assert data["sales_orders"] == []


def test_missing_document_exits_with_one(tmp_path, capsys, monkeypatch):
    db_path = _setup_tmp_db(tmp_path, monkeypatch)

    assert main_app.main(["--db", db_path, "sales-order", "99"]) == 1
    assert "not found" in capsys.readouterr().err


def test_bad_sequence_number_exits_with_one(tmp_path, capsys, monkeypatch):
    db_path = _setup_tmp_db(tmp_path, monkeypatch)

    assert main_app.main(["--db", db_path, "purchase-order", "PO-x"]) == 1
    assert "[ERROR]" in capsys.readouterr().err
