from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from fabric_erp.business_logic.entities.payment_entity import PaymentEntity
from fabric_erp.business_logic.payment_manager import PaymentManager
from fabric_erp.constants import PaymentMode
from fabric_erp.data_access.database_manager import DatabaseManager
from fabric_erp.data_access.payments_repository import PaymentsRepository


def _payment(total, tds_applicable=False, tds_rate=None) -> PaymentEntity:
    return PaymentEntity(
        payment_number="PAY-1", payment_date=date(2025, 1, 15), party_ledger_id=1,
        payment_mode=PaymentMode.NEFT, total_amount=total,
        tds_applicable=tds_applicable, tds_rate=tds_rate,
    )


def test_net_amount_after_tds():
    payment = _payment(Decimal("10000"), True, Decimal("2"))
    assert PaymentManager.calculate_tds_amount(payment) == Decimal("200")
    assert PaymentManager.calculate_net_amount(payment) == Decimal("9800")


def test_no_tds_when_not_applicable():
    payment = _payment(Decimal("10000"), False, Decimal("2"))
    assert PaymentManager.calculate_net_amount(payment) == Decimal("10000")


def test_missing_values_never_raise():
    assert PaymentManager.calculate_net_amount(_payment(None, True, None)) == Decimal("0")
    assert PaymentManager.calculate_tds_amount(_payment("abc", True, "x")) == Decimal("0")


def test_requires_repository():
    with pytest.raises(ValueError):
        PaymentManager(None)


def test_payment_amounts_from_database(tmp_path):
    db = DatabaseManager(str(tmp_path / "erp.db"))
    db.create_tables()
    db.execute_query(
        "INSERT INTO payments (payment_number, payment_date, party_ledger_id, payment_mode, total_amount, "
        "tds_applicable, tds_rate) VALUES ('PAY-7', '2025-01-15', 1, 'upi', 5000, 1, 2.5)"
    )
    manager = PaymentManager(PaymentsRepository(db))

    assert manager.get_payment_amounts("PAY-7") == {
        "payment_number": "PAY-7",
        "total_amount": "5000.00",
        "tds_amount": "125.00",
        "net_amount": "4875.00",
    }
    assert manager.get_payment_amounts("PAY-404") is None
