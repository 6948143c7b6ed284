# fabric_erp/business_logic/payment_manager.py

from typing import Optional, Dict, TYPE_CHECKING
from decimal import Decimal
import logging

from fabric_erp.business_logic.entities.payment_entity import PaymentEntity
from fabric_erp.utils.numbers import ZERO, HUNDRED, non_negative, quantize_money

if TYPE_CHECKING:
    from fabric_erp.data_access.payments_repository import PaymentsRepository

logger = logging.getLogger(__name__)

class PaymentManager:
    def __init__(self, payments_repository: 'PaymentsRepository'):
        if payments_repository is None:
            raise ValueError("payments_repository cannot be None")
        self.payments_repo = payments_repository

    @staticmethod
    def calculate_tds_amount(payment: PaymentEntity) -> Decimal:
        """Tax deducted at source: total x rate / 100, only when TDS applies."""
        if not payment.tds_applicable:
            return ZERO
        return non_negative(payment.total_amount) * non_negative(payment.tds_rate) / HUNDRED

    @staticmethod
    def calculate_net_amount(payment: PaymentEntity) -> Decimal:
        """Amount that actually changes hands after TDS."""
        return non_negative(payment.total_amount) - PaymentManager.calculate_tds_amount(payment)

    def get_payment_amounts(self, payment_number: str) -> Optional[Dict[str, str]]:
        payment = self.payments_repo.get_by_payment_number(payment_number)
        if not payment:
            logger.warning(f"Payment {payment_number} not found.")
            return None
        return {
            "payment_number": payment.payment_number,
            "total_amount": f"{quantize_money(payment.total_amount):.2f}",
            "tds_amount": f"{quantize_money(self.calculate_tds_amount(payment)):.2f}",
            "net_amount": f"{quantize_money(self.calculate_net_amount(payment)):.2f}",
        }
