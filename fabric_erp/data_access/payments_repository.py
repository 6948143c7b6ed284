# fabric_erp/data_access/payments_repository.py

from typing import Optional

from fabric_erp.data_access.base_repository import BaseRepository
from fabric_erp.data_access.database_manager import DatabaseManager
from fabric_erp.business_logic.entities.payment_entity import PaymentEntity

class PaymentsRepository(BaseRepository[PaymentEntity]):
    def __init__(self, db_manager: DatabaseManager):
        super().__init__(db_manager=db_manager,
                         model_type=PaymentEntity,
                         table_name="payments")

    def get_by_payment_number(self, payment_number: str) -> Optional[PaymentEntity]:
        payments = self.find_by_criteria({"payment_number": payment_number})
        return payments[0] if payments else None
