# fabric_erp/data_access/purchase_orders_repository.py

from typing import Optional, List
import logging

from fabric_erp.data_access.base_repository import BaseRepository
from fabric_erp.data_access.database_manager import DatabaseManager
from fabric_erp.business_logic.entities.purchase_order_entity import PurchaseOrderEntity
from fabric_erp.constants import TERMINAL_ORDER_STATUSES

logger = logging.getLogger(__name__)

class PurchaseOrdersRepository(BaseRepository[PurchaseOrderEntity]):
    def __init__(self, db_manager: DatabaseManager):
        super().__init__(db_manager=db_manager,
                         model_type=PurchaseOrderEntity,
                         table_name="purchase_orders")

    def get_by_sequence_number(self, sequence_number: int) -> Optional[PurchaseOrderEntity]:
        query = f"SELECT * FROM {self._table_name} WHERE sequence_number = ?"
        row = self.db_manager.fetch_one(query, (sequence_number,))
        return self._entity_from_row(row) if row else None

    def get_active(self) -> List[PurchaseOrderEntity]:
        """Every order whose status can still change (approval pending or in progress)."""
        terminal = [status.value for status in TERMINAL_ORDER_STATUSES]
        return self.find_by_criteria({"status": ("NOT IN", terminal)}, order_by="delivery_due_date IS NULL, delivery_due_date ASC, id ASC")
