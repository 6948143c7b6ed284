# fabric_erp/data_access/invoices_repository.py

from typing import Optional, List
import logging

from fabric_erp.data_access.base_repository import BaseRepository
from fabric_erp.data_access.database_manager import DatabaseManager
from fabric_erp.business_logic.entities.invoice_entity import InvoiceEntity
from fabric_erp.constants import InvoiceStatus, InvoiceType

logger = logging.getLogger(__name__)

class InvoicesRepository(BaseRepository[InvoiceEntity]):
    def __init__(self, db_manager: DatabaseManager):
        super().__init__(db_manager=db_manager,
                         model_type=InvoiceEntity,
                         table_name="invoices")

    def get_by_invoice_number(self, invoice_number: str) -> Optional[InvoiceEntity]:
        query = f"SELECT * FROM {self._table_name} WHERE invoice_number = ?"
        row = self.db_manager.fetch_one(query, (invoice_number,))
        return self._entity_from_row(row) if row else None

    def get_unsettled(self, invoice_type: Optional[InvoiceType] = None) -> List[InvoiceEntity]:
        criteria = {"status": ("IN", [InvoiceStatus.OPEN, InvoiceStatus.PARTIALLY_PAID])}
        if invoice_type:
            criteria["invoice_type"] = invoice_type
        return self.find_by_criteria(criteria, order_by="due_date IS NULL, due_date ASC, id ASC")
