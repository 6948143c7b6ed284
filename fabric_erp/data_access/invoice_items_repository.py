# fabric_erp/data_access/invoice_items_repository.py

from typing import List

from fabric_erp.data_access.base_repository import BaseRepository
from fabric_erp.data_access.database_manager import DatabaseManager
from fabric_erp.business_logic.entities.invoice_item_entity import InvoiceItemEntity

class InvoiceItemsRepository(BaseRepository[InvoiceItemEntity]):
    def __init__(self, db_manager: DatabaseManager):
        super().__init__(db_manager=db_manager,
                         model_type=InvoiceItemEntity,
                         table_name="invoice_items")

    def get_by_invoice_id(self, invoice_id: int) -> List[InvoiceItemEntity]:
        return self.find_by_criteria({"invoice_id": invoice_id}, order_by="id ASC")
