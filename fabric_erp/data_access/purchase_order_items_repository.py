# fabric_erp/data_access/purchase_order_items_repository.py

from typing import List
import logging

from fabric_erp.data_access.base_repository import BaseRepository
from fabric_erp.data_access.database_manager import DatabaseManager
from fabric_erp.business_logic.entities.purchase_order_item_entity import PurchaseOrderItemEntity

logger = logging.getLogger(__name__)

class PurchaseOrderItemsRepository(BaseRepository[PurchaseOrderItemEntity]):
    def __init__(self, db_manager: DatabaseManager):
        super().__init__(db_manager=db_manager,
                         model_type=PurchaseOrderItemEntity,
                         table_name="purchase_order_items")

    def get_by_purchase_order_id(self, purchase_order_id: int) -> List[PurchaseOrderItemEntity]:
        # product columns are joined in for display
        query = f"""
            SELECT i.*, p.name AS product_name, p.stock_type AS product_stock_type,
                   p.measuring_unit AS product_measuring_unit
            FROM {self._table_name} i
            LEFT JOIN products p ON p.id = i.product_id
            WHERE i.purchase_order_id = ?
            ORDER BY i.id
        """
        return self._fetch_entities(query, (purchase_order_id,))
