# fabric_erp/data_access/sales_order_items_repository.py

from typing import List
import logging

from fabric_erp.data_access.base_repository import BaseRepository
from fabric_erp.data_access.database_manager import DatabaseManager
from fabric_erp.business_logic.entities.sales_order_item_entity import SalesOrderItemEntity

logger = logging.getLogger(__name__)

class SalesOrderItemsRepository(BaseRepository[SalesOrderItemEntity]):
    def __init__(self, db_manager: DatabaseManager):
        super().__init__(db_manager=db_manager,
                         model_type=SalesOrderItemEntity,
                         table_name="sales_order_items")

    def get_by_sales_order_id(self, sales_order_id: int) -> List[SalesOrderItemEntity]:
        # product columns are joined in for display
        query = f"""
            SELECT i.*, p.name AS product_name, p.stock_type AS product_stock_type,
                   p.measuring_unit AS product_measuring_unit
            FROM {self._table_name} i
            LEFT JOIN products p ON p.id = i.product_id
            WHERE i.sales_order_id = ?
            ORDER BY i.id
        """
        return self._fetch_entities(query, (sales_order_id,))
