# fabric_erp/data_access/products_repository.py

from typing import Optional
import logging

from fabric_erp.data_access.base_repository import BaseRepository
from fabric_erp.data_access.database_manager import DatabaseManager
from fabric_erp.business_logic.entities.product_entity import ProductEntity

logger = logging.getLogger(__name__)

class ProductsRepository(BaseRepository[ProductEntity]):
    def __init__(self, db_manager: DatabaseManager):
        super().__init__(db_manager=db_manager,
                         model_type=ProductEntity,
                         table_name="products")

    def get_by_sequence_number(self, sequence_number: int) -> Optional[ProductEntity]:
        products = self.find_by_criteria({"sequence_number": sequence_number})
        return products[0] if products else None
