# fabric_erp/business_logic/sales_order_manager.py

from typing import Optional, List, TYPE_CHECKING
import logging

from fabric_erp.business_logic.entities.sales_order_entity import SalesOrderEntity
from fabric_erp.business_logic.entities.order_entity import OrderEntity
from fabric_erp.business_logic.entities.line_item_entity import LineItemEntity
from fabric_erp.business_logic.entities.order_summary_entity import OrderSummary
from fabric_erp.business_logic.order_manager_base import BaseOrderManager
from fabric_erp.business_logic.display_status_resolver import parse_order_status
from fabric_erp.business_logic.financial_calculator import parse_discount_type, parse_tax_type
from fabric_erp.config import Settings
from fabric_erp.utils.date_converter import Clock
from fabric_erp.utils.measuring_units import get_canonical_unit
from fabric_erp.utils.numbers import to_decimal, format_quantity

if TYPE_CHECKING:
    from fabric_erp.data_access.sales_orders_repository import SalesOrdersRepository
    from fabric_erp.data_access.sales_order_items_repository import SalesOrderItemsRepository

logger = logging.getLogger(__name__)

class SalesOrderManager(BaseOrderManager):
    def __init__(self,
                 so_repository: 'SalesOrdersRepository',
                 so_items_repository: 'SalesOrderItemsRepository',
                 clock: Optional[Clock] = None,
                 settings: Optional[Settings] = None):
        if so_repository is None: raise ValueError("so_repository cannot be None")
        if so_items_repository is None: raise ValueError("so_items_repository cannot be None")
        super().__init__(clock=clock, settings=settings)
        self.so_repository = so_repository
        self.so_items_repository = so_items_repository

    def to_order(self, so: SalesOrderEntity) -> OrderEntity:
        items = [
            LineItemEntity(
                required_quantity=to_decimal(item.required_quantity),
                fulfilled_quantity=item.dispatched_quantity, # goods out fulfil a sales order
                unit_rate=to_decimal(item.unit_rate),
                line_total=item.line_total,
                product_name=item.product_name,
                unit=get_canonical_unit(item.product_stock_type, item.product_measuring_unit),
            )
            for item in so.items
        ]
        return OrderEntity(
            order_number=so.order_number,
            status=parse_order_status(so.status),
            due_date=so.expected_delivery_date,
            items=items,
            discount_type=parse_discount_type(so.discount_type),
            discount_value=to_decimal(so.discount_value),
            tax_type=parse_tax_type(so.tax_type),
            tax_rate=to_decimal(so.gst_rate),
        )

    def get_sales_order_with_items(self, sequence_number: int) -> Optional[SalesOrderEntity]:
        so = self.so_repository.get_by_sequence_number(sequence_number)
        if not so:
            logger.warning(f"Sales order SO-{sequence_number} not found.")
            return None
        so.items = self.so_items_repository.get_by_sales_order_id(so.id)
        return so

    def get_order_summary(self, sequence_number: int) -> Optional[OrderSummary]:
        so = self.get_sales_order_with_items(sequence_number)
        if not so:
            return None
        logger.info(f"Building summary for {so.order_number} ({len(so.items)} items).")
        return self.summarize(so)

    def get_active_order_summaries(self) -> List[OrderSummary]:
        orders = self.so_repository.get_active()
        for so in orders:
            so.items = self.so_items_repository.get_by_sales_order_id(so.id)
        logger.info(f"Building summaries for {len(orders)} active sales orders.")
        return self.summarize_all(orders)

    @staticmethod
    def get_full_product_info(so: SalesOrderEntity) -> str:
        """Designer Silk x22, Cotton Denim x11"""
        return ", ".join(f"{item.product_name or 'Unknown product'} x{format_quantity(item.required_quantity)}" for item in so.items)
