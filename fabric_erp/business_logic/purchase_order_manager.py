# fabric_erp/business_logic/purchase_order_manager.py

from typing import Optional, List, TYPE_CHECKING
import logging

from fabric_erp.business_logic.entities.purchase_order_entity import PurchaseOrderEntity
from fabric_erp.business_logic.entities.order_entity import OrderEntity
from fabric_erp.business_logic.entities.line_item_entity import LineItemEntity
from fabric_erp.business_logic.entities.order_summary_entity import OrderSummary
from fabric_erp.business_logic.order_manager_base import BaseOrderManager
from fabric_erp.business_logic.display_status_resolver import parse_order_status
from fabric_erp.business_logic.financial_calculator import parse_discount_type, parse_tax_type
from fabric_erp.config import Settings
from fabric_erp.utils.date_converter import Clock
from fabric_erp.utils.measuring_units import get_canonical_unit
from fabric_erp.utils.numbers import to_decimal

if TYPE_CHECKING:
    from fabric_erp.data_access.purchase_orders_repository import PurchaseOrdersRepository
    from fabric_erp.data_access.purchase_order_items_repository import PurchaseOrderItemsRepository

logger = logging.getLogger(__name__)

class PurchaseOrderManager(BaseOrderManager):
    def __init__(self,
                 po_repository: 'PurchaseOrdersRepository',
                 po_items_repository: 'PurchaseOrderItemsRepository',
                 clock: Optional[Clock] = None,
                 settings: Optional[Settings] = None):
        if po_repository is None: raise ValueError("po_repository cannot be None")
        if po_items_repository is None: raise ValueError("po_items_repository cannot be None")
        super().__init__(clock=clock, settings=settings)
        self.po_repository = po_repository
        self.po_items_repository = po_items_repository

    def to_order(self, po: PurchaseOrderEntity) -> OrderEntity:
        """Received quantity is what fulfils a purchase order line."""
        items = [
            LineItemEntity(
                required_quantity=to_decimal(item.required_quantity),
                fulfilled_quantity=item.received_quantity,
                unit_rate=to_decimal(item.unit_rate),
                line_total=item.line_total,
                product_name=item.product_name,
                unit=get_canonical_unit(item.product_stock_type, item.product_measuring_unit),
            )
            for item in po.items
        ]
        return OrderEntity(
            order_number=po.order_number,
            status=parse_order_status(po.status),
            due_date=po.delivery_due_date,
            items=items,
            discount_type=parse_discount_type(po.discount_type),
            discount_value=to_decimal(po.discount_value),
            tax_type=parse_tax_type(po.tax_type),
            tax_rate=to_decimal(po.gst_rate),
        )

    def get_purchase_order_with_items(self, sequence_number: int) -> Optional[PurchaseOrderEntity]:
        logger.debug(f"Fetching purchase order with items for sequence number: {sequence_number}")
        po = self.po_repository.get_by_sequence_number(sequence_number)
        if not po:
            logger.warning(f"Purchase order PO-{sequence_number} not found.")
            return None
        po.items = self.po_items_repository.get_by_purchase_order_id(po.id)
        return po

    def get_order_summary(self, sequence_number: int) -> Optional[OrderSummary]:
        po = self.get_purchase_order_with_items(sequence_number)
        if not po:
            return None
        logger.info(f"Building summary for {po.order_number} ({len(po.items)} items).")
        return self.summarize(po)

    def get_active_order_summaries(self) -> List[OrderSummary]:
        """Summaries of every purchase order still awaiting approval or goods."""
        orders = self.po_repository.get_active()
        for po in orders:
            po.items = self.po_items_repository.get_by_purchase_order_id(po.id)
        logger.info(f"Building summaries for {len(orders)} active purchase orders.")
        return self.summarize_all(orders)
