# fabric_erp/business_logic/entities/__init__.py
from .base_entity import BaseEntity
from .product_entity import ProductEntity
from .line_item_entity import LineItemEntity
from .order_entity import OrderEntity
from .purchase_order_entity import PurchaseOrderEntity
from .purchase_order_item_entity import PurchaseOrderItemEntity
from .sales_order_entity import SalesOrderEntity
from .sales_order_item_entity import SalesOrderItemEntity
from .invoice_entity import InvoiceEntity
from .invoice_item_entity import InvoiceItemEntity
from .payment_entity import PaymentEntity
from .financial_breakdown_entity import FinancialBreakdown
from .order_summary_entity import OrderSummary, InvoiceSummary
__all__ = [
    "BaseEntity", "ProductEntity", "LineItemEntity", "OrderEntity",
    "PurchaseOrderEntity", "PurchaseOrderItemEntity",
    "SalesOrderEntity", "SalesOrderItemEntity",
    "InvoiceEntity", "InvoiceItemEntity", "PaymentEntity",
    "FinancialBreakdown", "OrderSummary", "InvoiceSummary",
]
