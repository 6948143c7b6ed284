# fabric_erp/data_access/__init__.py

from .database_manager import DatabaseManager
from .base_repository import BaseRepository

from .products_repository import ProductsRepository
from .purchase_orders_repository import PurchaseOrdersRepository
from .purchase_order_items_repository import PurchaseOrderItemsRepository
from .sales_orders_repository import SalesOrdersRepository
from .sales_order_items_repository import SalesOrderItemsRepository
from .invoices_repository import InvoicesRepository
from .invoice_items_repository import InvoiceItemsRepository
from .payments_repository import PaymentsRepository
