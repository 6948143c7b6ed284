# fabric_erp/business_logic/__init__.py
from .purchase_order_manager import PurchaseOrderManager
from .sales_order_manager import SalesOrderManager
from .invoice_manager import InvoiceManager
from .payment_manager import PaymentManager
