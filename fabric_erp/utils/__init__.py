# fabric_erp/utils/__init__.py
