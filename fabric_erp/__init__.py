# fabric_erp/__init__.py
