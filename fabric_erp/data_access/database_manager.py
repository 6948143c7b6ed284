# fabric_erp/data_access/database_manager.py

import os
import sqlite3
import logging
from typing import Optional

from fabric_erp.config import settings
from fabric_erp.constants import InvoiceType, PaymentMode

logger = logging.getLogger(__name__)

# Tables in creation order (parents before children)
TABLE_QUERIES = [
    """
    CREATE TABLE IF NOT EXISTS products (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        sequence_number INTEGER UNIQUE,
        name TEXT NOT NULL,
        stock_type TEXT,
        measuring_unit TEXT,
        hsn_code TEXT,
        tax_type TEXT NOT NULL DEFAULT 'gst',
        gst_rate REAL NOT NULL DEFAULT 0,
        min_stock_threshold REAL
    );
    """,
    """
    CREATE TABLE IF NOT EXISTS purchase_orders (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        sequence_number INTEGER NOT NULL UNIQUE,
        supplier_id INTEGER NOT NULL,
        order_date TEXT NOT NULL, -- ISO Date
        status TEXT NOT NULL DEFAULT 'approval_pending',
        delivery_due_date TEXT,
        discount_type TEXT NOT NULL DEFAULT 'none',
        discount_value REAL,
        tax_type TEXT,
        gst_rate REAL,
        advance_amount REAL,
        total_amount REAL,
        notes TEXT
    );
    """,
    """
    CREATE TABLE IF NOT EXISTS purchase_order_items (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        purchase_order_id INTEGER NOT NULL,
        product_id INTEGER NOT NULL,
        required_quantity REAL NOT NULL,
        received_quantity REAL,
        unit_rate REAL NOT NULL,
        line_total REAL,
        notes TEXT,
        FOREIGN KEY (purchase_order_id) REFERENCES purchase_orders(id) ON DELETE CASCADE,
        FOREIGN KEY (product_id) REFERENCES products(id) ON DELETE RESTRICT
    );
    """,
    """
    CREATE TABLE IF NOT EXISTS sales_orders (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        sequence_number INTEGER NOT NULL UNIQUE,
        customer_id INTEGER NOT NULL,
        order_date TEXT NOT NULL,
        status TEXT NOT NULL DEFAULT 'approval_pending',
        expected_delivery_date TEXT,
        discount_type TEXT NOT NULL DEFAULT 'none',
        discount_value REAL,
        tax_type TEXT,
        gst_rate REAL,
        advance_amount REAL,
        total_amount REAL,
        notes TEXT
    );
    """,
    """
    CREATE TABLE IF NOT EXISTS sales_order_items (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        sales_order_id INTEGER NOT NULL,
        product_id INTEGER NOT NULL,
        required_quantity REAL NOT NULL,
        dispatched_quantity REAL,
        unit_rate REAL NOT NULL,
        line_total REAL,
        notes TEXT,
        FOREIGN KEY (sales_order_id) REFERENCES sales_orders(id) ON DELETE CASCADE,
        FOREIGN KEY (product_id) REFERENCES products(id) ON DELETE RESTRICT
    );
    """,
    """
    CREATE TABLE IF NOT EXISTS invoices (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        invoice_number TEXT NOT NULL UNIQUE,
        invoice_type TEXT NOT NULL CHECK(invoice_type IN ({})),
        invoice_date TEXT NOT NULL,
        party_ledger_id INTEGER NOT NULL,
        status TEXT NOT NULL DEFAULT 'open',
        due_date TEXT,
        discount_type TEXT NOT NULL DEFAULT 'none',
        discount_value REAL,
        tax_type TEXT,
        gst_rate REAL,
        round_off_amount REAL,
        total_amount REAL,
        outstanding_amount REAL,
        notes TEXT
    );
    """.format(', '.join(f"'{it.value}'" for it in InvoiceType)),
    """
    CREATE TABLE IF NOT EXISTS invoice_items (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        invoice_id INTEGER NOT NULL,
        product_id INTEGER NOT NULL,
        quantity REAL NOT NULL,
        rate REAL NOT NULL,
        -- product snapshot at invoicing time
        product_name TEXT,
        product_stock_type TEXT,
        product_measuring_unit TEXT,
        FOREIGN KEY (invoice_id) REFERENCES invoices(id) ON DELETE CASCADE
    );
    """,
    """
    CREATE TABLE IF NOT EXISTS payments (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        payment_number TEXT NOT NULL UNIQUE,
        payment_date TEXT NOT NULL,
        party_ledger_id INTEGER NOT NULL,
        payment_mode TEXT NOT NULL CHECK(payment_mode IN ({})),
        total_amount REAL NOT NULL,
        tds_applicable INTEGER NOT NULL DEFAULT 0,
        tds_rate REAL,
        is_cancelled INTEGER NOT NULL DEFAULT 0,
        notes TEXT
    );
    """.format(', '.join(f"'{pm.value}'" for pm in PaymentMode)),
]


class DatabaseManager:
    def __init__(self, db_path: Optional[str] = None):
        self.db_path = db_path or settings.DATABASE_PATH
        self.conn = None

    def __enter__(self):
        try:
            db_dir = os.path.dirname(os.path.abspath(self.db_path))
            if not os.path.exists(db_dir):
                os.makedirs(db_dir)
            self.conn = sqlite3.connect(self.db_path)
            self.conn.row_factory = sqlite3.Row # Access columns by name
            self.conn.execute("PRAGMA foreign_keys = ON;")
            logger.debug(f"Database connection established to {self.db_path}")
            return self.conn
        except sqlite3.Error as e:
            logger.error(f"Error connecting to database {self.db_path}: {e}")
            raise

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self.conn:
            self.conn.close()
            self.conn = None
            logger.debug("Database connection closed.")

    def execute_query(self, query, params=None):
        try:
            with self as conn:
                cursor = conn.cursor()
                cursor.execute(query, params or ())
                conn.commit()
                return cursor
        except sqlite3.Error as e:
            logger.error(f"Query execution failed: {query} with params {params} - {e}")
            raise

    def fetch_one(self, query, params=None):
        try:
            with self as conn:
                cursor = conn.cursor()
                cursor.execute(query, params or ())
                row = cursor.fetchone()
                return dict(row) if row else None
        except sqlite3.Error as e:
            logger.error(f"Fetch one failed: {query} with params {params} - {e}")
            raise

    def fetch_all(self, query, params=None):
        try:
            with self as conn:
                cursor = conn.cursor()
                cursor.execute(query, params or ())
                return [dict(row) for row in cursor.fetchall()]
        except sqlite3.Error as e:
            logger.error(f"Fetch all failed: {query} with params {params} - {e}")
            raise

    def create_tables(self):
        try:
            with self as conn:
                cursor = conn.cursor()
                logger.info(f"Attempting to execute {len(TABLE_QUERIES)} table creation SQL query(ies).")
                for query_sql in TABLE_QUERIES:
                    cursor.execute(query_sql)
                conn.commit()
                logger.info("Database tables checked/created successfully.")
        except sqlite3.Error as e:
            logger.error(f"Failed to create database tables: {e}", exc_info=True)
            raise
