"""Idempotent schema creation for the local SQLite store."""

from __future__ import annotations

from sqlalchemy import text
from sqlalchemy.engine import Engine

ORDERS_TABLE_DDL: str = """
    CREATE TABLE IF NOT EXISTS orders (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        date TEXT,
        customer TEXT,
        isExternal INTEGER,
        customerOrder TEXT,
        customerAmount REAL,
        spiritOrder TEXT,
        description TEXT,
        hoursBooked REAL
    )
"""

APP_SETTINGS_TABLE_DDL: str = """
    CREATE TABLE IF NOT EXISTS app_settings (
        key VARCHAR(100) PRIMARY KEY,
        value VARCHAR(255) NOT NULL,
        updated_at DATETIME NOT NULL
    )
"""


def ensure_orders_table(engine: Engine) -> None:
    """Create the orders table if it is missing. Existing rows are never touched."""
    with engine.begin() as connection:
        connection.execute(text(ORDERS_TABLE_DDL))


def ensure_app_settings_table(engine: Engine) -> None:
    """Create the key-value preferences table if it is missing."""
    with engine.begin() as connection:
        connection.execute(text(APP_SETTINGS_TABLE_DDL))
