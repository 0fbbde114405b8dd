"""Database package."""

from custdb.database.connection import ConnectionProvider
from custdb.database.schema import (
    create_customers_table_if_not_exists,
    drop_customers_table,
)

__all__ = [
    "ConnectionProvider",
    "create_customers_table_if_not_exists",
    "drop_customers_table",
]
