"""
Schema bootstrap for the customers table.

Both operations are idempotent: ``CREATE TABLE IF NOT EXISTS`` and
``DROP TABLE IF EXISTS``, so they can run against a store in any state.
"""

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.schema import CreateTable, DropTable

from custdb.core.exceptions import PersistenceError
from custdb.database.connection import ConnectionProvider
from custdb.models.customer import CustomerRecord

logger = logging.getLogger(__name__)


def create_customers_table_if_not_exists(provider: ConnectionProvider) -> None:
    """
    Create the customers table unless it already exists.

    Args:
        provider: Where to create it

    Raises:
        ConnectionError: Store unreachable
        PersistenceError: The DDL statement failed
    """
    table = CustomerRecord.__table__
    try:
        with provider.get_connection_context() as conn:
            conn.execute(CreateTable(table, if_not_exists=True))
    except SQLAlchemyError as exc:
        raise PersistenceError(f"Could not create table '{table.name}': {exc}", original=exc) from exc

    logger.info("Ensured table '%s' exists", table.name)


def drop_customers_table(provider: ConnectionProvider) -> None:
    """
    Drop the customers table if present. Deletes all customer rows!

    Raises:
        ConnectionError: Store unreachable
        PersistenceError: The DDL statement failed
    """
    table = CustomerRecord.__table__
    try:
        with provider.get_connection_context() as conn:
            conn.execute(DropTable(table, if_exists=True))
    except SQLAlchemyError as exc:
        raise PersistenceError(f"Could not drop table '{table.name}': {exc}", original=exc) from exc

    logger.info("Dropped table '%s'", table.name)
