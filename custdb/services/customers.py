"""
Customer service.

Every public operation is one scoped transaction:

    acquire connection -> execute one statement -> release connection

The connection is released on every exit path. Store errors are not logged or
retried here; they are wrapped in PersistenceError and raised to the caller.
"""

from typing import List, Optional

from sqlalchemy import insert, select
from sqlalchemy.exc import SQLAlchemyError

from custdb.config.settings import Settings, get_settings
from custdb.core.exceptions import PersistenceError
from custdb.database.connection import ConnectionProvider
from custdb.database.schema import create_customers_table_if_not_exists
from custdb.models.customer import Customer, CustomerRecord


class CustomerService:
    """
    Create and list customers.

    Construction bootstraps the schema, so a freshly built service can be
    used right away. Building a second service against the same store is
    fine: the bootstrap is idempotent.

    Example:
        service = CustomerService(ConnectionProvider("sqlite:///./customers.db"))
        service.create_customer(Customer(id=1, name="George"))
        service.get_all_customers()  # [Customer(id=1, name='George')]
    """

    def __init__(self, provider: ConnectionProvider):
        """
        Initialize the service and ensure the customers table exists.

        Args:
            provider: Source of connections to the store

        Raises:
            ConnectionError: Store unreachable
            PersistenceError: Table creation failed
        """
        self.provider = provider
        create_customers_table_if_not_exists(provider)

    def create_customer(self, customer: Customer) -> None:
        """
        Insert one customer.

        Args:
            customer: The customer to persist

        Raises:
            ConnectionError: Store unreachable
            PersistenceError: Insert failed, e.g. the id already exists
        """
        stmt = insert(CustomerRecord).values(id=customer.id, name=customer.name)
        try:
            with self.provider.get_connection_context() as conn:
                conn.execute(stmt)
        except SQLAlchemyError as exc:
            raise PersistenceError(
                f"Could not create customer {customer.id}: {exc}", original=exc
            ) from exc

    def get_all_customers(self) -> List[Customer]:
        """
        List every customer.

        Row order is whatever the store returns. Each call re-queries.

        Returns:
            List of Customer values, empty when the table is empty

        Raises:
            ConnectionError: Store unreachable
            PersistenceError: Query failed
        """
        stmt = select(CustomerRecord.id, CustomerRecord.name)
        try:
            with self.provider.get_connection_context() as conn:
                # drain before the connection is released
                rows = conn.execute(stmt).all()
        except SQLAlchemyError as exc:
            raise PersistenceError(f"Could not list customers: {exc}", original=exc) from exc

        return [Customer.from_row(row) for row in rows]


# ========================================
# Convenience Functions
# ========================================

def get_customer_service(settings: Optional[Settings] = None) -> CustomerService:
    """
    Factory function for creating a CustomerService.

    Args:
        settings: Connection parameters; loaded from the environment if omitted

    Returns:
        Bootstrapped CustomerService

    Usage:
        from custdb.config import get_settings
        from custdb.services import get_customer_service

        service = get_customer_service(get_settings(database_url="sqlite:///./dev.db"))
        customers = service.get_all_customers()
    """
    if settings is None:
        settings = get_settings()
    return CustomerService(ConnectionProvider.from_settings(settings))
