"""
custdb
======

Minimal data-access layer for the ``customers`` table.

Usage:
    from custdb import CustomerService, ConnectionProvider, Customer

    provider = ConnectionProvider("postgresql+psycopg2://localhost:5432/app", "app", "secret")
    service = CustomerService(provider)
    service.create_customer(Customer(id=1, name="George"))
"""

from custdb.core.exceptions import ConnectionError, CustomerStoreError, PersistenceError
from custdb.database import ConnectionProvider
from custdb.models import Customer
from custdb.services import CustomerService, get_customer_service

__version__ = "0.1.0"

__all__ = [
    "ConnectionError",
    "ConnectionProvider",
    "Customer",
    "CustomerService",
    "CustomerStoreError",
    "PersistenceError",
    "get_customer_service",
]
