"""
Database models package.

Contains the SQLAlchemy table mapping and the Customer value type.
"""

from custdb.models.base import Base
from custdb.models.customer import Customer, CustomerRecord

__all__ = [
    "Base",
    "Customer",
    "CustomerRecord",
]
