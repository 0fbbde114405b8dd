"""
Customer model.

Two pieces live here:

- CustomerRecord: the SQLAlchemy mapping of the ``customers`` table. It is the
  single source of truth for the DDL and for the Core insert/select statements.
- Customer: the immutable value handed to and returned from CustomerService.

The id is assigned by the caller and is the primary key, so inserting the same
id twice fails on the constraint instead of overwriting the row.
"""

from dataclasses import asdict, dataclass
from typing import Any, Dict

from sqlalchemy import BigInteger, String
from sqlalchemy.orm import Mapped, mapped_column

from custdb.core.constants import (
    COLUMN_ID,
    COLUMN_NAME,
    CUSTOMERS_TABLE,
    MAX_CUSTOMER_ID,
    MIN_CUSTOMER_ID,
)
from custdb.models.base import Base


class CustomerRecord(Base):
    """
    Table mapping for ``customers``.

    Renders as:
        CREATE TABLE customers (
            id BIGINT NOT NULL,
            name VARCHAR NOT NULL,
            PRIMARY KEY (id)
        )
    """

    __tablename__ = CUSTOMERS_TABLE

    # ========================================
    # Primary Key (caller-assigned)
    # ========================================

    id: Mapped[int] = mapped_column(
        COLUMN_ID,
        BigInteger,
        primary_key=True,
        autoincrement=False,  # no SERIAL / IDENTITY
        nullable=False,
    )

    # ========================================
    # Fields
    # ========================================

    name: Mapped[str] = mapped_column(
        COLUMN_NAME,
        String,  # unbounded VARCHAR
        nullable=False,
    )


@dataclass(frozen=True)
class Customer:
    """
    Immutable customer value.

    Attributes:
        id: 64-bit integer identity, unique per customer
        name: Non-empty display name

    Raises:
        ValueError: If id is not a 64-bit integer or name is empty

    Example:
        customer = Customer(id=1, name="George")
        service.create_customer(customer)
    """

    id: int
    name: str

    def __post_init__(self) -> None:
        # bool is an int subclass, but True is not an id
        if isinstance(self.id, bool) or not isinstance(self.id, int):
            raise ValueError(f"Customer id must be an integer, got {self.id!r}")
        if not MIN_CUSTOMER_ID <= self.id <= MAX_CUSTOMER_ID:
            raise ValueError(f"Customer id out of 64-bit range: {self.id}")

        if not isinstance(self.name, str) or not self.name.strip():
            raise ValueError("Customer name cannot be empty")

    @classmethod
    def from_row(cls, row: Any) -> "Customer":
        """Build a Customer from a result row with ``id`` and ``name``."""
        return cls(id=row.id, name=row.name)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a plain dictionary."""
        return asdict(self)

    def __str__(self) -> str:
        return f"{self.id}: {self.name}"
