"""
Error taxonomy for the data-access layer.

Callers branch on the failure category:

- ConnectionError: the store could not be reached, or rejected the credentials.
- PersistenceError: a statement failed (constraint violation, lost connection
  mid-statement, failed commit).

Both keep the underlying SQLAlchemy/DBAPI error as ``__cause__`` and as
``.original``.
"""

from typing import Optional


class CustomerStoreError(Exception):
    """Base class for every error raised by custdb."""

    def __init__(self, message: str, original: Optional[BaseException] = None):
        super().__init__(message)
        self.original = original


class ConnectionError(CustomerStoreError):  # noqa: A001
    """Acquiring a connection failed: store unreachable or auth rejected."""


class PersistenceError(CustomerStoreError):
    """Executing a statement against the store failed."""
