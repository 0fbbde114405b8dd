"""Shared fixtures: a fresh SQLite store per test."""

import pytest

from custdb.database.connection import ConnectionProvider
from custdb.services.customers import CustomerService


@pytest.fixture()
def db_url(tmp_path):
    """Return a SQLite URL inside a temporary directory."""
    return f"sqlite:///{tmp_path / 'customers.db'}"


@pytest.fixture()
def provider(db_url):
    p = ConnectionProvider(db_url)
    yield p
    p.dispose()


@pytest.fixture()
def service(provider):
    """A bootstrapped service against an empty store."""
    return CustomerService(provider)


@pytest.fixture()
def unreachable_url(tmp_path):
    """SQLite URL whose parent path is a regular file, so it can never open."""
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory")
    return f"sqlite:///{blocker / 'customers.db'}"
