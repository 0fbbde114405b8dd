"""
Connection Management
=====================

Turns the connection parameters (endpoint, username, password) into live
database connections, one per call.

The engine uses NullPool: acquiring opens a new DBAPI connection and releasing
closes it. Nothing is cached or shared between operations.

File-backed SQLite databases get their parent directory created when the
engine is built.
"""

import logging
import os
from contextlib import contextmanager
from typing import Generator, Optional

from sqlalchemy import Connection, Engine, create_engine
from sqlalchemy.engine import URL, make_url
from sqlalchemy.exc import ArgumentError, DBAPIError, SQLAlchemyError
from sqlalchemy.pool import NullPool

from custdb.config.settings import Settings
from custdb.core.exceptions import ConnectionError

logger = logging.getLogger(__name__)


class ConnectionProvider:
    """
    Produces connections to the configured store.

    Holds the three connection parameters and nothing else worth calling
    state; the engine is only a factory built from them. Safe to call
    repeatedly and from several threads.

    Example:
        provider = ConnectionProvider(
            "postgresql+psycopg2://localhost:5432/app",
            username="app",
            password="secret",
        )
        with provider.get_connection_context() as conn:
            conn.execute(text("select 1"))
    """

    def __init__(
        self,
        url: str,
        username: Optional[str] = None,
        password: Optional[str] = None,
        echo: bool = False,
    ):
        """
        Args:
            url: Store endpoint as a SQLAlchemy URL
            username: Auth principal, merged into the URL when given
            password: Auth credential, merged into the URL when given
            echo: Log every SQL statement through SQLAlchemy
        """
        self._url = url
        self._username = username
        self._password = password
        self._echo = echo
        self._engine: Optional[Engine] = None

    @classmethod
    def from_settings(cls, settings: Settings) -> "ConnectionProvider":
        """Build a provider from loaded settings."""
        return cls(
            settings.database_url,
            username=settings.database_username,
            password=settings.database_password,
            echo=settings.app_debug,
        )

    @property
    def url(self) -> URL:
        """Effective URL with credentials applied."""
        url = make_url(self._url)

        # SQLite URLs reject credentials, so only set what was given
        credentials = {}
        if self._username is not None:
            credentials["username"] = self._username
        if self._password is not None:
            credentials["password"] = self._password

        return url.set(**credentials) if credentials else url

    @property
    def engine(self) -> Engine:
        """Engine for the configured store, created on first use."""
        if self._engine is None:
            url = self.url
            if url.get_backend_name() == "sqlite":
                _ensure_sqlite_directory(url)
            logger.debug("Creating engine for %s", url.render_as_string(hide_password=True))
            self._engine = create_engine(url, poolclass=NullPool, echo=self._echo)
        return self._engine

    def get_connection(self) -> Connection:
        """
        Open a new connection to the store.

        Single attempt, no retries. The caller owns the returned connection
        and must close it.

        Raises:
            ConnectionError: Store unreachable, credentials rejected, or the
                engine could not be built (unknown dialect, missing driver)
        """
        try:
            return self.engine.connect()
        except DBAPIError as exc:
            raise ConnectionError(
                f"Could not connect to {self._display_url()}: {exc.orig}",
                original=exc,
            ) from exc
        except (SQLAlchemyError, ImportError, OSError) as exc:
            raise ConnectionError(
                f"Could not set up a connection to {self._display_url()}: {exc}",
                original=exc,
            ) from exc

    @contextmanager
    def get_connection_context(self) -> Generator[Connection, None, None]:
        """
        Scoped connection with a transaction.

        Commits on clean exit, rolls back on exception, always closes.

        Usage:
            with provider.get_connection_context() as conn:
                conn.execute(stmt)
        """
        conn = self.get_connection()
        try:
            with conn.begin():
                yield conn
        finally:
            conn.close()

    def dispose(self) -> None:
        """Drop the engine; the next acquisition builds a fresh one."""
        if self._engine is not None:
            self._engine.dispose()
            self._engine = None

    def _display_url(self) -> str:
        try:
            return self.url.render_as_string(hide_password=True)
        except ArgumentError:
            return "<invalid url>"

    def __repr__(self) -> str:
        return f"<ConnectionProvider(url='{self._display_url()}')>"


def _ensure_sqlite_directory(url: URL) -> None:
    """Create the parent directory of a file-backed SQLite database."""
    db_path = url.database
    if not db_path or db_path == ":memory:" or db_path.startswith("file:"):
        return

    db_dir = os.path.dirname(db_path)
    if db_dir and not os.path.exists(db_dir):
        os.makedirs(db_dir, exist_ok=True)
