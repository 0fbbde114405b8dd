"""
Configuration Settings
======================

Connection parameters loaded with Pydantic V2 Settings.

Values come from environment variables (or a local ``.env`` file) and are
frozen once loaded. Nothing here is a module-level singleton: build a
``Settings`` and hand it to whatever needs it.
"""

from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import make_url
from sqlalchemy.exc import ArgumentError


class Settings(BaseSettings):
    """Database connection parameters: endpoint, username and password."""

    database_url: str = Field(default="sqlite:///./data/customers.db", min_length=1)
    database_username: Optional[str] = Field(default=None)
    database_password: Optional[str] = Field(default=None, repr=False)
    app_debug: bool = Field(default=False)

    @field_validator("database_url")
    @classmethod
    def validate_database_url(cls, v: str) -> str:
        """Ensure the endpoint parses as a SQLAlchemy URL."""
        try:
            make_url(v)
        except ArgumentError as exc:
            raise ValueError(f"database_url is not a valid database URL: {v!r}") from exc
        return v

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )


def get_settings(**overrides) -> Settings:
    """
    Load settings from the environment.

    Keyword overrides win over environment values, e.g.
    ``get_settings(database_url="sqlite:///./test.db")``.
    """
    return Settings(**overrides)
