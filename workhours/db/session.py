"""Database engine management."""

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.pool import NullPool

from workhours.core.config import settings


def get_engine(database_url: str | None = None) -> Engine:
    """Build an engine that opens a fresh connection per use and closes it on release."""
    url: str = database_url or settings.database_url
    connect_args: dict[str, bool] = {"check_same_thread": False} if url.startswith("sqlite") else {}
    return create_engine(url, connect_args=connect_args, poolclass=NullPool)
