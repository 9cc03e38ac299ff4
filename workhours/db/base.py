"""Shared SQLAlchemy base declarative class and model imports."""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for ORM models."""


# Import model modules so metadata is populated before use.
from workhours.models import app_setting as _app_setting  # noqa: E402,F401
from workhours.models import work_order as _work_order  # noqa: E402,F401
