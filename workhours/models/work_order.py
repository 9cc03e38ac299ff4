"""Work order ORM model mapped on the legacy camelCase orders table."""

from sqlalchemy import Boolean, Float, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from workhours.db.base import Base


class WorkOrder(Base):
    """One saved work order entry."""

    __tablename__ = "orders"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    date: Mapped[str | None] = mapped_column(Text, nullable=True)
    customer: Mapped[str | None] = mapped_column(Text, nullable=True)
    is_external: Mapped[bool | None] = mapped_column("isExternal", Boolean, nullable=True)
    customer_order: Mapped[str | None] = mapped_column("customerOrder", Text, nullable=True)
    customer_amount: Mapped[float | None] = mapped_column("customerAmount", Float, nullable=True)
    spirit_order: Mapped[str | None] = mapped_column("spiritOrder", Text, nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    hours_booked: Mapped[float | None] = mapped_column("hoursBooked", Float, nullable=True)
