"""Schemas for the work order draft and store results."""

from __future__ import annotations

import datetime as dt

from pydantic import BaseModel, Field


class WorkOrderDraft(BaseModel):
    """Unsaved order exactly as typed; numbers stay text until save."""

    date: dt.date = Field(default_factory=dt.date.today)
    customer: str = ""
    is_external: bool = True
    customer_order: str = ""
    customer_amount: str = ""
    spirit_order: str = ""
    description: str = ""
    hours_booked: str = ""


class StoreResult(BaseModel):
    """Outcome of a store operation."""

    ok: bool
    order_id: int | None = None
    error: str | None = None

    @classmethod
    def success(cls, order_id: int | None = None) -> StoreResult:
        return cls(ok=True, order_id=order_id)

    @classmethod
    def failure(cls, error: str) -> StoreResult:
        return cls(ok=False, error=error)

