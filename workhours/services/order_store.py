"""Append-only local store for saved work orders."""

from __future__ import annotations

import logging

from sqlalchemy import func, select
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from workhours.db.migrations import ensure_orders_table
from workhours.models.work_order import WorkOrder
from workhours.schemas.order import StoreResult, WorkOrderDraft
from workhours.services.calculations import parse_number_or_zero, title_case, upper_case

logger = logging.getLogger(__name__)


def build_work_order(draft: WorkOrderDraft) -> WorkOrder:
    """Normalise a raw draft into a row ready for insert."""
    return WorkOrder(
        date=draft.date.isoformat(),
        customer=title_case(draft.customer),
        is_external=draft.is_external,
        customer_order=upper_case(draft.customer_order) if draft.is_external else "",
        customer_amount=parse_number_or_zero(draft.customer_amount),
        spirit_order=upper_case(draft.spirit_order),
        description=draft.description,
        hours_booked=parse_number_or_zero(draft.hours_booked),
    )


class OrderStore:
    """Write-only access to the orders table.

    Every call opens its own connection and releases it before returning.
    Storage failures are logged and reported through ``StoreResult``.
    """

    def __init__(self, engine: Engine) -> None:
        self.engine = engine
        self._schema_ready = False

    def ensure_schema(self) -> StoreResult:
        """Create the orders table when it does not exist yet."""
        try:
            ensure_orders_table(self.engine)
        except SQLAlchemyError as exc:
            logger.exception("[STORE] Could not create orders table at %s", self.engine.url)
            return StoreResult.failure(f"Could not prepare order storage: {exc}")
        self._schema_ready = True
        return StoreResult.success()

    def save(self, draft: WorkOrderDraft) -> StoreResult:
        """Append one normalised order row and return its new id."""
        if not self._schema_ready:
            schema_result: StoreResult = self.ensure_schema()
            if not schema_result.ok:
                return schema_result

        order: WorkOrder = build_work_order(draft)
        try:
            with Session(self.engine) as db:
                db.add(order)
                db.flush()
                order_id: int = order.id
                db.commit()
        except SQLAlchemyError as exc:
            logger.exception("[STORE] Failed to save order for customer=%r", draft.customer)
            return StoreResult.failure(f"Failed to save order: {exc}")

        logger.info("[STORE] Order saved successfully id=%s", order_id)
        return StoreResult.success(order_id)

    def count(self) -> int:
        """Return the number of stored orders."""
        with Session(self.engine) as db:
            return int(db.scalar(select(func.count()).select_from(WorkOrder)) or 0)
