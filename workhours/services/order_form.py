"""Draft handling and previews behind the work entry form."""

from __future__ import annotations

import logging
from datetime import date
from typing import Any

from workhours.core.config import settings
from workhours.schemas.order import StoreResult, WorkOrderDraft
from workhours.schemas.preferences import Preferences
from workhours.services.calculations import (
    derived_hours_from_text,
    format_cost,
    format_hours_to_book,
    internal_cost,
)
from workhours.services.order_store import OrderStore

logger = logging.getLogger(__name__)

DRAFT_FIELDS: tuple[str, ...] = tuple(WorkOrderDraft.model_fields)


class OrderFormController:
    """Owns one unsaved work order and the values shown next to it.

    The draft keeps raw input until ``save``; saving does not clear it.
    """

    def __init__(self, store: OrderStore, preferences: Preferences, draft: WorkOrderDraft | None = None) -> None:
        self.store = store
        self.preferences = preferences
        self.draft = draft or WorkOrderDraft()

    def update(self, **changes: Any) -> WorkOrderDraft:
        """Apply field edits to the draft, validating the resulting field types."""
        unknown: set[str] = set(changes) - set(DRAFT_FIELDS)
        if unknown:
            raise ValueError(f"Unknown draft field(s): {', '.join(sorted(unknown))}")
        self.draft = WorkOrderDraft.model_validate({**self.draft.model_dump(), **changes})
        return self.draft

    def set_date(self, value: date) -> None:
        self.update(date=value)

    def set_preferences(self, preferences: Preferences) -> None:
        self.preferences = preferences

    @property
    def toggle_label(self) -> str:
        return "External Order" if self.draft.is_external else "Internal Order"

    @property
    def save_label(self) -> str:
        return "Save External Order" if self.draft.is_external else "Save Internal Order"

    def derived_hours(self) -> int:
        return derived_hours_from_text(
            self.draft.customer_amount,
            self.preferences.net_percentage,
            self.preferences.hour_rate,
        )

    def hours_preview(self) -> str | None:
        """Return the hours-to-book text for external orders with an amount entered."""
        if not self.draft.is_external or self.draft.customer_amount == "":
            return None
        return format_hours_to_book(self.derived_hours())

    def cost(self) -> float | None:
        return internal_cost(self.draft.hours_booked, self.preferences.hour_rate)

    def cost_preview(self) -> str | None:
        """Return the cost text for internal orders when hours and rate are positive."""
        if self.draft.is_external:
            return None
        total: float | None = self.cost()
        if total is None:
            return None
        return format_cost(total, settings.currency_symbol)

    def save(self) -> StoreResult:
        result: StoreResult = self.store.save(self.draft)
        if not result.ok:
            logger.warning("[FORM] Save failed: %s", result.error)
        return result
