"""Pydantic schemas package."""

from workhours.schemas.order import StoreResult, WorkOrderDraft
from workhours.schemas.preferences import ColorScheme, Preferences

__all__ = ["ColorScheme", "Preferences", "StoreResult", "WorkOrderDraft"]
