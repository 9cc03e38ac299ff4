"""User preference schema."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel

from workhours.services.calculations import parse_number_or_zero


class ColorScheme(str, Enum):
    SYSTEM = "system"
    LIGHT = "light"
    DARK = "dark"

    @classmethod
    def from_value(cls, value: str | None) -> ColorScheme:
        """Return the matching scheme, or SYSTEM for unknown values."""
        try:
            return cls((value or "").strip().lower())
        except ValueError:
            return cls.SYSTEM

    def preferred(self) -> str | None:
        """Return the forced appearance, or None to follow the host."""
        if self is ColorScheme.SYSTEM:
            return None
        return self.value


class Preferences(BaseModel):
    """Persisted user preferences; rates are kept as typed."""

    color_scheme: ColorScheme = ColorScheme.SYSTEM
    net_percentage: str = ""
    hour_rate: str = ""

    @property
    def net_percentage_value(self) -> float:
        return parse_number_or_zero(self.net_percentage)

    @property
    def hour_rate_value(self) -> float:
        return parse_number_or_zero(self.hour_rate)
