"""Pure helpers for parsing amounts, deriving hours and normalising text."""

from __future__ import annotations

import math
import re

_WORD_RE = re.compile(r"\S+")
_DECIMAL_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def parse_number(value: str | None) -> float | None:
    """Parse user-entered numeric text.

    Returns None for empty or unparsable text. Only plain ASCII decimal
    notation is accepted: no surrounding whitespace, digit grouping,
    non-ASCII digits or non-finite values.
    """
    if value is None or _DECIMAL_RE.fullmatch(value) is None:
        return None
    parsed: float = float(value)
    if not math.isfinite(parsed):
        return None
    return parsed


def parse_number_or_zero(value: str | None) -> float:
    """Parse numeric text, falling back to 0.0."""
    parsed: float | None = parse_number(value)
    return 0.0 if parsed is None else parsed


def derived_hours(
    net_amount: float | None,
    net_percentage: float | None,
    hour_rate: float | None,
) -> int:
    """Return whole hours represented by an amount after the net deduction.

    Missing inputs count as 0 and a zero rate divides by 1. The result is
    not clamped, so negative amounts or percentages above 100 give negative
    hours.
    """
    net: float = net_amount or 0.0
    percentage: float = net_percentage or 0.0
    rate: float = hour_rate or 0.0
    divisor: float = 1.0 if rate == 0 else rate
    hours: float = (net - (net * percentage / 100)) / divisor
    if not math.isfinite(hours):
        return 0
    return math.floor(hours)


def derived_hours_from_text(amount_text: str, net_percentage_text: str, hour_rate_text: str) -> int:
    return derived_hours(
        parse_number_or_zero(amount_text),
        parse_number_or_zero(net_percentage_text),
        parse_number_or_zero(hour_rate_text),
    )


def internal_cost(hours_booked_text: str, hour_rate_text: str) -> float | None:
    """Return hours * rate when both parse and are positive, otherwise None."""
    hours: float | None = parse_number(hours_booked_text)
    rate: float | None = parse_number(hour_rate_text)
    if hours is None or rate is None:
        return None
    if hours <= 0 or rate <= 0:
        return None
    return hours * rate


def format_hours_to_book(hours: int) -> str:
    return f"{hours} hours to book"


def format_cost(total: float, currency_symbol: str = "€") -> str:
    return f"{currency_symbol} {total:.2f}"


def title_case(value: str) -> str:
    """Capitalise each whitespace-separated word, keeping the whitespace."""
    return _WORD_RE.sub(lambda match: match.group(0)[:1].upper() + match.group(0)[1:].lower(), value)


def upper_case(value: str) -> str:
    return value.upper()
