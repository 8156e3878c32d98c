"""Cadence normalisation — daily / weekly / monthly visit counts.

A month is a fixed 30 days and a week is 7/30 of a month.  That is not a
calendar-accurate month, but it keeps the two directions exact inverses:
``from_monthly(to_monthly(x, u), u) == x``.  No rounding happens here.
"""

from __future__ import annotations

from map_billing.config.traffic import Cadence

DAYS_PER_MONTH = 30
DAYS_PER_WEEK = 7


def to_monthly(value: float, unit: Cadence) -> float:
    """Convert a visit count expressed in ``unit`` to a monthly figure."""
    if unit == "daily":
        return value * DAYS_PER_MONTH
    if unit == "weekly":
        return value * DAYS_PER_MONTH / DAYS_PER_WEEK
    if unit == "monthly":
        return value
    raise ValueError(f"unknown cadence: {unit!r}")


def from_monthly(monthly_value: float, unit: Cadence) -> float:
    """Express a monthly figure in ``unit`` — the inverse of ``to_monthly``."""
    if unit == "daily":
        return monthly_value / DAYS_PER_MONTH
    if unit == "weekly":
        return monthly_value * DAYS_PER_WEEK / DAYS_PER_MONTH
    if unit == "monthly":
        return monthly_value
    raise ValueError(f"unknown cadence: {unit!r}")


def convert_cadence(value: float, from_unit: Cadence, to_unit: Cadence) -> float:
    """Re-express a value typed in one cadence in another (cadence selector switch)."""
    monthly = to_monthly(value, from_unit)
    if from_unit == to_unit:
        return value
    return from_monthly(monthly, to_unit)
