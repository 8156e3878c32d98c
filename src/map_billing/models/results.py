"""Result types — the contract between the engine and its callers.

Everything here is derived: recomputed from a ``TrafficInput`` and a
``TariffTable`` on every call, never mutated or fed back into the engine.
"""

from __future__ import annotations

from pydantic import BaseModel


class ServiceUsageRow(BaseModel):
    """One line of the bill — a single service's volume and charge."""

    name: str
    display_name: str
    unit_price: float
    free_quota: int

    calls: float
    """Raw monthly call estimate (may be fractional, or negative for out-of-range rates)."""

    rounded_calls: int
    """``calls`` rounded half away from zero — the figure shown and charged."""

    chargeable_calls: int
    """max(rounded_calls − free_quota, 0).  Never negative."""

    cost: float
    """chargeable_calls × unit_price (KRW).  No currency rounding applied."""


class BillingSummary(BaseModel):
    """Itemised monthly estimate.  ``rows`` follow tariff declaration order."""

    rows: list[ServiceUsageRow]
    total_visits: float
    """web_monthly_visits + mobile_monthly_visits."""
    total_cost: float
    """Sum of ``row.cost`` over all rows."""

    def row(self, name: str) -> ServiceUsageRow:
        """Look up a row by service name.  Raises ``KeyError`` if absent."""
        for r in self.rows:
            if r.name == name:
                return r
        raise KeyError(name)


class PlatformVolumes(BaseModel):
    """Searches and directions requests per platform, rounded like the bill.

    Shown next to each rate input so the user can sanity-check a rate
    before reading the combined per-service rows.
    """

    web_searches: int
    mobile_searches: int
    web_directions: int
    mobile_directions: int
