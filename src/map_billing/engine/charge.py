"""Per-service charge rule — free quota, then unit price.

    rounded_calls    = round_half_away_from_zero(calls)
    chargeable_calls = max(rounded_calls − free_quota, 0)
    cost             = chargeable_calls × unit_price
"""

from __future__ import annotations

from decimal import Decimal, ROUND_HALF_UP, localcontext

from map_billing.config.tariff import ServiceTariff
from map_billing.models.results import ServiceUsageRow

FLOAT_DIGITS = 400


def round_half_away_from_zero(value: float) -> int:
    """Round to the nearest integer; ties go away from zero (2.5 → 3, −2.5 → −3).

    Python's built-in ``round`` uses banker's rounding, so go through Decimal.
    """
    with localcontext() as ctx:
        # Every finite float has at most 309 integer digits.
        ctx.prec = FLOAT_DIGITS
        return int(Decimal(value).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def compute_usage_row(tariff: ServiceTariff, calls: float) -> ServiceUsageRow:
    """Apply the tariff's free quota and unit price to a raw call estimate."""
    rounded_calls = round_half_away_from_zero(calls)
    chargeable_calls = max(rounded_calls - tariff.free_quota, 0)
    cost = chargeable_calls * tariff.unit_price

    return ServiceUsageRow(
        name=tariff.name,
        display_name=tariff.label,
        unit_price=tariff.unit_price,
        free_quota=tariff.free_quota,
        calls=calls,
        rounded_calls=rounded_calls,
        chargeable_calls=chargeable_calls,
        cost=cost,
    )
