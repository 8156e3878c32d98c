"""Billing aggregation — the engine entry point.

Pure: ``compute_billing(tariffs, traffic)`` reads nothing but its arguments
and always returns a complete ``BillingSummary``.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from map_billing.config.tariff import ServiceTariff, TariffTable
from map_billing.config.traffic import TrafficInput
from map_billing.engine.charge import compute_usage_row
from map_billing.engine.volume import derive_call_volume
from map_billing.models.results import BillingSummary

logger = logging.getLogger(__name__)


def compute_billing(
    tariffs: TariffTable | Sequence[ServiceTariff],
    traffic: TrafficInput,
) -> BillingSummary:
    """Itemised monthly bill: one row per tariff, in declaration order, plus totals."""
    tariff_list = tariffs.tariffs if isinstance(tariffs, TariffTable) else tuple(tariffs)

    rows = [
        compute_usage_row(tariff, derive_call_volume(tariff, traffic))
        for tariff in tariff_list
    ]
    total_cost = sum(row.cost for row in rows)

    logger.debug(
        "Computed billing for %d services: visits=%s cost=%s",
        len(rows), traffic.total_visits, total_cost,
    )
    return BillingSummary(
        rows=rows,
        total_visits=traffic.total_visits,
        total_cost=total_cost,
    )
