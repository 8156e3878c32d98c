"""Call-volume derivation — traffic × behavioural rates → monthly calls per service.

Each tariff names the formula that feeds it (``volume_rule``):

  page_views  web + mobile                          (one map load per visit)
  search      web × web_search + mobile × mobile_search
  directions  web × web_directions + mobile × mobile_directions
  none        0                                     (no traffic signal maps to it)

Rates are not clamped.  Negative or >1 rates produce negative or inflated
volumes; the charge step's zero floor absorbs them.
"""

from __future__ import annotations

from collections.abc import Sequence

from map_billing.config.tariff import ServiceTariff
from map_billing.config.traffic import TrafficInput
from map_billing.engine.charge import round_half_away_from_zero
from map_billing.models.results import PlatformVolumes


def derive_call_volume(tariff: ServiceTariff, traffic: TrafficInput) -> float:
    """Estimated monthly calls for one service."""
    web = traffic.web_monthly_visits
    mobile = traffic.mobile_monthly_visits

    if tariff.volume_rule == "page_views":
        return web + mobile
    if tariff.volume_rule == "search":
        return web * traffic.web_search_rate + mobile * traffic.mobile_search_rate
    if tariff.volume_rule == "directions":
        return web * traffic.web_directions_rate + mobile * traffic.mobile_directions_rate
    return 0.0


def derive_call_volumes(tariffs: Sequence[ServiceTariff], traffic: TrafficInput) -> list[float]:
    """Call volumes for every tariff, in table order."""
    return [derive_call_volume(t, traffic) for t in tariffs]


def derive_platform_volumes(traffic: TrafficInput) -> PlatformVolumes:
    """Searches and directions requests split by platform, each rounded on its own."""
    return PlatformVolumes(
        web_searches=round_half_away_from_zero(traffic.web_monthly_visits * traffic.web_search_rate),
        mobile_searches=round_half_away_from_zero(traffic.mobile_monthly_visits * traffic.mobile_search_rate),
        web_directions=round_half_away_from_zero(traffic.web_monthly_visits * traffic.web_directions_rate),
        mobile_directions=round_half_away_from_zero(
            traffic.mobile_monthly_visits * traffic.mobile_directions_rate
        ),
    )
