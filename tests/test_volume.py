"""Tests for engine/volume.py — per-rule call-volume formulas."""

from __future__ import annotations

import pytest

from map_billing.config import ServiceTariff, TariffTable, TrafficInput
from map_billing.engine.volume import derive_call_volume, derive_call_volumes, derive_platform_volumes


def test_dynamic_map_counts_every_visit(tariffs: TariffTable, small_site: TrafficInput):
    assert derive_call_volume(tariffs.get("Dynamic Map"), small_site) == 15_000


def test_geocoding_uses_search_rates(tariffs: TariffTable, small_site: TrafficInput):
    # 10000 × 0.3 + 5000 × 0.3 = 4500
    assert derive_call_volume(tariffs.get("Geocoding"), small_site) == pytest.approx(4_500)


def test_directions_5_uses_directions_rates(tariffs: TariffTable, small_site: TrafficInput):
    # 10000 × 0.1 + 5000 × 0.1 = 1500
    assert derive_call_volume(tariffs.get("Directions 5"), small_site) == pytest.approx(1_500)


def test_platform_rates_are_independent():
    traffic = TrafficInput(
        web_monthly_visits=1_000, mobile_monthly_visits=2_000,
        web_search_rate=0.5, mobile_search_rate=0.1,
        web_directions_rate=0.0, mobile_directions_rate=0.25,
    )
    search = ServiceTariff(name="s", unit_price=0, free_quota=0, volume_rule="search")
    directions = ServiceTariff(name="d", unit_price=0, free_quota=0, volume_rule="directions")
    assert derive_call_volume(search, traffic) == pytest.approx(500 + 200)
    assert derive_call_volume(directions, traffic) == pytest.approx(0 + 500)


@pytest.mark.parametrize("name", ["Reverse Geocoding", "Static Map", "Directions 15"])
def test_unmapped_services_are_always_zero(tariffs: TariffTable, busy_site: TrafficInput, name: str):
    assert derive_call_volume(tariffs.get(name), busy_site) == 0


def test_rates_are_not_clamped(tariffs: TariffTable):
    traffic = TrafficInput(web_monthly_visits=1_000, web_search_rate=-0.5, web_directions_rate=1.5)
    assert derive_call_volume(tariffs.get("Geocoding"), traffic) == pytest.approx(-500)
    assert derive_call_volume(tariffs.get("Directions 5"), traffic) == pytest.approx(1_500)


def test_volumes_follow_table_order(tariffs: TariffTable, small_site: TrafficInput):
    volumes = derive_call_volumes(tariffs.tariffs, small_site)
    assert volumes == pytest.approx([15_000, 4_500, 0, 0, 1_500, 0])


def test_platform_volumes(small_site: TrafficInput):
    volumes = derive_platform_volumes(small_site)
    assert volumes.web_searches == 3_000
    assert volumes.mobile_searches == 1_500
    assert volumes.web_directions == 1_000
    assert volumes.mobile_directions == 500


def test_platform_volumes_round_each_platform_separately():
    traffic = TrafficInput(
        web_monthly_visits=5, mobile_monthly_visits=5,
        web_search_rate=0.1, mobile_search_rate=0.1,
    )
    volumes = derive_platform_volumes(traffic)
    # 0.5 + 0.5 → 1 + 1, not round(1.0)
    assert volumes.web_searches == 1
    assert volumes.mobile_searches == 1
    assert volumes.web_directions == 0
    assert volumes.mobile_directions == 0


def test_platform_volumes_keep_negative_rates():
    volumes = derive_platform_volumes(TrafficInput(web_monthly_visits=1_000, web_search_rate=-0.5))
    assert volumes.web_searches == -500
