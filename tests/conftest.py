"""Shared test fixtures — tariff tables and traffic inputs."""

from __future__ import annotations

import pytest

from map_billing.config import ServiceTariff, TariffTable, TrafficInput, default_tariff_table


@pytest.fixture
def tariffs() -> TariffTable:
    return default_tariff_table()


@pytest.fixture
def small_site() -> TrafficInput:
    """10k web + 5k mobile visits a month, 30% search, 10% directions."""
    return TrafficInput(
        web_monthly_visits=10_000,
        mobile_monthly_visits=5_000,
        web_search_rate=0.3,
        mobile_search_rate=0.3,
        web_directions_rate=0.1,
        mobile_directions_rate=0.1,
    )


@pytest.fixture
def busy_site() -> TrafficInput:
    """12M visits a month — well past every free quota that has a traffic signal."""
    return TrafficInput(
        web_monthly_visits=6_000_000,
        mobile_monthly_visits=6_000_000,
        web_search_rate=0.5,
        mobile_search_rate=0.25,
        web_directions_rate=0.02,
        mobile_directions_rate=0.01,
    )


@pytest.fixture
def custom_tariffs() -> TariffTable:
    """A substitute table: different order, prices and quotas."""
    return TariffTable(tariffs=(
        ServiceTariff(name="Directions", unit_price=1.0, free_quota=0, volume_rule="directions"),
        ServiceTariff(name="Map Loads", unit_price=0.01, free_quota=1_000, volume_rule="page_views"),
        ServiceTariff(name="Search", unit_price=2.0, free_quota=100, volume_rule="search"),
    ))
