"""Configuration models — tariffs, traffic inputs, server settings."""

from map_billing.config.tariff import ServiceTariff, TariffTable, default_tariff_table
from map_billing.config.traffic import Cadence, TrafficInput
from map_billing.config.loader import load_tariff_table, default_tariff_file
from map_billing.config.settings import Settings, configure_logging

__all__ = [
    "ServiceTariff",
    "TariffTable",
    "default_tariff_table",
    "Cadence",
    "TrafficInput",
    "load_tariff_table",
    "default_tariff_file",
    "Settings",
    "configure_logging",
]
