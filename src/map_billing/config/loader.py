"""YAML tariff tables.

File shape::

    tariffs:
      - name: Dynamic Map
        unit_price: 0.1
        free_quota: 10000000
        volume_rule: page_views
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

from map_billing.config.tariff import TariffTable

logger = logging.getLogger(__name__)


def default_tariff_file() -> Path:
    """Path of the bundled Naver Maps price list (``map_billing/tariffs/naver_maps.yaml``)."""
    return Path(__file__).resolve().parent.parent / "tariffs" / "naver_maps.yaml"


def load_tariff_table(path: str | Path) -> TariffTable:
    """Load and validate a tariff table from a YAML file.

    Raises ``ValueError`` when the document is not a mapping, and
    ``pydantic.ValidationError`` when a tariff is malformed.
    """
    path = Path(path)
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a mapping with a 'tariffs' list, got {type(data).__name__}")
    table = TariffTable(**data)
    logger.info("Loaded %d tariffs from %s", len(table.tariffs), path)
    return table
