"""Service tariffs — unit price + free quota per billable API.

The table is configuration, not state: build it once, pass it into the
engine.  ``default_tariff_table()`` returns a fresh copy of the published
Naver Maps price list every time it is called.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

VolumeRule = Literal["page_views", "search", "directions", "none"]


class ServiceTariff(BaseModel):
    """Pricing rule for one billable service."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1, description="Service identifier, unique within a table")
    unit_price: float = Field(ge=0, description="Cost per chargeable call (KRW)")
    free_quota: int = Field(ge=0, description="Calls per month that are not charged")
    volume_rule: VolumeRule = Field(
        description="Which traffic formula feeds this service (required; an omitted rule "
                    "would silently bill nothing): "
                    "'page_views' (every visit), 'search' (visits × search rate), "
                    "'directions' (visits × directions rate), or 'none' (always 0).",
    )
    display_name: str | None = Field(default=None, description="Optional localised label")

    @property
    def label(self) -> str:
        return self.display_name or self.name


def check_unique_names(tariffs: Sequence[ServiceTariff]) -> None:
    """Raise ``ValueError`` if two tariffs share a name."""
    seen: set[str] = set()
    for tariff in tariffs:
        if tariff.name in seen:
            raise ValueError(f"duplicate tariff name: {tariff.name!r}")
        seen.add(tariff.name)


class TariffTable(BaseModel):
    """Ordered, immutable set of tariffs.  Row order in every result follows this order."""

    model_config = ConfigDict(frozen=True)

    tariffs: tuple[ServiceTariff, ...] = Field(min_length=1)

    @field_validator("tariffs")
    @classmethod
    def _names_unique(cls, tariffs: tuple[ServiceTariff, ...]) -> tuple[ServiceTariff, ...]:
        check_unique_names(tariffs)
        return tariffs

    def names(self) -> list[str]:
        return [t.name for t in self.tariffs]

    def get(self, name: str) -> ServiceTariff:
        """Look up a tariff by name.  Raises ``KeyError`` if absent."""
        for tariff in self.tariffs:
            if tariff.name == name:
                return tariff
        raise KeyError(name)


def default_tariff_table() -> TariffTable:
    """The Naver Maps price list (KRW per call, monthly free quota)."""
    return TariffTable(tariffs=(
        ServiceTariff(name="Dynamic Map", unit_price=0.1, free_quota=10_000_000,
                      volume_rule="page_views", display_name="Dynamic Map (동적 지도)"),
        ServiceTariff(name="Geocoding", unit_price=0.5, free_quota=3_000_000,
                      volume_rule="search", display_name="Geocoding (주소 검색)"),
        ServiceTariff(name="Reverse Geocoding", unit_price=0.5, free_quota=3_000_000,
                      volume_rule="none", display_name="Reverse Geocoding (좌표 변환)"),
        ServiceTariff(name="Static Map", unit_price=2, free_quota=3_000_000,
                      volume_rule="none", display_name="Static Map (정적 지도)"),
        ServiceTariff(name="Directions 5", unit_price=5, free_quota=60_000,
                      volume_rule="directions", display_name="Directions 5 (경유지 5개 이하)"),
        ServiceTariff(name="Directions 15", unit_price=20, free_quota=3_000,
                      volume_rule="none", display_name="Directions 15 (경유지 15개 이하)"),
    ))
