"""FastAPI server — HTTP front for the billing estimator.

Run with:
    uvicorn map_billing.api.server:app --reload --port 8000

Or:
    map-billing-api

Endpoints:
    GET  /                 — welcome + pointers
    GET  /health           — liveness probe
    GET  /tariffs          — the active tariff table
    POST /estimate         — itemised monthly bill for a traffic form
    POST /cadence/convert  — re-express a visit count in another cadence
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field, field_validator

from map_billing import __version__
from map_billing.config.loader import load_tariff_table
from map_billing.config.settings import Settings, configure_logging
from map_billing.config.tariff import ServiceTariff, TariffTable, check_unique_names, default_tariff_table
from map_billing.config.traffic import Cadence
from map_billing.engine.billing import compute_billing
from map_billing.engine.cadence import convert_cadence
from map_billing.engine.volume import derive_platform_volumes
from map_billing.models.results import BillingSummary, PlatformVolumes
from map_billing.api.forms import TrafficForm, coerce_number
from map_billing.api.formatting import (
    format_count,
    format_platform_volumes,
    format_row,
    format_won,
    render_report,
)

logger = logging.getLogger(__name__)


# ═══════════════════════════════════════════════════════════════════════════
# App setup
# ═══════════════════════════════════════════════════════════════════════════

def _load_active_tariffs(settings: Settings) -> TariffTable:
    """Tariff file from settings if given, else the built-in price list."""
    if settings.tariff_file:
        return load_tariff_table(settings.tariff_file)
    return default_tariff_table()


settings = Settings.from_env()

app = FastAPI(
    title="Map API Billing Estimator",
    version=__version__,
    description=(
        "Estimates the monthly Naver Maps API bill from website and mobile "
        "visit counts and behavioural rates. Each service's free quota is "
        "applied before its per-call price."
    ),
)
app.state.tariffs = _load_active_tariffs(settings)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


# ═══════════════════════════════════════════════════════════════════════════
# Request / response models
# ═══════════════════════════════════════════════════════════════════════════

class EstimateRequest(BaseModel):
    """Request body for /estimate.  All fields optional — missing values count as zero."""
    traffic: TrafficForm = Field(
        default_factory=TrafficForm,
        description="Raw form values. Example: "
                    "{'web_visits': '10,000', 'web_cadence': 'daily', 'web_search_rate': 0.3}",
    )
    tariffs: list[ServiceTariff] | None = Field(
        default=None,
        description="Optional replacement tariff table for this request only. "
                    "None = the server's active table.",
    )

    @field_validator("tariffs")
    @classmethod
    def _names_unique(cls, tariffs: list[ServiceTariff] | None) -> list[ServiceTariff] | None:
        if tariffs is not None:
            if not tariffs:
                raise ValueError("tariff table must not be empty")
            check_unique_names(tariffs)
        return tariffs


class EstimateResponse(BaseModel):
    """Response from /estimate."""
    summary: BillingSummary
    display: list[dict[str, str]]
    totals_display: dict[str, str]
    platform_volumes: PlatformVolumes
    """Searches and directions per platform, before they are combined into service rows."""
    platform_display: dict[str, str]
    report: str = ""


class CadenceRequest(BaseModel):
    """Request body for /cadence/convert."""
    value: Any = Field(default=0, description="Visit count as typed (number or text)")
    from_unit: Cadence = "monthly"
    to_unit: Cadence = "monthly"


# ═══════════════════════════════════════════════════════════════════════════
# Endpoints
# ═══════════════════════════════════════════════════════════════════════════

@app.get("/health")
def health_check():
    """Health check for deployment platforms."""
    return {"status": "ok"}


@app.get("/")
def root():
    """API root — returns a welcome message and pointers."""
    return {
        "name": "Map API Billing Estimator",
        "version": __version__,
        "start_here": "GET /tariffs, then POST /estimate",
        "docs": "GET /docs (interactive Swagger UI)",
    }


@app.get("/tariffs", response_model=TariffTable)
def get_tariffs():
    """The active tariff table, in billing order."""
    return app.state.tariffs


@app.post("/estimate", response_model=EstimateResponse)
def estimate(req: EstimateRequest):
    """Compute the itemised monthly bill.

    Example minimal request:
    ```json
    {"traffic": {"web_visits": 6000000, "mobile_visits": 6000000}}
    ```
    """
    tariffs = TariffTable(tariffs=tuple(req.tariffs)) if req.tariffs is not None else app.state.tariffs
    traffic = req.traffic.to_input()
    summary = compute_billing(tariffs, traffic)
    platform_volumes = derive_platform_volumes(traffic)

    logger.info(
        "Estimate: %d services, visits=%s, total=%s",
        len(summary.rows), format_count(summary.total_visits), format_won(summary.total_cost),
    )
    return EstimateResponse(
        summary=summary,
        display=[format_row(r) for r in summary.rows],
        totals_display={
            "total_visits": format_count(summary.total_visits),
            "total_cost": format_won(summary.total_cost),
        },
        platform_volumes=platform_volumes,
        platform_display=format_platform_volumes(platform_volumes),
        report=render_report(summary),
    )


@app.post("/cadence/convert")
def cadence_convert(req: CadenceRequest):
    """Re-express a visit count when the user switches the cadence selector."""
    value = coerce_number(req.value)
    return {
        "value": convert_cadence(value, req.from_unit, req.to_unit),
        "from_unit": req.from_unit,
        "to_unit": req.to_unit,
    }


# ═══════════════════════════════════════════════════════════════════════════
# CLI entry point
# ═══════════════════════════════════════════════════════════════════════════

def main():
    """Run the API server."""
    import uvicorn

    configure_logging(settings.log_level)
    uvicorn.run(
        "map_billing.api.server:app",
        host=settings.host,
        port=settings.port,
    )


if __name__ == "__main__":
    main()
