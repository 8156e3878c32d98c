"""Traffic inputs — visits and behavioural rates, already monthly.

Rates are deliberately left unconstrained: a rate of 1.3 or -0.5 flows
straight into the call volumes, and only the chargeable-call floor keeps
the bill non-negative.
"""

from typing import Literal

from pydantic import BaseModel, Field

Cadence = Literal["daily", "weekly", "monthly"]


class TrafficInput(BaseModel):
    """Monthly traffic snapshot fed to ``compute_billing``."""

    web_monthly_visits: float = Field(default=0.0, description="Website visits per month")
    mobile_monthly_visits: float = Field(default=0.0, description="Mobile app visits per month")
    web_search_rate: float = Field(default=0.0, description="Fraction of web visits that run an address search")
    mobile_search_rate: float = Field(default=0.0, description="Fraction of mobile visits that run an address search")
    web_directions_rate: float = Field(default=0.0, description="Fraction of web visits that request directions")
    mobile_directions_rate: float = Field(
        default=0.0, description="Fraction of mobile visits that request directions",
    )

    @property
    def total_visits(self) -> float:
        return self.web_monthly_visits + self.mobile_monthly_visits
