"""Form coercion — turns what a calculator form submits into a ``TrafficInput``.

Form fields arrive as text.  Empty or unparsable values count as zero; that
is the calculator's convention, not an error.
"""

from __future__ import annotations

import logging
import math
from typing import Any

from pydantic import BaseModel, Field

from map_billing.config.traffic import Cadence, TrafficInput
from map_billing.engine.cadence import to_monthly

logger = logging.getLogger(__name__)


def coerce_number(raw: Any) -> float:
    """Best-effort numeric coercion for a form value.

    Numbers pass through; numeric strings are parsed with thousands
    separators stripped (``"1,000"`` → 1000.0).  ``None``, empty, unparsable,
    NaN and infinite values become 0.0.
    """
    if raw is None or isinstance(raw, bool):
        return 0.0
    if isinstance(raw, (int, float)):
        value = float(raw)
    else:
        text = str(raw).strip().replace(",", "")
        if not text:
            return 0.0
        try:
            value = float(text)
        except ValueError:
            logger.debug("Unparsable form value %r treated as 0", raw)
            return 0.0
    if not math.isfinite(value):
        logger.debug("Non-finite form value %r treated as 0", raw)
        return 0.0
    return value


class TrafficForm(BaseModel):
    """Raw calculator form.  Visit counts are in the cadence the user picked."""

    web_visits: Any = Field(default=0, description="Website visits, in web_cadence")
    web_cadence: Cadence = Field(default="monthly", description="'daily', 'weekly' or 'monthly'")
    mobile_visits: Any = Field(default=0, description="Mobile app visits, in mobile_cadence")
    mobile_cadence: Cadence = Field(default="monthly", description="'daily', 'weekly' or 'monthly'")
    web_search_rate: Any = Field(default=0, description="Fraction of web visits that search (e.g. 0.3)")
    mobile_search_rate: Any = Field(default=0, description="Fraction of mobile visits that search")
    web_directions_rate: Any = Field(default=0, description="Fraction of web visits that request directions")
    mobile_directions_rate: Any = Field(default=0, description="Fraction of mobile visits that request directions")

    def to_input(self) -> TrafficInput:
        """Coerce every field and normalise visits to monthly."""
        return TrafficInput(
            web_monthly_visits=to_monthly(coerce_number(self.web_visits), self.web_cadence),
            mobile_monthly_visits=to_monthly(coerce_number(self.mobile_visits), self.mobile_cadence),
            web_search_rate=coerce_number(self.web_search_rate),
            mobile_search_rate=coerce_number(self.mobile_search_rate),
            web_directions_rate=coerce_number(self.web_directions_rate),
            mobile_directions_rate=coerce_number(self.mobile_directions_rate),
        )
