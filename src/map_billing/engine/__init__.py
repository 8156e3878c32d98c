"""Engine — pure billing computation."""

from map_billing.engine.cadence import to_monthly, from_monthly, convert_cadence
from map_billing.engine.volume import derive_call_volume, derive_call_volumes, derive_platform_volumes
from map_billing.engine.charge import compute_usage_row, round_half_away_from_zero
from map_billing.engine.billing import compute_billing

__all__ = [
    "to_monthly",
    "from_monthly",
    "convert_cadence",
    "derive_call_volume",
    "derive_call_volumes",
    "derive_platform_volumes",
    "compute_usage_row",
    "round_half_away_from_zero",
    "compute_billing",
]
