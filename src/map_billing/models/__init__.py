"""Result models — billing output contracts."""

from map_billing.models.results import BillingSummary, PlatformVolumes, ServiceUsageRow

__all__ = [
    "BillingSummary",
    "PlatformVolumes",
    "ServiceUsageRow",
]
