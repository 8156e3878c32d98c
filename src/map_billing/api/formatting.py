"""Display formatting and the plain-text bill.

Converts a ``BillingSummary`` into the strings a calculator table shows:
thousands separators on counts, a ``원`` suffix on amounts.
"""

from __future__ import annotations

from map_billing.engine.charge import round_half_away_from_zero
from map_billing.models.results import BillingSummary, PlatformVolumes, ServiceUsageRow

CURRENCY_SUFFIX = "원"
COUNT_SUFFIX = " 회"


def format_count(value: float) -> str:
    """Whole-number count with thousands separators: 2000000 → '2,000,000'."""
    return f"{round_half_away_from_zero(value):,}"


def format_won(amount: float) -> str:
    """KRW amount: '200,000원', '0.5원', '0.125원'.  At most three decimals, like ko-KR locale output."""
    text = f"{amount:,.3f}".rstrip("0").rstrip(".")
    if text == "-0":
        text = "0"
    return text + CURRENCY_SUFFIX


def format_row(row: ServiceUsageRow) -> dict[str, str]:
    return {
        "service": row.display_name,
        "unit_price": format_won(row.unit_price),
        "free_quota": format_count(row.free_quota),
        "calls": format_count(row.rounded_calls),
        "chargeable_calls": format_count(row.chargeable_calls),
        "cost": format_won(row.cost),
    }


def format_platform_volumes(volumes: PlatformVolumes) -> dict[str, str]:
    """Per-platform hints shown under each rate input: '예상 검색 수: 3,000 회'."""
    return {field: format_count(value) + COUNT_SUFFIX for field, value in volumes.model_dump().items()}


def render_report(summary: BillingSummary) -> str:
    """Fixed-width text table of the bill, one line per service plus totals."""
    header = ("Service", "Calls", "Free quota", "Chargeable", "Unit price", "Cost")
    lines_data = [
        (f["service"], f["calls"], f["free_quota"], f["chargeable_calls"], f["unit_price"], f["cost"])
        for f in (format_row(r) for r in summary.rows)
    ]
    widths = [
        max(len(header[i]), *(len(line[i]) for line in lines_data)) if lines_data else len(header[i])
        for i in range(len(header))
    ]

    def _fmt(cells: tuple[str, ...]) -> str:
        first = cells[0].ljust(widths[0])
        rest = [c.rjust(w) for c, w in zip(cells[1:], widths[1:])]
        return "  ".join([first, *rest])

    sections: list[str] = [_fmt(header), "-" * (sum(widths) + 2 * (len(widths) - 1))]
    sections.extend(_fmt(line) for line in lines_data)
    sections.append("")
    sections.append(f"Total visits (monthly): {format_count(summary.total_visits)}")
    sections.append(f"Estimated monthly cost: {format_won(summary.total_cost)}")
    return "\n".join(sections)
