"""Tests for api/forms.py — raw form values → TrafficInput."""

from __future__ import annotations

import pytest

from map_billing.api.forms import TrafficForm, coerce_number
from map_billing.config import default_tariff_table
from map_billing.engine.billing import compute_billing


@pytest.mark.parametrize(
    "raw, expected",
    [
        (1_000, 1_000.0),
        (0.3, 0.3),
        ("42", 42.0),
        (" 0.25 ", 0.25),
        ("1,000", 1_000.0),
        ("-0.5", -0.5),
        ("", 0.0),
        ("   ", 0.0),
        ("abc", 0.0),
        ("12abc", 0.0),
        (None, 0.0),
        (True, 0.0),
        ("nan", 0.0),
        (float("inf"), 0.0),
    ],
)
def test_coerce_number(raw, expected):
    assert coerce_number(raw) == expected


def test_empty_form_is_all_zero():
    traffic = TrafficForm().to_input()
    assert traffic.total_visits == 0
    assert traffic.web_search_rate == 0


def test_daily_visits_normalised_to_monthly():
    traffic = TrafficForm(web_visits="1,000", web_cadence="daily").to_input()
    assert traffic.web_monthly_visits == 30_000


def test_weekly_visits_normalised_to_monthly():
    traffic = TrafficForm(mobile_visits=700, mobile_cadence="weekly").to_input()
    assert traffic.mobile_monthly_visits == pytest.approx(3_000)


def test_platform_cadences_are_independent():
    traffic = TrafficForm(
        web_visits=10, web_cadence="daily",
        mobile_visits=10, mobile_cadence="monthly",
    ).to_input()
    assert traffic.web_monthly_visits == 300
    assert traffic.mobile_monthly_visits == 10


def test_junk_fields_count_as_zero():
    traffic = TrafficForm(
        web_visits="lots", mobile_visits=5_000,
        web_search_rate="?", mobile_search_rate="0.3",
    ).to_input()
    assert traffic.web_monthly_visits == 0
    assert traffic.mobile_monthly_visits == 5_000
    assert traffic.web_search_rate == 0
    assert traffic.mobile_search_rate == pytest.approx(0.3)


def test_out_of_range_rates_pass_through():
    traffic = TrafficForm(web_search_rate="1.5", web_directions_rate=-0.2).to_input()
    assert traffic.web_search_rate == 1.5
    assert traffic.web_directions_rate == -0.2


def test_unknown_cadence_rejected():
    from pydantic import ValidationError

    with pytest.raises(ValidationError):
        TrafficForm(web_cadence="yearly")


def test_daily_form_end_to_end():
    """400k visits a day → 12M a month → 2M chargeable Dynamic Map calls."""
    form = TrafficForm(web_visits="200,000", web_cadence="daily",
                       mobile_visits="200000", mobile_cadence="daily")
    summary = compute_billing(default_tariff_table(), form.to_input())
    assert summary.total_visits == 12_000_000
    assert summary.row("Dynamic Map").chargeable_calls == 2_000_000
