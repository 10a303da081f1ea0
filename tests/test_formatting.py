from __future__ import annotations

import math

import pytest

from vcm_app.sample_data import build_sample_input
from vcm_app.services.calculator import compute_results
from vcm_app.services.formatting import (
    build_display_metrics,
    format_currency,
    format_multiple,
    format_percent,
)
from vcm_app.services.formulas import build_formula_breakdowns


@pytest.mark.parametrize(
    "value, expected",
    [
        (1_500_000, "€1.5M"),
        (1_000_000, "€1.0M"),
        (999_999, "€1000.0k"),
        (2_500, "€2.5k"),
        (1_000, "€1.0k"),
        (999, "€999"),
        (42, "€42"),
        (0, "€0"),
        (-2_500, "€-2.5k"),
        (-3_000_000, "€-3.0M"),
    ],
)
def test_format_currency_thresholds(value, expected):
    assert format_currency(value) == expected


def test_format_currency_custom_symbol():
    assert format_currency(2_500, symbol="$") == "$2.5k"


def test_non_finite_values_render_not_available():
    assert format_currency(math.inf) == "N/A"
    assert format_currency(math.nan) == "N/A"
    assert format_percent(math.inf) == "N/A"
    assert format_multiple(math.nan) == "N/A"


def test_percent_and_multiple():
    assert format_percent(0.3373) == "33.7%"
    assert format_percent(0.5, decimals=0) == "50%"
    assert format_multiple(10.12) == "10.1x"


def test_display_metrics_for_sample():
    display = build_display_metrics(compute_results(build_sample_input()))

    assert display.exit_value == "€300.0M"
    assert display.discount_power_factor == "6.4097"
    assert display.valuation_today == "€46.8M"
    assert display.pre_money_valuation == "€36.8M"
    assert display.vc_ownership == "21.4%"
    assert display.expected_roi_multiple == "6.4x"
    assert display.expected_profit == "€54.1M"


def test_display_metrics_for_zero_investment():
    inputs = build_sample_input().model_copy(update={"investment_amount": 0})
    display = build_display_metrics(compute_results(inputs))

    assert display.vc_ownership == "0.0%"
    assert display.expected_roi_multiple == "N/A"


def test_formula_breakdowns_for_sample():
    inputs = build_sample_input()
    exit_card, valuation_card, ownership_card, roi_card = build_formula_breakdowns(inputs, compute_results(inputs))

    assert exit_card.calculation == "= €50.0M × 6x = €300.0M"
    assert valuation_card.calculation == "= €300.0M / (1,45)^5 = €46.8M"
    assert valuation_card.extra_formula == "Pre-money = Valuation - Investment"
    assert valuation_card.extra_calculation == "= €46.8M - €10.0M = €36.8M"
    assert ownership_card.calculation == "= €10.0M / €46.8M = 21.4%"
    assert roi_card.calculation == "= (€300.0M × 21.4%) / €10.0M = 6.4x"
    assert exit_card.extra_formula is None
