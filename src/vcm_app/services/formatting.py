from __future__ import annotations

import math

from ..models.results import DisplayMetrics
from ..models.valuation import VCMResults


NOT_AVAILABLE = "N/A"


def format_currency(value: float, symbol: str = "€") -> str:
    """Compact money label: millions and thousands get one decimal and an M/k suffix."""
    if not math.isfinite(value):
        return NOT_AVAILABLE
    abs_value = abs(value)
    if abs_value >= 1_000_000:
        return f"{symbol}{value / 1_000_000:.1f}M"
    if abs_value >= 1_000:
        return f"{symbol}{value / 1_000:.1f}k"
    return f"{symbol}{value:.0f}"


def format_percent(fraction: float, decimals: int = 1) -> str:
    if not math.isfinite(fraction):
        return NOT_AVAILABLE
    return f"{fraction * 100:.{decimals}f}%"


def format_multiple(value: float, decimals: int = 1) -> str:
    if not math.isfinite(value):
        return NOT_AVAILABLE
    return f"{value:.{decimals}f}x"


def format_factor(value: float) -> str:
    if not math.isfinite(value):
        return NOT_AVAILABLE
    return f"{value:.4f}"


def build_display_metrics(results: VCMResults, symbol: str = "€") -> DisplayMetrics:
    return DisplayMetrics(
        exit_value=format_currency(results.exit_value, symbol),
        discount_power_factor=format_factor(results.discount_power_factor),
        valuation_today=format_currency(results.valuation_today, symbol),
        pre_money_valuation=format_currency(results.pre_money_valuation, symbol),
        vc_ownership=format_percent(results.vc_ownership),
        expected_roi_multiple=format_multiple(results.expected_roi_multiple),
        expected_profit=format_currency(results.expected_profit, symbol),
    )
