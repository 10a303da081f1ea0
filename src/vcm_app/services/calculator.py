from __future__ import annotations

import math
from typing import Iterator, List, Sequence

from ..core.logging import get_logger
from ..models.results import VCMAnalysis
from ..models.valuation import DEFAULT_RATE_GRID, SensitivityPoint, VCMInput, VCMResults
from .formatting import build_display_metrics
from .formulas import build_formula_breakdowns


logger = get_logger(__name__)

MILLION = 1_000_000


def _is_odd_integer(value: float) -> bool:
    return math.isfinite(value) and value == int(value) and int(value) % 2 == 1


def ieee_divide(numerator: float, denominator: float) -> float:
    """Float division that returns inf/nan on a zero denominator instead of raising."""
    try:
        return numerator / denominator
    except ZeroDivisionError:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


def ieee_pow(base: float, exponent: float) -> float:
    """math.pow with overflow and domain errors mapped to inf/nan."""
    try:
        return math.pow(base, exponent)
    except OverflowError:
        if base < 0 and _is_odd_integer(exponent):
            return -math.inf
        return math.inf
    except ValueError:
        # 0 ** negative is a pole, negative ** fractional has no real result
        if base == 0:
            if _is_odd_integer(exponent):
                return math.copysign(math.inf, base)
            return math.inf
        return math.nan


def exit_value_of(inputs: VCMInput) -> float:
    return inputs.revenue_total * inputs.exit_multiple


def compute_results(inputs: VCMInput) -> VCMResults:
    investment = inputs.investment_total

    exit_value = exit_value_of(inputs)
    discount_power_factor = ieee_pow(1 + inputs.discount_rate_pct / 100, inputs.years_to_exit)
    valuation_today = ieee_divide(exit_value, discount_power_factor)
    pre_money_valuation = valuation_today - investment
    vc_ownership = ieee_divide(investment, valuation_today)
    exit_payout = exit_value * vc_ownership
    expected_roi_multiple = ieee_divide(exit_payout, investment)
    expected_profit = exit_payout - investment

    logger.debug(
        "VCM evaluated: exit=%s factor=%s valuation=%s ownership=%s",
        exit_value,
        discount_power_factor,
        valuation_today,
        vc_ownership,
    )
    return VCMResults(
        exit_value=exit_value,
        discount_power_factor=discount_power_factor,
        valuation_today=valuation_today,
        pre_money_valuation=pre_money_valuation,
        vc_ownership=vc_ownership,
        expected_roi_multiple=expected_roi_multiple,
        expected_profit=expected_profit,
    )


def iter_sensitivity(
    inputs: VCMInput,
    rate_grid: Sequence[float] = DEFAULT_RATE_GRID,
) -> Iterator[SensitivityPoint]:
    exit_value = exit_value_of(inputs)
    for rate in rate_grid:
        valuation = ieee_divide(exit_value, ieee_pow(1 + rate, inputs.years_to_exit))
        yield SensitivityPoint(
            rate_label=f"{rate * 100:.0f}%",
            rate=rate,
            valuation_millions=valuation / MILLION,
        )


def compute_sensitivity(
    inputs: VCMInput,
    rate_grid: Sequence[float] = DEFAULT_RATE_GRID,
) -> List[SensitivityPoint]:
    return list(iter_sensitivity(inputs, rate_grid))


class VCMCalculator:
    def __init__(self, rate_grid: Sequence[float] = DEFAULT_RATE_GRID, currency_symbol: str = "€") -> None:
        self.rate_grid = tuple(rate_grid)
        self.currency_symbol = currency_symbol

    def run(self, inputs: VCMInput) -> VCMAnalysis:
        results = compute_results(inputs)
        sensitivity = compute_sensitivity(inputs, self.rate_grid)
        return VCMAnalysis(
            inputs=inputs,
            results=results,
            sensitivity=sensitivity,
            display=build_display_metrics(results, self.currency_symbol),
            formulas=build_formula_breakdowns(inputs, results, self.currency_symbol),
        )
