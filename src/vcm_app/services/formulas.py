"""
Human-readable formula cards.

Each card pairs the symbolic formula with the same formula evaluated on the
current inputs, so a reader can follow how every headline number was built.
"""

from __future__ import annotations

from typing import List

from ..models.results import FormulaBreakdown
from ..models.valuation import VCMInput, VCMResults
from .formatting import format_currency, format_multiple, format_percent


def _plain(value: float) -> str:
    return f"{value:g}"


def _growth_base(discount_rate_pct: float) -> str:
    # decimal comma, as shown on the dashboard: (1,45)
    return _plain(1 + discount_rate_pct / 100).replace(".", ",")


def build_formula_breakdowns(inputs: VCMInput, results: VCMResults, symbol: str = "€") -> List[FormulaBreakdown]:
    def money(value: float) -> str:
        return format_currency(value, symbol)

    investment = inputs.investment_total
    ownership = format_percent(results.vc_ownership)

    exit_card = FormulaBreakdown(
        label="Exit Formula",
        formula="Exit Value = Year 5 Revenue × Multiple",
        calculation=(
            f"= {money(inputs.revenue_total)} × {_plain(inputs.exit_multiple)}x "
            f"= {money(results.exit_value)}"
        ),
    )
    valuation_card = FormulaBreakdown(
        label="Valuation Formula",
        formula="Valuation = Exit / (1 + DR)^Years",
        calculation=(
            f"= {money(results.exit_value)} / ({_growth_base(inputs.discount_rate_pct)})^{_plain(inputs.years_to_exit)} "
            f"= {money(results.valuation_today)}"
        ),
        extra_formula="Pre-money = Valuation - Investment",
        extra_calculation=(
            f"= {money(results.valuation_today)} - {money(investment)} "
            f"= {money(results.pre_money_valuation)}"
        ),
    )
    ownership_card = FormulaBreakdown(
        label="Ownership Formula",
        formula="Ownership = Investment / Valuation",
        calculation=f"= {money(investment)} / {money(results.valuation_today)} = {ownership}",
    )
    roi_card = FormulaBreakdown(
        label="ROI Formula",
        formula="ROI = (Exit × Ownership) / Investment",
        calculation=(
            f"= ({money(results.exit_value)} × {ownership}) / {money(investment)} "
            f"= {format_multiple(results.expected_roi_multiple)}"
        ),
    )
    return [exit_card, valuation_card, ownership_card, roi_card]
