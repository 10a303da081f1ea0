from __future__ import annotations

from .models.common import CurrencyUnit
from .models.valuation import VCMInput


def build_sample_input() -> VCMInput:
    return VCMInput(
        year5_revenue=50,
        revenue_unit=CurrencyUnit.MILLIONS,
        exit_multiple=6,
        discount_rate_pct=45,
        years_to_exit=5,
        investment_amount=10,
        investment_unit=CurrencyUnit.MILLIONS,
        sector="SaaS",
    )
