from __future__ import annotations

from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field

from .common import CurrencyUnit, Sector


DEFAULT_RATE_GRID: Tuple[float, ...] = (0.20, 0.30, 0.40, 0.50, 0.60, 0.70)


class VCMInput(BaseModel):
    model_config = ConfigDict(frozen=True)

    year5_revenue: float = Field(50.0, description="Projected revenue in the exit year, in revenue_unit")
    revenue_unit: CurrencyUnit = CurrencyUnit.MILLIONS
    exit_multiple: float = Field(6.0, description="Revenue multiple applied at exit")
    discount_rate_pct: float = Field(45.0, description="Annual target return in percent (45 for 45%)")
    years_to_exit: float = Field(5.0, description="Years until the liquidity event")
    investment_amount: float = Field(10.0, description="Capital invested by the VC, in investment_unit")
    investment_unit: CurrencyUnit = CurrencyUnit.MILLIONS
    sector: str = "SaaS"

    @property
    def revenue_total(self) -> float:
        return self.year5_revenue * self.revenue_unit

    @property
    def investment_total(self) -> float:
        return self.investment_amount * self.investment_unit

    def with_sector(self, sector: Sector) -> "VCMInput":
        return self.model_copy(update={"sector": sector.name, "exit_multiple": sector.multiple})


class VCMResults(BaseModel):
    model_config = ConfigDict(frozen=True)

    exit_value: float
    discount_power_factor: float
    valuation_today: float
    pre_money_valuation: float
    vc_ownership: float = Field(..., description="Fraction of the company acquired, 0.25 for 25%")
    expected_roi_multiple: float
    expected_profit: float

    @property
    def post_money_valuation(self) -> float:
        return self.valuation_today


class SensitivityPoint(BaseModel):
    model_config = ConfigDict(frozen=True)

    rate_label: str
    rate: float
    valuation_millions: float
