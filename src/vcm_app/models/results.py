from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel

from .valuation import SensitivityPoint, VCMInput, VCMResults


class FormulaBreakdown(BaseModel):
    label: str
    formula: str
    calculation: str
    extra_formula: Optional[str] = None
    extra_calculation: Optional[str] = None


class DisplayMetrics(BaseModel):
    exit_value: str
    discount_power_factor: str
    valuation_today: str
    pre_money_valuation: str
    vc_ownership: str
    expected_roi_multiple: str
    expected_profit: str


class VCMAnalysis(BaseModel):
    inputs: VCMInput
    results: VCMResults
    sensitivity: List[SensitivityPoint]
    display: DisplayMetrics
    formulas: List[FormulaBreakdown]
