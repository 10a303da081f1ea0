from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field

from .models.valuation import VCMInput


class SensitivityRequest(BaseModel):
    inputs: VCMInput
    rate_grid: Optional[List[float]] = Field(
        default=None,
        description="Fractional discount rates to sweep (0.2 for 20%); the dashboard grid is used when omitted",
    )


class ThemeUpdateRequest(BaseModel):
    dark_mode: bool
