from __future__ import annotations

from enum import IntEnum
from typing import List

from pydantic import BaseModel, ConfigDict, Field


class CurrencyUnit(IntEnum):
    ONES = 1
    THOUSANDS = 1_000
    MILLIONS = 1_000_000


class Sector(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    multiple: float = Field(..., description="Revenue exit multiple typical for the sector")


SECTOR_PRESETS: List[Sector] = [
    Sector(name="SaaS", multiple=6),
    Sector(name="DeepTech", multiple=8),
    Sector(name="Fintech", multiple=5),
]


def get_sector(name: str) -> Sector:
    for sector in SECTOR_PRESETS:
        if sector.name.lower() == name.lower():
            return sector
    raise KeyError(name)


class ThemePreference(BaseModel):
    dark_mode: bool = False
