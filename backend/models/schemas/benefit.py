"""Benefit records as produced by the benefit scanner, and their ranked form."""

import math
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class BenefitCategory(str, Enum):
    EDUCATION = "education"
    HOUSING = "housing"
    FINANCE = "finance"
    CAREER = "career"
    HEALTH = "health"
    CASH = "cash"
    OTHER = "other"


class Benefit(BaseModel):
    """A single benefit. Only ``category`` and ``impact_usd`` drive ranking.

    Unknown categories are accepted (they rank with weight 1.0) and any
    additional fields from the scanner (title, docs, links...) pass through.
    """
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    id: str = ""
    category: str = BenefitCategory.OTHER.value
    impact_usd: float | None = Field(default=None, alias="impactUSD")

    @field_validator("impact_usd", mode="before")
    @classmethod
    def _coerce_impact(cls, value: Any) -> float | None:
        # Malformed impacts rank as zero instead of failing validation
        if value is None or isinstance(value, bool):
            return None
        try:
            number = float(value)
        except (TypeError, ValueError, OverflowError):
            return None
        if not math.isfinite(number):
            return None
        return number

    @property
    def impact(self) -> float:
        return self.impact_usd or 0.0


class RankedBenefit(Benefit):
    score: float = 0.0
