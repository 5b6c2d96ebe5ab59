"""Discharge-aware ranking of scanned benefits by weighted dollar impact."""

import logging
from typing import Iterable

from models.responses import RankedBenefitsResponse
from models.schemas.benefit import Benefit, RankedBenefit

logger = logging.getLogger(__name__)

DEFAULT_WEIGHT = 1.0


def category_weights(separation_type: str | None, has_discharge_code: bool) -> dict[str, float]:
    """Per-category multipliers for the two discharge signals.

    A non-honorable separation discounts education and career benefits;
    a discharge code (RE-3, JKA...) boosts finance, health and cash aid.
    """
    honorable = separation_type == "honorable"
    return {
        "education": 1.0 if honorable else 0.85,
        "finance": 1.1 if has_discharge_code else 1.0,
        "health": 1.15 if has_discharge_code else 1.05,
        "career": 1.0 if honorable else 0.95,
        "cash": 1.1 if has_discharge_code else 1.0,
        "housing": 1.0,
        "other": 1.0,
    }


def rank(
    benefits: Iterable[Benefit],
    separation_type: str | None,
    has_discharge_code: bool,
) -> list[RankedBenefit]:
    """Score each benefit as impact * category weight, highest first.

    Returns new RankedBenefit objects; the input is not modified. The sort
    is stable, so equal scores keep their input order.
    """
    weights = category_weights(separation_type, has_discharge_code)
    ranked = [
        RankedBenefit.model_validate({
            **b.model_dump(by_alias=True),
            "score": b.impact * weights.get(b.category, DEFAULT_WEIGHT),
        })
        for b in benefits
    ]
    return sorted(ranked, key=lambda b: b.score, reverse=True)


def total_value(benefits: Iterable[Benefit]) -> float:
    """Sum of raw impacts (not scores)."""
    return sum(b.impact for b in benefits)


def rank_with_total(
    benefits: list[Benefit],
    separation_type: str | None,
    discharge_code: str | None,
) -> RankedBenefitsResponse:
    ranked = rank(benefits, separation_type, bool(discharge_code))
    logger.info(
        "Ranked %d benefits (separation=%s, discharge_code=%s)",
        len(ranked), separation_type, bool(discharge_code),
    )
    return RankedBenefitsResponse(benefits=ranked, total_value=total_value(ranked))
