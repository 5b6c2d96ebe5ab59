"""Pydantic contracts shared by the lookup, guidance and ranking services."""

from models.schemas.benefit import Benefit, BenefitCategory, RankedBenefit
from models.schemas.occupation import (
    Branch,
    CertPath,
    GeoLocation,
    OccupationCategory,
    OccupationContext,
    WageDistribution,
)
from models.schemas.task import Resource, TaskDescriptor

__all__ = [
    "Benefit",
    "BenefitCategory",
    "RankedBenefit",
    "Branch",
    "CertPath",
    "GeoLocation",
    "OccupationCategory",
    "OccupationContext",
    "WageDistribution",
    "Resource",
    "TaskDescriptor",
]
