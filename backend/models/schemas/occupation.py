"""Occupation lookup contracts: branch, category, geo, wage and the combined context."""

from enum import Enum

from pydantic import BaseModel


class Branch(str, Enum):
    ARMY = "army"
    NAVY = "navy"
    AIR_FORCE = "air_force"
    MARINES = "marines"
    SPACE_FORCE = "space_force"
    COAST_GUARD = "coast_guard"


class OccupationCategory(str, Enum):
    """Internal occupation categories, in classification order."""
    CYBER = "cyber"
    INFANTRY = "infantry"
    LAW_ENFORCEMENT = "law_enforcement"
    MEDICAL = "medical"
    LOGISTICS = "logistics"
    INTEL = "intel"
    AVIATION = "aviation"
    ENGINEERING = "engineering"
    ADMIN = "admin"
    FOOD_SERVICE = "food_service"


class GeoLocation(BaseModel):
    state: str
    metro: str | None = None


class WageDistribution(BaseModel):
    """Annual wage distribution for one SOC in one state."""
    median: float = 0.0
    p25: float = 0.0
    p75: float = 0.0


class CertPath(BaseModel):
    name: str
    provider: str
    estimated_study_time_hours: int = 0
    exam_cost_usd: float = 0.0
    covered_by_cool: bool = False


class OccupationContext(BaseModel):
    """Resolved occupation data handed to the career insight generator.

    ``wage`` is None when the ZIP could not be resolved; downstream
    consumers proceed with the partial context.
    """
    code: str
    branch: Branch
    zip: str = ""
    geo: GeoLocation | None = None
    socs: list[str] = []
    wage: WageDistribution | None = None
    category: OccupationCategory | None = None
    cert_paths: list[CertPath] = []
