from pydantic import BaseModel, ConfigDict, Field

from models.schemas.benefit import RankedBenefit
from models.schemas.occupation import CertPath, OccupationCategory, OccupationContext
from models.schemas.task import Resource


class SalaryEstimate(BaseModel):
    title: str
    amount: float = 0.0
    source: str = ""


class TranslateMosResponse(BaseModel):
    job_titles: list[str] = []
    avg_salary: list[SalaryEstimate] = []
    skill_gaps: list[str] = []
    cert_paths: list[CertPath] = []
    resume_bullets: list[str] = []
    context: OccupationContext
    degraded: bool = False


class RankedBenefitsResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    benefits: list[RankedBenefit] = []
    total_value: float = Field(0.0, alias="totalValue")


class TaskGuideResponse(BaseModel):
    category: OccupationCategory | None = None
    insights: list[str] = []
    resources: list[Resource] = []
    steps: list[str] = []
