from pydantic import BaseModel, Field

from models.schemas.benefit import Benefit
from models.schemas.occupation import Branch
from models.schemas.task import TaskDescriptor


class TranslateMosRequest(BaseModel):
    mos: str = Field(..., max_length=32, description="MOS, AFSC, NEC or rating code")
    zip: str = Field(..., max_length=10, description="ZIP code of the target location")
    branch: Branch | None = Field(None, description="Service branch; inferred from the code when omitted")


class RankBenefitsRequest(BaseModel):
    benefits: list[Benefit] = Field(default_factory=list, max_length=200)
    separation_type: str | None = Field(None, description="honorable, general, other-than-honorable...")
    discharge_code: str | None = Field(None, description="Reenlistment/separation code such as RE-3 or JKA")


class TaskGuideRequest(BaseModel):
    task: TaskDescriptor
    mos: str = Field("", max_length=32)
