from fastapi import APIRouter, HTTPException, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from config import settings
from models.requests import RankBenefitsRequest, TaskGuideRequest, TranslateMosRequest
from models.responses import RankedBenefitsResponse, TaskGuideResponse, TranslateMosResponse
from services import benefit_ranker, career_translator, gemini_client, mos_guidance
from services.lookup import registry

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)


@router.get("/health")
async def health():
    return {
        "status": "ok",
        "gemini_configured": gemini_client.is_configured(),
        "tables_loaded": registry.loaded_tables(),
    }


@router.post("/translate-mos", response_model=TranslateMosResponse)
@limiter.limit(settings.translate_rate_limit)
async def translate_mos(request: Request, body: TranslateMosRequest):
    if not body.mos.strip() or not body.zip.strip():
        raise HTTPException(status_code=400, detail="MOS and ZIP code are required")

    return await career_translator.translate(body)


@router.post("/benefits/rank", response_model=RankedBenefitsResponse)
async def rank_benefits(body: RankBenefitsRequest):
    return benefit_ranker.rank_with_total(body.benefits, body.separation_type, body.discharge_code)


@router.post("/tasks/guide", response_model=TaskGuideResponse)
async def task_guide(body: TaskGuideRequest):
    if not body.task.title.strip():
        raise HTTPException(status_code=400, detail="Task title is required")

    return mos_guidance.build_guide(body.task, body.mos.strip())
