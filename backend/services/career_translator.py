"""Orchestrator: occupation code + ZIP -> resolved context -> career guidance.

Pipeline:
1. Branch (given, or inferred from the code shape)
2. ZIP -> state/metro (GeoResolver)
3. Code + branch -> SOC codes (CrosswalkResolver)
4. First SOC + state -> wage distribution (WageResolver, only if geo resolved)
5. Keyword category + local certification paths
6. Gemini career guidance (optional; the context is returned either way)
"""

import logging
from typing import Any

from pydantic import ValidationError

from models.requests import TranslateMosRequest
from models.responses import SalaryEstimate, TranslateMosResponse
from models.schemas.occupation import Branch, CertPath, OccupationContext
from services import gemini_client, prompt_builder
from services.cert_paths import get_cert_paths
from services.lookup.crosswalk import CrosswalkResolver, infer_branch
from services.lookup.geo import GeoResolver
from services.lookup.registry import get_resolver
from services.lookup.wage import WageResolver
from services.mos_classifier import classify

logger = logging.getLogger(__name__)


def build_context(
    code: str,
    zip_code: str,
    branch: Branch | None = None,
    geo: GeoResolver | None = None,
    crosswalk: CrosswalkResolver | None = None,
    wage: WageResolver | None = None,
) -> OccupationContext:
    """Resolve everything the career generator needs for one code + ZIP.

    Resolvers default to the shared registry instances.
    """
    geo = geo or get_resolver("geo")
    crosswalk = crosswalk or get_resolver("crosswalk")
    wage = wage or get_resolver("wage")

    branch = branch or infer_branch(code)
    location = geo.resolve(zip_code)
    socs = crosswalk.resolve(code, branch)

    wages = None
    if location and socs:
        wages = wage.resolve(socs[0], location.state, location.metro)
    else:
        logger.info("Skipping wage lookup for %s: ZIP %s not resolved", code, zip_code)

    return OccupationContext(
        code=code,
        branch=branch,
        zip=zip_code,
        geo=location,
        socs=socs,
        wage=wages,
        category=classify(code),
        cert_paths=get_cert_paths(code, branch),
    )


def _string_list(value: Any) -> list[str]:
    if not isinstance(value, list):
        return []
    return [str(v) for v in value if isinstance(v, (str, int, float)) and str(v).strip()]


def _salary_estimates(value: Any) -> list[SalaryEstimate]:
    estimates: list[SalaryEstimate] = []
    for item in value if isinstance(value, list) else []:
        try:
            estimates.append(SalaryEstimate.model_validate(item))
        except ValidationError as e:
            logger.warning("Dropping malformed salary estimate %r: %s", item, e.error_count())
    return estimates


def _merge_cert_paths(local: list[CertPath], generated: Any) -> list[CertPath]:
    """Local COOL-backed certs first, then generated ones not already listed."""
    merged = list(local)
    known = {c.name.lower() for c in local}
    for item in generated if isinstance(generated, list) else []:
        if not isinstance(item, dict) or not item.get("name"):
            continue
        if str(item["name"]).lower() in known:
            continue
        try:
            cert = CertPath(
                name=str(item["name"]),
                provider=str(item.get("provider", "")),
                estimated_study_time_hours=int(float(item.get("studyHours") or 0)),
                exam_cost_usd=float(item.get("costUSD") or 0),
            )
        except (TypeError, ValueError, ValidationError):
            logger.warning("Dropping malformed cert path %r", item)
            continue
        known.add(cert.name.lower())
        merged.append(cert)
    return merged


async def translate(request: TranslateMosRequest) -> TranslateMosResponse:
    """Resolve the occupation context and enrich it with generated guidance."""
    context = build_context(request.mos.strip(), request.zip.strip(), request.branch)

    prompt = prompt_builder.build_career_prompt(context)
    data = await gemini_client.generate_json(
        prompt, system_instruction=prompt_builder.CAREER_SYSTEM_INSTRUCTION
    )

    if not data:
        logger.warning("Career insight generator unavailable, returning resolved context only")
        return TranslateMosResponse(
            cert_paths=context.cert_paths,
            context=context,
            degraded=True,
        )

    return TranslateMosResponse(
        job_titles=_string_list(data.get("jobTitles")),
        avg_salary=_salary_estimates(data.get("avgSalary")),
        skill_gaps=_string_list(data.get("skillGaps")),
        cert_paths=_merge_cert_paths(context.cert_paths, data.get("certPaths")),
        resume_bullets=_string_list(data.get("resumeBullets")),
        context=context,
    )
