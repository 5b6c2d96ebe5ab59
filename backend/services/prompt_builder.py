"""Prompt templates for the career insight generator."""

from models.schemas.occupation import OccupationContext

CAREER_SYSTEM_INSTRUCTION = (
    "You are an expert military transition counselor specializing in translating "
    "military experience to civilian careers. You provide accurate, realistic, and "
    "actionable career guidance."
)


def _location_line(context: OccupationContext) -> str:
    line = f"ZIP {context.zip}"
    if context.geo:
        place = context.geo.state
        if context.geo.metro:
            place += f", {context.geo.metro}"
        line += f" ({place})"
    return line


def build_career_prompt(context: OccupationContext) -> str:
    """Career translation prompt built from the resolved occupation context.

    Wage data is included only when it was resolved; the generator is told
    to estimate otherwise.
    """
    salary_section = ""
    if context.wage:
        salary_section = (
            f"Local Salary Data: Median ${context.wage.median:,.0f}, "
            f"25th percentile ${context.wage.p25:,.0f}, "
            f"75th percentile ${context.wage.p75:,.0f}\n"
        )

    return f"""Analyze this service member's military occupational specialty and provide detailed civilian career guidance.

MOS/AFSC/Rating/NEC: {context.code}
Branch: {context.branch.value}
Location: {_location_line(context)}
O*NET SOC Codes: {', '.join(context.socs) or 'None mapped'}
{salary_section}
Respond with ONLY valid JSON (no markdown, no code fences) in this exact structure:
{{
  "jobTitles": [<5-8 realistic civilian job titles veterans with this MOS actually get hired for>],
  "avgSalary": [{{"title": "<job title>", "amount": <number>, "source": "<data source>"}}],
  "skillGaps": [<3-6 specific skills, certifications, or qualifications commonly missing>],
  "certPaths": [{{"name": "<certification>", "studyHours": <number>, "costUSD": <number>, "provider": "<provider>"}}],
  "resumeBullets": [<4-6 military-to-civilian resume bullets with action verbs and quantified results>]
}}

Guidelines:
- Use the local salary data when provided, otherwise estimate from role and location
- Cert paths should include DoD COOL-eligible certs when applicable for this MOS
- Resume bullets should translate military jargon to civilian terms
- Be realistic about entry points vs. aspirational roles"""
