"""Certification paths (DoD COOL and commercial) suggested per occupation code."""

import re

from models.schemas.occupation import Branch, CertPath

# Ordered prefix rules; the first match supplies the whole list
CERT_RULES: tuple[tuple[re.Pattern, tuple[CertPath, ...]], ...] = (
    (re.compile(r"^25"), (
        CertPath(name="CompTIA A+", provider="CompTIA", estimated_study_time_hours=40,
                 exam_cost_usd=246, covered_by_cool=True),
        CertPath(name="Security+", provider="CompTIA", estimated_study_time_hours=60,
                 exam_cost_usd=370, covered_by_cool=True),
        CertPath(name="AWS Cloud Practitioner", provider="AWS", estimated_study_time_hours=24,
                 exam_cost_usd=100, covered_by_cool=False),
    )),
)


def get_cert_paths(code: str, branch: Branch | str | None = None) -> list[CertPath]:
    """Return suggested certifications for ``code``.

    ``branch`` is accepted for parity with the crosswalk lookup; the rule
    table is keyed on code prefix only.
    """
    for pattern, certs in CERT_RULES:
        if pattern.match(code or ""):
            return [c.model_copy() for c in certs]
    return []
