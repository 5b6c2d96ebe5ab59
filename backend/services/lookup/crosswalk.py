"""Military occupation code -> civilian SOC crosswalk.

Tier 1: branch + code match in the bundled onet_crosswalk table (cached).
Tier 2: code-prefix heuristics (not cached).
Tier 3: a generic management SOC, so the result is never empty.
"""

import logging
import re

from models.schemas.occupation import Branch
from services.lookup.base import BaseTableResolver

logger = logging.getLogger(__name__)

FALLBACK_SOC = "11-1021.00"  # General and Operations Managers

# Ordered prefix heuristics applied to the raw code
PREFIX_HEURISTICS: tuple[tuple[re.Pattern, str], ...] = (
    (re.compile(r"^25"), "15-1232.00"),  # Computer User Support Specialists
    (re.compile(r"^68"), "29-2010.00"),  # Clinical Laboratory Technologists and Technicians
    (re.compile(r"^92"), "11-1021.00"),  # General and Operations Managers
    (re.compile(r"^11"), "33-9032.00"),  # Security Guards
    (re.compile(r"^42"), "43-4161.00"),  # Human Resources Assistants
)

_ARMY_RE = re.compile(r"^[0-9]{2}[A-Z]")
_NAVY_RE = re.compile(r"^[A-Z]{2,3}$")
_AIR_FORCE_RE = re.compile(r"^[0-9][A-Z][0-9]X[0-9]")
_MARINES_RE = re.compile(r"^[0-9]{4}$")


def infer_branch(code: str) -> Branch:
    """Guess the service branch from the shape of an occupation code.

    "25B" -> army (MOS), "IT" -> navy (rating), "3D0X2" -> air_force (AFSC),
    "0311" -> marines (MOS). Anything else defaults to army.
    """
    c = (code or "").strip().upper()
    if _ARMY_RE.match(c):
        return Branch.ARMY
    if _NAVY_RE.match(c):
        return Branch.NAVY
    if _AIR_FORCE_RE.match(c):
        return Branch.AIR_FORCE
    if _MARINES_RE.match(c):
        return Branch.MARINES
    return Branch.ARMY


def heuristic_socs(code: str) -> list[str]:
    for pattern, soc in PREFIX_HEURISTICS:
        if pattern.match(code):
            return [soc]
    return [FALLBACK_SOC]


class CrosswalkResolver(BaseTableResolver):
    resolver_name = "crosswalk"

    def resolve(self, code: str, branch: Branch | str) -> list[str]:
        """Map an occupation code to one or more SOC codes. Never empty."""
        branch_value = Branch(branch).value
        key = f"crosswalk:{branch_value}:{code.upper()}"
        cached = self.cache.get(key)
        if cached is not None:
            logger.debug("Crosswalk cache hit: %s", key)
            return list(cached)

        rows = self.load_table()
        if rows:
            socs = [
                r.get("soc")
                for r in rows
                if r.get("branch") == branch_value
                and r.get("mos", "").upper() == code.upper()
                and r.get("soc")
            ]
            if socs:
                self.cache.set(key, socs)
                return list(socs)

        socs = heuristic_socs(code)
        logger.debug("Crosswalk miss for %s/%s, using heuristic %s", branch_value, code, socs)
        return socs
