"""SOC + state -> annual wage distribution.

Two cache policies:
    - table tier: rows from bls_oes_state are cached per (soc, state)
    - heuristic tier: computed on every call and never cached

Metro is accepted but not used for lookup or caching; the bundled table
is state-level only.
"""

import logging

from models.schemas.occupation import WageDistribution
from services.lookup.base import BaseTableResolver

logger = logging.getLogger(__name__)

TECH_SOC_PREFIX = "15-"
TECH_BASE_WAGE = 75000
DEFAULT_BASE_WAGE = 60000


def heuristic_wage(soc: str) -> WageDistribution:
    """Estimate a wage distribution when the table has no row for the SOC."""
    base = TECH_BASE_WAGE if soc.startswith(TECH_SOC_PREFIX) else DEFAULT_BASE_WAGE
    return WageDistribution(
        median=base,
        p25=round(base * 0.8),
        p75=round(base * 1.25),
    )


def _to_number(value: str | None) -> float:
    try:
        return float(value) if value not in (None, "") else 0.0
    except ValueError:
        logger.warning("Non-numeric wage value %r, using 0", value)
        return 0.0


class WageResolver(BaseTableResolver):
    resolver_name = "wage"

    def _table_tier(self, soc: str, state: str) -> WageDistribution | None:
        key = f"wage:{soc}:{state}"
        cached = self.cache.get(key)
        if cached is not None:
            return cached.model_copy()

        rows = self.load_table()
        if not rows:
            return None

        match = next((r for r in rows if r.get("soc") == soc and r.get("state") == state), None)
        if match is None:
            return None

        wage = WageDistribution(
            median=_to_number(match.get("median")),
            p25=_to_number(match.get("p25")),
            p75=_to_number(match.get("p75")),
        )
        self.cache.set(key, wage)
        return wage.model_copy()

    def resolve(self, soc: str, state: str, metro: str | None = None) -> WageDistribution:
        if metro:
            logger.debug("Metro %s ignored for wage lookup (state-level table)", metro)

        wage = self._table_tier(soc, state)
        if wage is not None:
            return wage

        logger.debug("No wage row for %s in %s, using heuristic", soc, state)
        return heuristic_wage(soc)
