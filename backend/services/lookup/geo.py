"""ZIP code to state/metro resolution.

Tier 1: exact 5-digit match in the bundled zip_state table.
Tier 2: inclusive numeric ZIP ranges, first match wins.
"""

import logging

from models.schemas.occupation import GeoLocation
from services.lookup.base import BaseTableResolver

logger = logging.getLogger(__name__)

# (low, high, state, metro) - order matters, first match wins
ZIP_RANGES: tuple[tuple[int, int, str, str | None], ...] = (
    (90000, 96199, "CA", "Los Angeles"),
    (32000, 34999, "FL", None),
    (10000, 14999, "NY", None),
    (20000, 20599, "DC", None),
    (22000, 24699, "VA", None),
    (38600, 39799, "MS", "Jackson"),
    (75000, 79999, "TX", "Houston"),
)


def resolve_by_range(zip_number: int) -> GeoLocation | None:
    for low, high, state, metro in ZIP_RANGES:
        if low <= zip_number <= high:
            return GeoLocation(state=state, metro=metro)
    return None


class GeoResolver(BaseTableResolver):
    resolver_name = "zip_state"

    def index_rows(self, rows: list[dict[str, str]]) -> dict[str, str]:
        return {r["zip"]: r["state"] for r in rows if r.get("zip") and r.get("state")}

    def resolve(self, zip_code: str) -> GeoLocation | None:
        """Resolve a ZIP (only the first 5 characters are used) to a location."""
        zip5 = (zip_code or "")[:5]
        try:
            zip_number = int(zip5)
        except ValueError:
            return None

        zip_map = self.load_table()
        if zip_map:
            state = zip_map.get(zip5)
            if state:
                return GeoLocation(state=state)

        location = resolve_by_range(zip_number)
        if location is None:
            logger.debug("No state found for ZIP %s", zip5)
        return location
