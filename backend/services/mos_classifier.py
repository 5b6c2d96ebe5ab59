"""Keyword classification of military occupation codes (MOS/AFSC/NEC/Rating).

Matching is plain substring containment on the lower-cased code, and the
first category in declaration order with any matching keyword wins. Codes
are often run together with other text ("25b signal support"), so there is
no word-boundary matching here, unlike skill extraction.
"""

from models.schemas.occupation import OccupationCategory

# Declaration order is the priority order. "11b" is infantry before anything
# else gets a chance, "35f" falls through cyber to intel, and so on.
CATEGORY_KEYWORDS: tuple[tuple[OccupationCategory, tuple[str, ...]], ...] = (
    (OccupationCategory.CYBER, (
        "25", "17c", "26", "35t", "cyber", "signal", "it", "comm", "06",
        "1n4", "3d0", "3d1",
    )),
    (OccupationCategory.INFANTRY, (
        "11", "03", "0311", "31", "18", "infantry", "ranger", "airborne", "combat",
    )),
    (OccupationCategory.LAW_ENFORCEMENT, (
        "3p0", "police", "master-at-arms", "law enforcement", "corrections",
    )),
    (OccupationCategory.MEDICAL, (
        "68", "8404", "medic", "corpsman", "4n0", "medical", "healthcare",
    )),
    (OccupationCategory.LOGISTICS, (
        "88", "92", "3051", "2t", "supply", "logistics", "warehouse", "transportation",
    )),
    (OccupationCategory.INTEL, (
        "35", "02", "1n", "intel", "intelligence", "analyst", "geospatial",
    )),
    (OccupationCategory.AVIATION, (
        "15", "60", "61", "62", "2a", "2w", "aviation", "aircraft", "mechanic",
        "helicopter",
    )),
    (OccupationCategory.ENGINEERING, (
        "12", "13", "21", "1371", "engineer", "seabee", "construction",
        "combat engineer",
    )),
    (OccupationCategory.ADMIN, (
        "42", "27d", "0111", "3f0", "yn", "ps", "human resources", "admin",
        "personnel", "paralegal", "finance",
    )),
    (OccupationCategory.FOOD_SERVICE, (
        "3381", "cs", "culinary", "cook", "food service", "dining", "chef",
    )),
)


def classify(code: str) -> OccupationCategory | None:
    """Return the first category whose keywords appear in ``code``, else None."""
    normalized = (code or "").strip().lower()
    if not normalized:
        return None

    for category, keywords in CATEGORY_KEYWORDS:
        if any(keyword in normalized for keyword in keywords):
            return category
    return None
