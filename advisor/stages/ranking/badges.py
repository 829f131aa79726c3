"""
Positional badges for ranked offerings (e.g. "Melhor para você" for the top card).

Assigned after sorting; a badge never feeds back into the score.
"""

from typing import List, Optional

from advisor.models.offering import Offering
from advisor.models.scoring import ScoredOffering

POSITIONAL_BADGES = {
    "PF": ("Melhor para você", "Mais rápido", "Melhor custo-benefício"),
    "PJ": ("Ideal para sua empresa", "Perfeito para equipes", "Recomendado para negócios"),
}
FEATURED_BADGE = "Destaque"


def get_badge(
    offering: Offering,
    position: int,
    person_type: str,
    positional_limit: int = 3,
) -> str:
    """
    Badge text for an offering at a 0-based rank position.

    A custom badge_text always wins; otherwise the first positions get PF/PJ wording,
    featured offerings further down get FEATURED_BADGE and the rest get "".
    """
    if offering.badge_text and offering.badge_text.strip():
        return offering.badge_text
    labels = POSITIONAL_BADGES["PJ" if person_type == "PJ" else "PF"]
    if position < min(positional_limit, len(labels)):
        return labels[position]
    if offering.featured:
        return FEATURED_BADGE
    return ""


def assign_badges(
    ranked: List[ScoredOffering],
    person_type: str,
    positional_limit: Optional[int] = 3,
) -> List[ScoredOffering]:
    """Return copies of the ranked offerings with their positional badge set."""
    limit = 3 if positional_limit is None else positional_limit
    return [
        scored.model_copy(update={"badge": get_badge(scored.offering, i, person_type, limit)})
        for i, scored in enumerate(ranked)
    ]
