"""
Main ranking orchestration: score compatible offerings with a policy, then sort.

Sort key: score descending, featured first, price ascending. Python's sort is stable,
so offerings equal on all three keep their input order.
"""

import logging
from typing import List, Sequence

from advisor.models.offering import Offering
from advisor.models.scoring import ScoredOffering

from .policies import ScoringPolicy, ScoringRequest

logger = logging.getLogger(__name__)


def _sort_key(scored: ScoredOffering):
    return (-scored.score, not scored.offering.featured, scored.offering.price)


def rank(scored: Sequence[ScoredOffering]) -> List[ScoredOffering]:
    """Return a new list sorted by score desc, then featured first, then lower price."""
    return sorted(scored, key=_sort_key)


def score_offerings(
    offerings: Sequence[Offering],
    request: ScoringRequest,
    policy: ScoringPolicy,
    include_breakdown: bool = False,
) -> List[ScoredOffering]:
    """
    Score every offering with the policy, in input order.

    Callers pass only compatible offerings; scoring never filters.
    """
    scored = []
    for offering in offerings:
        breakdown = policy.breakdown(offering, request) if include_breakdown else None
        score = breakdown.total if breakdown is not None else policy.score(offering, request)
        scored.append(ScoredOffering(
            offering=offering,
            score=score,
            policy=policy.name,
            rationale=policy.rationale(offering, request),
            breakdown=breakdown,
        ))
    logger.debug("scored %d offerings with policy=%s", len(scored), policy.name)
    return scored


def rank_offerings(
    offerings: Sequence[Offering],
    request: ScoringRequest,
    policy: ScoringPolicy,
    include_breakdown: bool = False,
) -> List[ScoredOffering]:
    """Score then rank (no filtering, no badges)."""
    return rank(score_offerings(offerings, request, policy, include_breakdown))
