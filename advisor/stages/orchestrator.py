"""
Pipeline orchestrator — runs the hard filter, then a scoring policy, then ranking and badges.

Entry points:
- recommend_for_context: session path (active/initial context + signals, any policy)
- recommend_offerings / top_recommendations: flat-filter path of the recommendation policy
"""

from typing import Any, Dict, List, Optional, Sequence, Union

from advisor.models.config import POLICY_RECOMMENDATION, ScoringConfig, resolve_config
from advisor.models.context import ActiveContext, InitialContext, RecommendationFilters
from advisor.models.offering import Offering, ensure_offerings
from advisor.models.scoring import RecommendationResult, ScoredOffering
from advisor.models.signals import BehavioralSignals
from advisor.stages.compatibility import (
    blocking_criteria,
    filter_compatible,
    matches_recommendation_filters,
)
from advisor.stages.ranking import (
    ScoringRequest,
    assign_badges,
    dynamic_badge,
    get_policy,
    rank_offerings,
    score_offerings,
)

OfferingInput = Union[Dict[str, Any], Offering]


def _attach_dynamic_badges(
    ranked: List[ScoredOffering],
    active: ActiveContext,
) -> List[ScoredOffering]:
    return [
        scored.model_copy(update={"contextual_badge": dynamic_badge(scored.offering, active)})
        for scored in ranked
    ]


def recommend_for_context(
    offerings: Sequence[OfferingInput],
    active: ActiveContext,
    initial: Optional[InitialContext] = None,
    signals: Optional[BehavioralSignals] = None,
    config: Optional[ScoringConfig] = None,
    policy_name: Optional[str] = None,
    include_breakdown: bool = False,
    limit: Optional[int] = None,
    filters: Optional[RecommendationFilters] = None,
) -> RecommendationResult:
    """
    Rank the catalog for one session context.

    Incompatible offerings are removed before scoring and never appear in the result.
    When nothing is compatible, blocking_criteria lists the selections worth relaxing.
    """
    config = resolve_config(config)
    policy = get_policy(policy_name, config)
    catalog = ensure_offerings(offerings)

    # Hard filter
    compatible = filter_compatible(catalog, active)

    # Score and rank
    request = ScoringRequest(
        active=active,
        initial=initial,
        signals=signals if signals is not None else BehavioralSignals(),
        filters=filters,
    )
    ranked = rank_offerings(compatible, request, policy, include_breakdown)

    # Positional badges, then the per-card dynamic badge
    ranked = assign_badges(ranked, policy.badge_person_type(request), config.positional_badges)
    ranked = _attach_dynamic_badges(ranked, active)

    if limit:
        ranked = ranked[:limit]

    return RecommendationResult(
        offerings=ranked,
        policy=policy.name,
        total_catalog=len(catalog),
        total_compatible=len(compatible),
        blocking_criteria=[] if compatible else blocking_criteria(catalog, active),
    )


def recommend_offerings(
    offerings: Sequence[OfferingInput],
    filters: RecommendationFilters,
    limit: Optional[int] = None,
    config: Optional[ScoringConfig] = None,
) -> List[ScoredOffering]:
    """
    Recommendation policy over flat filters.

    Keeps active offerings matching person type, category and carrier, scores them,
    sorts them by score alone and assigns positional badges. limit caps the returned list.
    """
    config = resolve_config(config)
    policy = get_policy(POLICY_RECOMMENDATION, config)
    candidates = [o for o in ensure_offerings(offerings) if matches_recommendation_filters(o, filters)]
    request = ScoringRequest(filters=filters)
    # Score only; equal scores keep catalog order
    ranked = sorted(score_offerings(candidates, request, policy), key=lambda s: -s.score)
    ranked = assign_badges(ranked, filters.person_type, config.positional_badges)
    return ranked[:limit] if limit else ranked


def top_recommendations(
    offerings: Sequence[OfferingInput],
    filters: RecommendationFilters,
    config: Optional[ScoringConfig] = None,
) -> List[ScoredOffering]:
    """The three best recommendations for the filters."""
    return recommend_offerings(offerings, filters, limit=3, config=config)
