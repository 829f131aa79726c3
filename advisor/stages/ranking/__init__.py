"""
Ranking: score compatible offerings with a policy, sort them and attach badges.

Public API: rank, rank_offerings, score_offerings, get_policy, assign_badges, dynamic_badge.
- core: sort order and scoring loop.
- Submodules: contextual_scoring, recommendation_scoring, policies, badges, dynamic_badges.
"""

from .badges import assign_badges, get_badge
from .core import rank, rank_offerings, score_offerings
from .dynamic_badges import dynamic_badge
from .policies import (
    POLICIES,
    ContextualPolicy,
    RecommendationPolicy,
    ScoringPolicy,
    ScoringRequest,
    get_policy,
)

__all__ = [
    "POLICIES",
    "ContextualPolicy",
    "RecommendationPolicy",
    "ScoringPolicy",
    "ScoringRequest",
    "assign_badges",
    "dynamic_badge",
    "get_badge",
    "get_policy",
    "rank",
    "rank_offerings",
    "score_offerings",
]
