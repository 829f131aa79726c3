"""
Plan Advisor — offering compatibility, contextual scoring and opportunity-stage rules

Single entry point for the advisor package:
- models/: Offering, ActiveContext, InitialContext, BehavioralSignals, ScoringConfig
- stages/: compatibility (hard filter), ranking (policies + badges), orchestrator
- tracking: session context/signal updates
- opportunities/: stage movement validator, inbound message classifier
"""

from advisor.models import (
    DEFAULT_CONFIG,
    ActiveContext,
    BehavioralSignals,
    ContextSession,
    InitialContext,
    Offering,
    RecommendationFilters,
    RecommendationResult,
    ScoredOffering,
    ScoringConfig,
    SignalEvent,
    resolve_config,
)
from advisor.opportunities import MessageAnalysis, MovementDecision, classify_message, validate_movement
from advisor.stages import (
    blocking_criteria,
    filter_compatible,
    get_policy,
    is_compatible,
    rank,
    recommend_for_context,
    recommend_offerings,
    top_recommendations,
)
from advisor.stages.ranking.contextual_scoring import contextual_score
from advisor.stages.ranking.recommendation_scoring import recommendation_score
from advisor.tracking import (
    add_category_time,
    apply_context_update,
    capture_initial_context,
    context_summary,
    record_event,
)

__all__ = [
    "DEFAULT_CONFIG",
    "ActiveContext",
    "BehavioralSignals",
    "ContextSession",
    "InitialContext",
    "MessageAnalysis",
    "MovementDecision",
    "Offering",
    "RecommendationFilters",
    "RecommendationResult",
    "ScoredOffering",
    "ScoringConfig",
    "SignalEvent",
    "add_category_time",
    "apply_context_update",
    "blocking_criteria",
    "capture_initial_context",
    "classify_message",
    "context_summary",
    "contextual_score",
    "filter_compatible",
    "get_policy",
    "is_compatible",
    "rank",
    "recommend_for_context",
    "recommend_offerings",
    "record_event",
    "recommendation_score",
    "resolve_config",
    "top_recommendations",
    "validate_movement",
]
