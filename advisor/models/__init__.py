"""Data models for the plan advisor engine."""

from .config import (
    DEFAULT_CONFIG,
    POLICY_CONTEXTUAL,
    POLICY_NAMES,
    POLICY_RECOMMENDATION,
    ContextualWeights,
    RecommendationWeights,
    ScoringConfig,
    resolve_config,
)
from .context import ActiveContext, InitialContext, RecommendationFilters
from .offering import FIBER_CATEGORIES, Offering, ensure_offerings
from .scoring import DynamicBadge, RecommendationResult, ScoreBreakdown, ScoredOffering
from .session import ContextSession, ContextSummary
from .signals import BehavioralSignals, CategoryTime, SignalEvent

__all__ = [
    "DEFAULT_CONFIG",
    "POLICY_CONTEXTUAL",
    "POLICY_NAMES",
    "POLICY_RECOMMENDATION",
    "ActiveContext",
    "BehavioralSignals",
    "CategoryTime",
    "ContextSession",
    "ContextSummary",
    "ContextualWeights",
    "DynamicBadge",
    "FIBER_CATEGORIES",
    "InitialContext",
    "Offering",
    "RecommendationFilters",
    "RecommendationResult",
    "RecommendationWeights",
    "ScoreBreakdown",
    "ScoredOffering",
    "ScoringConfig",
    "SignalEvent",
    "ensure_offerings",
    "resolve_config",
]
