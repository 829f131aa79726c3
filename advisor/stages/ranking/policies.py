"""
Scoring policies: one interface, two named formulas.

"contextual" scores against the live session (context, signals, initial context);
"recommendation" scores against flat filters with penalties and a price term.
Both are kept as-is; their numeric outputs differ and neither replaces the other.
"""

from abc import ABC, abstractmethod
from typing import Dict, Optional, Type

from pydantic import BaseModel, Field

from advisor.models.config import (
    POLICY_CONTEXTUAL,
    POLICY_RECOMMENDATION,
    ScoringConfig,
    resolve_config,
)
from advisor.models.context import ActiveContext, InitialContext, RecommendationFilters
from advisor.models.offering import Offering
from advisor.models.scoring import ScoreBreakdown
from advisor.models.signals import BehavioralSignals

from .contextual_scoring import contextual_breakdown, contextual_score
from .recommendation_scoring import recommendation_rationale, recommendation_score


class ScoringRequest(BaseModel):
    """Snapshot of everything a policy may read for one scoring pass."""

    active: ActiveContext = Field(default_factory=ActiveContext)
    initial: Optional[InitialContext] = None
    signals: BehavioralSignals = Field(default_factory=BehavioralSignals)
    filters: Optional[RecommendationFilters] = None

    def recommendation_filters(self) -> RecommendationFilters:
        """Explicit filters, or filters derived from the active context."""
        return self.filters if self.filters is not None else RecommendationFilters.from_context(self.active)


class ScoringPolicy(ABC):
    """A named scoring formula over compatible offerings."""

    name: str = ""

    def __init__(self, config: Optional[ScoringConfig] = None):
        self.config = resolve_config(config)

    @abstractmethod
    def score(self, offering: Offering, request: ScoringRequest) -> float:
        """Score in [0, config.max_score]."""

    def breakdown(self, offering: Offering, request: ScoringRequest) -> Optional[ScoreBreakdown]:
        """Per-section contributions, when the policy has sections."""
        return None

    def rationale(self, offering: Offering, request: ScoringRequest) -> str:
        return recommendation_rationale(offering, request.recommendation_filters())

    def badge_person_type(self, request: ScoringRequest) -> str:
        """PF or PJ wording for positional badges."""
        return "PJ" if request.active.person_type == "PJ" else "PF"


class ContextualPolicy(ScoringPolicy):
    name = POLICY_CONTEXTUAL

    def score(self, offering: Offering, request: ScoringRequest) -> float:
        return contextual_score(
            offering,
            request.active,
            request.initial,
            request.signals,
            self.config.contextual,
            self.config.max_score,
        )

    def breakdown(self, offering: Offering, request: ScoringRequest) -> ScoreBreakdown:
        return contextual_breakdown(
            offering,
            request.active,
            request.initial,
            request.signals,
            self.config.contextual,
            self.config.max_score,
        )


class RecommendationPolicy(ScoringPolicy):
    name = POLICY_RECOMMENDATION

    def score(self, offering: Offering, request: ScoringRequest) -> float:
        return recommendation_score(
            offering,
            request.recommendation_filters(),
            self.config.recommendation,
            self.config.max_score,
        )

    def badge_person_type(self, request: ScoringRequest) -> str:
        return request.recommendation_filters().person_type


POLICIES: Dict[str, Type[ScoringPolicy]] = {
    ContextualPolicy.name: ContextualPolicy,
    RecommendationPolicy.name: RecommendationPolicy,
}


def get_policy(name: Optional[str] = None, config: Optional[ScoringConfig] = None) -> ScoringPolicy:
    """Resolve a policy by name (config.default_policy when None)."""
    config = resolve_config(config)
    name = name or config.default_policy
    policy_cls = POLICIES.get(name)
    if policy_cls is None:
        raise ValueError(f"Unknown scoring policy {name!r}; expected one of {sorted(POLICIES)}")
    return policy_cls(config)
