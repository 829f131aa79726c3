"""
Scoring model — ScoredOffering and the structures returned by a scoring pass.

Contains:
- ScoreBreakdown: per-section contributions of the contextual policy
- DynamicBadge: the single context-aware badge picked for a card
- ScoredOffering: an offering with its score, rationale and badges
- RecommendationResult: ranked output plus the empty-state diagnostics
"""

from typing import List, Literal, Optional

from pydantic import BaseModel

from .offering import Offering


class ScoreBreakdown(BaseModel):
    """Sub-totals of a contextual score; total is the clamped sum."""

    base: float = 0.0
    active_context: float = 0.0
    signals: float = 0.0
    initial_context: float = 0.0
    total: float = 0.0


class DynamicBadge(BaseModel):
    """A context-aware badge candidate; the highest priority one is shown."""

    text: str
    variant: Literal["default", "success", "info", "warning", "primary"] = "default"
    priority: int
    reason: Optional[str] = None


class ScoredOffering(BaseModel):
    """An offering with all its scoring outputs. Created fresh on every pass."""

    offering: Offering
    score: float
    policy: str
    rationale: str = ""
    badge: str = ""
    breakdown: Optional[ScoreBreakdown] = None
    contextual_badge: Optional[DynamicBadge] = None


class RecommendationResult(BaseModel):
    """Ranked offerings for one request plus counts for empty-state messaging."""

    offerings: List[ScoredOffering]
    policy: str
    total_catalog: int
    total_compatible: int
    blocking_criteria: List[str] = []
