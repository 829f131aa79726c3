"""Common Pydantic models shared across routes."""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel

from advisor.models.scoring import DynamicBadge, ScoreBreakdown


class OfferingCard(BaseModel):
    """One ranked offering as the storefront renders it."""

    id: str
    position: int
    offering: Dict[str, Any]
    price_label: str
    score: float
    policy: str
    rationale: str = ""
    badge: str = ""
    contextual_badge: Optional[DynamicBadge] = None
    breakdown: Optional[ScoreBreakdown] = None


class RecommendationsResponse(BaseModel):
    policy: str
    offerings: List[OfferingCard]
    total_catalog: int
    total_compatible: int
    shown_count: int
    blocking_criteria: List[str] = []


class OfferingListResponse(BaseModel):
    offerings: List[Dict[str, Any]]
    total: int
    offset: int
    limit: Optional[int] = None
