"""Pure helpers: page sizes, card formatting, session serialization."""

from typing import List, Optional

from advisor.models.scoring import RecommendationResult, ScoredOffering
from advisor.models.session import ContextSession
from advisor.tracking import context_summary
from advisor.utils import format_brl

from .models import OfferingCard, RecommendationsResponse, SessionResponse

DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100


def clamp_limit(limit: Optional[int], default: Optional[int] = DEFAULT_PAGE_SIZE) -> Optional[int]:
    """Cap a requested page size at MAX_PAGE_SIZE; None falls back to default."""
    if limit is None:
        return default
    return max(1, min(limit, MAX_PAGE_SIZE))


def to_offering_card(scored: ScoredOffering, position: int) -> OfferingCard:
    """Convert a ScoredOffering to the storefront card (offering serialized by alias)."""
    offering = scored.offering
    return OfferingCard(
        id=offering.id,
        position=position,
        offering=offering.model_dump(by_alias=True, mode="json"),
        price_label=format_brl(offering.price),
        score=round(scored.score, 2),
        policy=scored.policy,
        rationale=scored.rationale,
        badge=scored.badge,
        contextual_badge=scored.contextual_badge,
        breakdown=scored.breakdown,
    )


def to_cards(ranked: List[ScoredOffering]) -> List[OfferingCard]:
    return [to_offering_card(scored, i + 1) for i, scored in enumerate(ranked)]


def to_recommendations_response(result: RecommendationResult) -> RecommendationsResponse:
    cards = to_cards(result.offerings)
    return RecommendationsResponse(
        policy=result.policy,
        offerings=cards,
        total_catalog=result.total_catalog,
        total_compatible=result.total_compatible,
        shown_count=len(cards),
        blocking_criteria=result.blocking_criteria,
    )


def to_session_response(session: ContextSession) -> SessionResponse:
    return SessionResponse(
        session_id=session.session_id,
        session=session.model_dump(by_alias=True, mode="json"),
        summary=context_summary(session),
    )
