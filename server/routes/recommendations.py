"""Stateless recommendation endpoints (flat filters, recommendation policy)."""

from fastapi import APIRouter

from advisor.models.config import POLICY_RECOMMENDATION
from advisor.models.scoring import RecommendationResult
from advisor.stages import recommend_offerings, top_recommendations

from ..models import RecommendationsRequest, RecommendationsResponse
from ..state import get_state
from ..utils import clamp_limit, to_recommendations_response

router = APIRouter()


def _response(ranked, state, total_compatible: int) -> RecommendationsResponse:
    return to_recommendations_response(
        RecommendationResult(
            offerings=ranked,
            policy=POLICY_RECOMMENDATION,
            total_catalog=len(state.offering_rows()),
            total_compatible=total_compatible,
        )
    )


@router.post("", response_model=RecommendationsResponse)
def recommend(request: RecommendationsRequest):
    """All matching offerings for the filters, best first."""
    state = get_state()
    ranked = recommend_offerings(state.offerings(), request.to_filters(), config=state.scoring_config)
    limit = clamp_limit(request.limit, default=None)
    return _response(ranked[:limit] if limit else ranked, state, len(ranked))


@router.post("/top", response_model=RecommendationsResponse)
def recommend_top(request: RecommendationsRequest):
    """The three best offerings for the filters."""
    state = get_state()
    filters = request.to_filters()
    total = len(recommend_offerings(state.offerings(), filters, config=state.scoring_config))
    ranked = top_recommendations(state.offerings(), filters, config=state.scoring_config)
    return _response(ranked, state, total)
