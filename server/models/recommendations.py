"""Request models for the stateless recommendation endpoints."""

from typing import Optional

from pydantic import Field

from advisor.models.context import RecommendationFilters


class RecommendationsRequest(RecommendationFilters):
    """RecommendationFilters plus an optional result cap."""

    limit: Optional[int] = Field(None, ge=1)

    def to_filters(self) -> RecommendationFilters:
        return RecommendationFilters.model_validate(self.model_dump(exclude={"limit"}))
