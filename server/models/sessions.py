"""Session-related Pydantic models."""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

from advisor.models.context import RecommendationFilters
from advisor.models.session import ContextSummary
from advisor.models.signals import SignalEvent


class CreateSessionRequest(BaseModel):
    session_id: Optional[str] = None
    # Optional first selection; applied as a context update right after creation
    context: Dict[str, Any] = {}


class ContextUpdateRequest(BaseModel):
    """Partial ActiveContext; keys may be field names or the storefront's aliases."""

    updates: Dict[str, Any] = {}


class InitialContextRequest(BaseModel):
    # Applied to the active context before it is captured
    updates: Dict[str, Any] = {}


class EventRequest(BaseModel):
    event: SignalEvent
    value: Any = None


class DwellRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    category: str = Field(alias="categoria")
    ms: int = Field(alias="tempo", ge=0)


class SessionRecommendationsRequest(BaseModel):
    policy: Optional[str] = None
    include_breakdown: bool = False
    limit: Optional[int] = Field(None, ge=1)
    # Only read by the recommendation policy; derived from the active context when absent
    filters: Optional[RecommendationFilters] = None


class SessionResponse(BaseModel):
    session_id: str
    session: Dict[str, Any]
    summary: ContextSummary
