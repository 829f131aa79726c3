"""Pydantic request/response models for the API."""

from .common import OfferingCard, OfferingListResponse, RecommendationsResponse
from .pipeline import ClassifyMessageRequest, MovementRequest
from .recommendations import RecommendationsRequest
from .sessions import (
    ContextUpdateRequest,
    CreateSessionRequest,
    DwellRequest,
    EventRequest,
    InitialContextRequest,
    SessionRecommendationsRequest,
    SessionResponse,
)

__all__ = [
    "OfferingCard",
    "OfferingListResponse",
    "RecommendationsResponse",
    "ClassifyMessageRequest",
    "MovementRequest",
    "RecommendationsRequest",
    "ContextUpdateRequest",
    "CreateSessionRequest",
    "DwellRequest",
    "EventRequest",
    "InitialContextRequest",
    "SessionRecommendationsRequest",
    "SessionResponse",
]
