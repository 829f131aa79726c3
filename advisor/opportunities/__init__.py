"""Opportunity pipeline rules: stage movement validation and inbound message classification."""

from .message_classifier import MessageAnalysis, classify_message, normalize_message
from .movement import (
    ALLOWED_MOVEMENTS,
    MANUAL_LOCKED_STAGES,
    TERMINAL_STAGES,
    MovementDecision,
    successors,
    validate_movement,
)

__all__ = [
    "ALLOWED_MOVEMENTS",
    "MANUAL_LOCKED_STAGES",
    "TERMINAL_STAGES",
    "MessageAnalysis",
    "MovementDecision",
    "classify_message",
    "normalize_message",
    "successors",
    "validate_movement",
]
