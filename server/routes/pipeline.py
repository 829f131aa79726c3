"""Opportunity pipeline endpoints: stage movement checks and message classification."""

from fastapi import APIRouter

from advisor.opportunities import (
    MessageAnalysis,
    MovementDecision,
    classify_message,
    successors,
    validate_movement,
)

from ..models import ClassifyMessageRequest, MovementRequest

router = APIRouter()


@router.post("/validate-movement", response_model=MovementDecision)
def validate_stage_movement(request: MovementRequest):
    return validate_movement(request.current_stage, request.proposed_stage)


@router.get("/stages/{stage}/successors")
def stage_successors(stage: str):
    """Stages automation may move an opportunity to from stage."""
    return {"stage": stage, "successors": sorted(successors(stage))}


@router.post("/classify-message", response_model=MessageAnalysis)
def classify_inbound_message(request: ClassifyMessageRequest):
    analysis = classify_message(request.message, request.current_stage)
    print(
        f"[pipeline] classify: intent={analysis.intent} stage={analysis.stage or '-'} "
        f"act={analysis.should_act} new={analysis.should_create_new}",
        flush=True,
    )
    return analysis
