"""Session context and contextual recommendation endpoints."""

from functools import partial

from fastapi import APIRouter, HTTPException
from pydantic import ValidationError

from advisor.models.config import POLICY_NAMES
from advisor.stages import recommend_for_context
from advisor.tracking import (
    add_category_time,
    apply_context_update,
    capture_initial_context,
    record_event,
)

from ..models import (
    ContextUpdateRequest,
    CreateSessionRequest,
    DwellRequest,
    EventRequest,
    InitialContextRequest,
    RecommendationsResponse,
    SessionRecommendationsRequest,
    SessionResponse,
)
from ..state import get_state
from ..utils import clamp_limit, to_recommendations_response, to_session_response

router = APIRouter()


def _log_sessions(msg: str) -> None:
    """Log to stdout with flush so Docker/capture shows it immediately."""
    print(f"[sessions] {msg}", flush=True)


def _unprocessable(e: ValueError) -> HTTPException:
    if isinstance(e, ValidationError):
        return HTTPException(status_code=422, detail=e.errors(include_url=False, include_context=False))
    return HTTPException(status_code=422, detail=str(e))


def _update_or_404(session_id: str, fn):
    try:
        session = get_state().sessions.update(session_id, fn)
    except ValueError as e:
        raise _unprocessable(e)
    if session is None:
        raise HTTPException(status_code=404, detail="Session not found")
    return session


@router.post("/create", response_model=SessionResponse)
def create_session(request: CreateSessionRequest = None):
    """Create a new storefront session, optionally seeding the active context."""
    request = request or CreateSessionRequest()
    state = get_state()
    session = state.sessions.create(request.session_id)
    if request.context:
        try:
            session = state.sessions.update(
                session.session_id, partial(apply_context_update, updates=request.context)
            )
        except ValueError as e:
            state.sessions.delete(session.session_id)
            raise _unprocessable(e)
    _log_sessions(f"create_session done: session_id={session.session_id}")
    return to_session_response(session)


@router.get("/{session_id}", response_model=SessionResponse)
def get_session_info(session_id: str):
    """Get session context, signals and summary."""
    session = get_state().sessions.get(session_id)
    if session is None:
        raise HTTPException(status_code=404, detail="Session not found")
    return to_session_response(session)


@router.delete("/{session_id}")
def delete_session(session_id: str):
    if not get_state().sessions.delete(session_id):
        raise HTTPException(status_code=404, detail="Session not found")
    _log_sessions(f"session deleted: {session_id}")
    return {"status": "deleted", "session_id": session_id}


@router.post("/{session_id}/context", response_model=SessionResponse)
def update_context(session_id: str, request: ContextUpdateRequest):
    """Merge a partial selection into the active context."""
    session = _update_or_404(session_id, partial(apply_context_update, updates=request.updates))
    return to_session_response(session)


@router.post("/{session_id}/initial-context", response_model=SessionResponse)
def capture_initial(session_id: str, request: InitialContextRequest = None):
    """Capture the initial context once; later calls leave it unchanged."""
    updates = request.updates if request else {}

    def _capture(session):
        if updates:
            session = apply_context_update(session, updates)
        return capture_initial_context(session)

    return to_session_response(_update_or_404(session_id, _capture))


@router.post("/{session_id}/events", response_model=SessionResponse)
def record_session_event(session_id: str, request: EventRequest):
    """Record one behavioral event (view, compare, cart, ...)."""

    def _record(session):
        signals = record_event(session.signals, request.event, request.value)
        return session.model_copy(update={"signals": signals})

    return to_session_response(_update_or_404(session_id, _record))


@router.post("/{session_id}/dwell", response_model=SessionResponse)
def record_dwell(session_id: str, request: DwellRequest):
    """Add browsing time to a category."""

    def _dwell(session):
        signals = add_category_time(session.signals, request.category, request.ms)
        return session.model_copy(update={"signals": signals})

    return to_session_response(_update_or_404(session_id, _dwell))


@router.post("/{session_id}/recommendations", response_model=RecommendationsResponse)
def session_recommendations(session_id: str, request: SessionRecommendationsRequest = None):
    """Filter, score and rank the catalog for the session's current context."""
    request = request or SessionRecommendationsRequest()
    state = get_state()
    session = state.sessions.get(session_id)
    if session is None:
        raise HTTPException(status_code=404, detail="Session not found")
    if request.policy is not None and request.policy not in POLICY_NAMES:
        raise HTTPException(
            status_code=400,
            detail=f"Unknown policy {request.policy!r}; expected one of {list(POLICY_NAMES)}",
        )

    result = recommend_for_context(
        state.offerings(),
        session.active,
        initial=session.initial,
        signals=session.signals,
        config=state.scoring_config,
        policy_name=request.policy,
        include_breakdown=request.include_breakdown,
        limit=clamp_limit(request.limit, default=None),
        filters=request.filters,
    )
    _log_sessions(
        f"recommendations: session_id={session_id} policy={result.policy} "
        f"compatible={result.total_compatible}/{result.total_catalog}"
    )
    return to_recommendations_response(result)
