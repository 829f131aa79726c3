"""
Session context tracking — applies storefront interactions to a ContextSession.

Every function returns a new model; the session or signals passed in are left untouched.

- capture_initial_context: freeze the first meaningful selection (only once per session)
- apply_context_update: replace active-context fields and record the matching change events
- record_event: apply one SignalEvent to BehavioralSignals
- add_category_time: accumulate dwell time per category
- context_summary: counts for the storefront debug panel
"""

import logging
import time
from typing import Any, Dict, Mapping, Optional

from advisor.models.context import ActiveContext, InitialContext
from advisor.models.session import ContextSession, ContextSummary
from advisor.models.signals import BehavioralSignals, CategoryTime, SignalEvent

logger = logging.getLogger(__name__)

# Active-context fields whose change is itself a behavioral signal.
_CHANGE_EVENTS = (
    ("carriers", SignalEvent.CARRIER_CHANGED),
    ("categories", SignalEvent.CATEGORY_CHANGED),
    ("lines", SignalEvent.LINES_ADJUSTED),
    ("fiber", SignalEvent.FIBER_INTEREST),
    ("combo", SignalEvent.COMBO_INTEREST),
)


def capture_initial_context(session: ContextSession) -> ContextSession:
    """Capture the active context as the initial context. No-op once captured."""
    if session.initial is not None:
        return session
    initial = InitialContext.capture(session.active)
    logger.debug("session %s: initial context captured", session.session_id)
    return session.model_copy(update={"initial": initial})


def _field_names(updates: Mapping[str, Any]) -> Dict[str, Any]:
    """Map alias keys (categorias, tipoPessoa, ...) to ActiveContext field names."""
    by_alias = {
        (field.alias or name): name for name, field in ActiveContext.model_fields.items()
    }
    out = {}
    for key, value in updates.items():
        name = key if key in ActiveContext.model_fields else by_alias.get(key)
        if name and name != "updated_at":
            out[name] = value
    return out


def apply_context_update(
    session: ContextSession,
    updates: Mapping[str, Any],
    now: Optional[float] = None,
) -> ContextSession:
    """
    Merge updates into the active context and record change events.

    Keys may be field names or their aliases; unknown keys are ignored. A change event
    is recorded only for fields present in updates whose value actually changed.
    """
    now = time.time() if now is None else now
    previous = session.active
    changes = _field_names(updates)

    merged = previous.model_dump()
    merged.update(changes)
    merged["updated_at"] = now
    active = ActiveContext.model_validate(merged)

    signals = session.signals
    for field, event in _CHANGE_EVENTS:
        if field not in changes:
            continue
        new_value = getattr(active, field)
        if new_value != getattr(previous, field):
            signals = record_event(signals, event, new_value, now=now)

    return session.model_copy(update={"active": active, "signals": signals})


def _append_unique(values, value):
    return values if value in values else [*values, value]


def record_event(
    signals: BehavioralSignals,
    event: SignalEvent,
    value: Any = None,
    now: Optional[float] = None,
) -> BehavioralSignals:
    """
    Apply one interaction event to the signals.

    Viewed/compared ids are de-duplicated, cart events are appended, fiber/combo interest
    counts only when value is True. CATEGORY_TIME expects {"categoria": str, "tempo": ms}
    and raises ValueError for any other payload. Total session time is refreshed on every event.
    """
    now = time.time() if now is None else now
    event = SignalEvent(event)
    update: Dict[str, Any] = {}

    if event is SignalEvent.CARRIER_CHANGED:
        update["carrier_changes"] = signals.carrier_changes + 1
    elif event is SignalEvent.CATEGORY_CHANGED:
        update["category_changes"] = signals.category_changes + 1
    elif event is SignalEvent.LINES_ADJUSTED:
        update["line_adjustments"] = [*signals.line_adjustments, value]
    elif event is SignalEvent.OFFERING_VIEWED:
        update["viewed_ids"] = _append_unique(signals.viewed_ids, str(value))
    elif event is SignalEvent.OFFERING_COMPARED:
        update["compared_ids"] = _append_unique(signals.compared_ids, str(value))
    elif event is SignalEvent.OFFERING_ADDED_TO_CART:
        update["cart_added_ids"] = [*signals.cart_added_ids, str(value)]
    elif event is SignalEvent.OFFERING_REMOVED_FROM_CART:
        update["cart_removed_ids"] = [*signals.cart_removed_ids, str(value)]
    elif event is SignalEvent.FIBER_INTEREST:
        if value is True:
            update["fiber_interest"] = signals.fiber_interest + 1
    elif event is SignalEvent.COMBO_INTEREST:
        if value is True:
            update["combo_interest"] = signals.combo_interest + 1
    elif event is SignalEvent.CATEGORY_TIME:
        payload = CategoryTime.model_validate(value or {})
        signals = add_category_time(signals, payload.category, int(payload.ms))

    update["total_time_ms"] = max(0, int((now - signals.session_started_at) * 1000))
    logger.debug("event %s recorded", event.value)
    return signals.model_copy(update=update)


def add_category_time(signals: BehavioralSignals, category: str, ms: int) -> BehavioralSignals:
    """Add ms of dwell time to a category."""
    if not category or ms <= 0:
        return signals
    dwell = dict(signals.dwell_ms_by_category)
    dwell[category] = dwell.get(category, 0) + ms
    return signals.model_copy(update={"dwell_ms_by_category": dwell})


def context_summary(session: ContextSession) -> ContextSummary:
    active = session.active
    signals = session.signals
    active_filters = (
        len(active.categories)
        + len(active.carriers)
        + (1 if active.lines else 0)
        + (1 if active.fiber else 0)
        + (1 if active.combo else 0)
    )
    captured_signals = (
        signals.carrier_changes
        + signals.category_changes
        + len(signals.viewed_ids)
        + len(signals.compared_ids)
        + len(signals.cart_added_ids)
    )
    return ContextSummary(
        has_initial_context=session.initial is not None,
        active_filters=active_filters,
        captured_signals=captured_signals,
    )
