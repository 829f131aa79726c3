"""
Session Context Tracking Tests

Context updates, behavioral events, dwell time and the summary counts. Every
function returns a new model and leaves its input untouched.

Run:
----
    pytest tests/test_tracking.py -v
"""

import pytest

from advisor.models import BehavioralSignals, ContextSession, SignalEvent
from advisor.tracking import (
    add_category_time,
    apply_context_update,
    capture_initial_context,
    context_summary,
    record_event,
)


def _session(**active):
    session = ContextSession(session_id="s1")
    return apply_context_update(session, active) if active else session


class TestInitialContext:
    """Initial context is captured once."""

    def test_captures_active_selection(self):
        session = capture_initial_context(_session(categorias=["fibra"]))
        assert session.initial is not None
        assert session.initial.categories == {"fibra"}

    def test_never_overwritten(self):
        session = capture_initial_context(_session(categorias=["fibra"]))
        session = apply_context_update(session, {"categorias": ["movel"]})
        session = capture_initial_context(session)
        assert session.initial.categories == {"fibra"}
        assert session.active.categories == {"movel"}


class TestContextUpdates:
    """apply_context_update merges fields and records change events."""

    def test_aliases_and_field_names(self):
        session = apply_context_update(_session(), {"operadoras": ["vivo"], "person_type": "PJ"})
        assert session.active.carriers == {"vivo"}
        assert session.active.person_type == "PJ"

    def test_unknown_keys_ignored(self):
        session = apply_context_update(_session(), {"cor": "azul", "linhas": 2})
        assert session.active.lines == 2

    def test_carrier_and_category_changes_counted_once_per_change(self):
        session = apply_context_update(_session(), {"operadoras": ["vivo"], "categorias": ["movel"]})
        session = apply_context_update(session, {"operadoras": ["vivo"]})
        assert session.signals.carrier_changes == 1
        assert session.signals.category_changes == 1

    def test_line_adjustments_logged(self):
        session = apply_context_update(_session(), {"linhas": 3})
        session = apply_context_update(session, {"linhas": 5})
        assert session.signals.line_adjustments == [3, 5]

    def test_fiber_interest_only_when_turned_on(self):
        session = apply_context_update(_session(), {"fibra": True})
        session = apply_context_update(session, {"fibra": False})
        assert session.signals.fiber_interest == 1
        assert session.active.fiber is False

    def test_untouched_fields_keep_their_value(self):
        session = apply_context_update(_session(categorias=["fibra"]), {"linhas": 2})
        assert session.active.categories == {"fibra"}

    def test_input_not_mutated(self):
        original = _session()
        apply_context_update(original, {"operadoras": ["claro"], "fibra": True})
        assert original.active.carriers == set()
        assert original.signals.carrier_changes == 0

    def test_timestamp_refreshed(self):
        session = apply_context_update(_session(), {"linhas": 1}, now=1234.0)
        assert session.active.updated_at == 1234.0


class TestRecordEvent:
    """record_event for each event kind."""

    def test_viewed_and_compared_are_deduplicated(self):
        signals = BehavioralSignals()
        for _ in range(3):
            signals = record_event(signals, SignalEvent.OFFERING_VIEWED, "p1")
        signals = record_event(signals, "plano_comparado", "p1")
        signals = record_event(signals, "plano_comparado", "p1")
        assert signals.viewed_ids == ["p1"]
        assert signals.compared_ids == ["p1"]

    def test_cart_events_appended(self):
        signals = BehavioralSignals()
        signals = record_event(signals, SignalEvent.OFFERING_ADDED_TO_CART, "p1")
        signals = record_event(signals, SignalEvent.OFFERING_ADDED_TO_CART, "p1")
        signals = record_event(signals, SignalEvent.OFFERING_REMOVED_FROM_CART, "p1")
        assert signals.cart_added_ids == ["p1", "p1"]
        assert signals.cart_removed_ids == ["p1"]

    def test_combo_interest_counts_true_only(self):
        signals = record_event(BehavioralSignals(), SignalEvent.COMBO_INTEREST, True)
        signals = record_event(signals, SignalEvent.COMBO_INTEREST, False)
        assert signals.combo_interest == 1

    def test_category_time_event(self):
        signals = record_event(
            BehavioralSignals(), SignalEvent.CATEGORY_TIME, {"categoria": "fibra", "tempo": 1500}
        )
        assert signals.dwell_ms("fibra") == 1500

    @pytest.mark.parametrize("value", ["fibra", {"categoria": "fibra", "tempo": "muito"}, [1, 2]])
    def test_category_time_rejects_malformed_payload(self, value):
        with pytest.raises(ValueError):
            record_event(BehavioralSignals(), SignalEvent.CATEGORY_TIME, value)

    def test_total_time_updated(self):
        signals = BehavioralSignals(inicioSessao=1000.0)
        signals = record_event(signals, SignalEvent.OFFERING_VIEWED, "p1", now=1005.5)
        assert signals.total_time_ms == 5500

    def test_input_not_mutated(self):
        signals = BehavioralSignals()
        record_event(signals, SignalEvent.OFFERING_VIEWED, "p1")
        assert signals.viewed_ids == []


class TestDwellAndSummary:
    def test_add_category_time_accumulates(self):
        signals = add_category_time(BehavioralSignals(), "movel", 20_000)
        signals = add_category_time(signals, "movel", 15_000)
        assert signals.dwell_ms("movel") == 35_000
        assert signals.dwell_ms("fibra") == 0

    def test_non_positive_time_ignored(self):
        signals = BehavioralSignals()
        assert add_category_time(signals, "movel", 0) is signals

    def test_summary_counts(self):
        session = apply_context_update(
            _session(),
            {"categorias": ["fibra", "combo"], "operadoras": ["vivo"], "linhas": 2, "fibra": True},
        )
        signals = record_event(session.signals, SignalEvent.OFFERING_VIEWED, "p1")
        signals = record_event(signals, SignalEvent.OFFERING_ADDED_TO_CART, "p1")
        session = capture_initial_context(session.model_copy(update={"signals": signals}))

        summary = context_summary(session)
        assert summary.has_initial_context is True
        # 2 categories + 1 carrier + lines + fiber
        assert summary.active_filters == 5
        # carrier change + category change + viewed + cart
        assert summary.captured_signals == 4

    def test_empty_session_summary(self):
        summary = context_summary(ContextSession(session_id="s2"))
        assert (summary.has_initial_context, summary.active_filters, summary.captured_signals) == (
            False,
            0,
            0,
        )
