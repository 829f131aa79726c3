"""
Contextual Scoring Tests

Score = base (score_base / 5, capped at 20) + active context + behavioral signals
+ initial context, clamped to [0, 100]. The breakdown is the source of the score.

Run:
----
    pytest tests/test_contextual_scoring.py -v
"""

import pytest

from advisor.models import ActiveContext, BehavioralSignals, InitialContext
from advisor.models.config import ContextualWeights
from advisor.stages.ranking.contextual_scoring import contextual_breakdown, contextual_score

WEIGHTS = ContextualWeights()


def _score(offering, active=None, initial=None, signals=None, weights=WEIGHTS):
    return contextual_score(offering, active or ActiveContext(), initial, signals, weights)


class TestBaseAndActiveContext:
    """Base score and active-context alignment."""

    def test_base_carrier_category_featured(self, make_offering):
        offering = make_offering(scoreBase=100, destaque=True, operadora="vivo", categoria="movel")
        ctx = ActiveContext(operadoras={"vivo"}, categorias={"movel"})
        # 20 base + 10 carrier + 10 category + 5 featured
        assert _score(offering, ctx) == 45

    def test_base_is_capped(self, make_offering):
        assert _score(make_offering(scoreBase=500)) == 20

    def test_missing_base_contributes_nothing(self, make_offering):
        assert _score(make_offering(scoreBase=None)) == 0

    def test_negative_base_never_goes_below_zero(self, make_offering):
        assert _score(make_offering(scoreBase=-80)) == 0

    def test_recommended_use_bonus(self, make_offering):
        assert _score(make_offering(usoRecomendado=["streaming"])) == 5
        assert _score(make_offering(usoRecomendado=[])) == 0

    @pytest.mark.parametrize(
        "requested, expected",
        [(3, 10), (2, 5), (4, 5), (6, 0), (None, 0)],
    )
    def test_line_bonus_is_monotonic(self, make_offering, requested, expected):
        offering = make_offering(linhasInclusas=3)
        assert _score(offering, ActiveContext(linhas=requested)) == expected


class TestSignals:
    """Behavioral signal contributions."""

    def test_viewed_compared_cart(self, make_offering):
        signals = BehavioralSignals(
            planosVisualizados=["o1"],
            planosComparados=["o1"],
            planosAdicionadosCarrinho=["o1"],
        )
        assert _score(make_offering("o1"), signals=signals) == 8 + 6 + 4

    def test_signals_for_other_offerings_ignored(self, make_offering):
        signals = BehavioralSignals(planosVisualizados=["other"])
        assert _score(make_offering("o1"), signals=signals) == 0

    @pytest.mark.parametrize(
        "dwell_ms, expected",
        [(61_000, 8), (60_000, 4), (45_000, 4), (30_000, 0), (0, 0)],
    )
    def test_dwell_time_thresholds(self, make_offering, dwell_ms, expected):
        signals = BehavioralSignals(tempoPorCategoria={"fibra": dwell_ms})
        assert _score(make_offering(categoria="fibra"), signals=signals) == expected

    def test_fiber_interest_applies_to_fiber_and_combo(self, make_offering):
        signals = BehavioralSignals(interesseFibra=2)
        assert _score(make_offering(categoria="fibra"), signals=signals) == 4
        assert _score(make_offering(categoria="combo"), signals=signals) == 4
        assert _score(make_offering(categoria="movel"), signals=signals) == 0

    def test_no_signals(self, make_offering):
        assert _score(make_offering(), signals=None) == 0


class TestInitialContext:
    """Initial context is a small tie-break bonus."""

    def test_initial_category_and_carrier(self, make_offering):
        initial = InitialContext(categorias={"fibra"}, operadoras={"vivo"})
        offering = make_offering(categoria="fibra", operadora="vivo")
        assert _score(offering, initial=initial) == 10

    def test_breaks_tie_between_otherwise_equal_offerings(self, make_offering):
        initial = InitialContext(operadoras={"claro"})
        a = make_offering("a", operadora="vivo", scoreBase=50)
        b = make_offering("b", operadora="claro", scoreBase=50)
        assert _score(b, initial=initial) > _score(a, initial=initial)


class TestBoundsAndBreakdown:
    """Clamp to [0, max_score] and breakdown consistency."""

    def _everything(self, make_offering):
        offering = make_offering(
            "o1",
            scoreBase=100,
            categoria="fibra",
            operadora="vivo",
            linhasInclusas=2,
            destaque=True,
            usoRecomendado=["streaming"],
        )
        active = ActiveContext(categorias={"fibra"}, operadoras={"vivo"}, linhas=2)
        initial = InitialContext(categorias={"fibra"}, operadoras={"vivo"})
        signals = BehavioralSignals(
            planosVisualizados=["o1"],
            planosComparados=["o1"],
            planosAdicionadosCarrinho=["o1"],
            tempoPorCategoria={"fibra": 90_000},
            interesseFibra=1,
        )
        return offering, active, initial, signals

    def test_maximum_is_exactly_one_hundred(self, make_offering):
        offering, active, initial, signals = self._everything(make_offering)
        breakdown = contextual_breakdown(offering, active, initial, signals, WEIGHTS)
        assert breakdown.base == 20
        assert breakdown.active_context == 40
        assert breakdown.signals == 30
        assert breakdown.initial_context == 10
        assert breakdown.total == 100

    def test_clamped_with_heavier_weights(self, make_offering):
        offering, active, initial, signals = self._everything(make_offering)
        heavy = ContextualWeights(viewed=80)
        assert _score(offering, active, initial, signals, weights=heavy) == 100

    def test_breakdown_total_equals_score(self, make_offering):
        offering, active, initial, signals = self._everything(make_offering)
        weights = ContextualWeights(viewed=2, featured=1)
        breakdown = contextual_breakdown(offering, active, initial, signals, weights)
        assert breakdown.total == _score(offering, active, initial, signals, weights=weights)
        assert breakdown.total == (
            breakdown.base + breakdown.active_context + breakdown.signals + breakdown.initial_context
        )
