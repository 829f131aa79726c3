"""
Contextual scoring: base score + active context + behavioral signals + initial context.

Each offering is scored independently. The breakdown is computed first and the score is
its clamped sum, so the detailed view and the combined score never disagree.
"""

from typing import Optional

from advisor.models.config import ContextualWeights
from advisor.models.context import ActiveContext, InitialContext
from advisor.models.offering import Offering
from advisor.models.scoring import ScoreBreakdown
from advisor.models.signals import BehavioralSignals

FIBER_INTEREST_CATEGORIES = ("fibra", "combo")


def _base_points(offering: Offering, weights: ContextualWeights) -> float:
    """Catalog score_base (0-100) scaled down to at most base_cap points."""
    if not offering.score_base:
        return 0.0
    return max(0.0, min(offering.score_base / weights.base_divisor, weights.base_cap))


def _active_context_points(
    offering: Offering,
    active: ActiveContext,
    weights: ContextualWeights,
) -> float:
    points = 0.0
    if active.carriers and offering.carrier in active.carriers:
        points += weights.carrier_match
    if active.categories and offering.category in active.categories:
        points += weights.category_match
    if active.requested_lines:
        plan_lines = offering.effective_lines
        if plan_lines == active.requested_lines:
            points += weights.lines_exact
        elif abs(plan_lines - active.requested_lines) <= weights.lines_near_tolerance:
            points += weights.lines_near
    if offering.recommended_use:
        points += weights.recommended_use
    if offering.featured:
        points += weights.featured
    return points


def _signal_points(
    offering: Offering,
    signals: Optional[BehavioralSignals],
    weights: ContextualWeights,
) -> float:
    if signals is None:
        return 0.0
    points = 0.0
    if offering.id in signals.viewed_ids:
        points += weights.viewed
    if offering.id in signals.compared_ids:
        points += weights.compared
    if offering.id in signals.cart_added_ids:
        points += weights.cart_added
    dwell = signals.dwell_ms(offering.category)
    if dwell > weights.dwell_long_ms:
        points += weights.dwell_long
    elif dwell > weights.dwell_short_ms:
        points += weights.dwell_short
    if signals.fiber_interest > 0 and offering.category in FIBER_INTEREST_CATEGORIES:
        points += weights.fiber_interest
    return points


def _initial_context_points(
    offering: Offering,
    initial: Optional[InitialContext],
    weights: ContextualWeights,
) -> float:
    if initial is None:
        return 0.0
    points = 0.0
    if offering.category in initial.categories:
        points += weights.initial_category
    if offering.carrier in initial.carriers:
        points += weights.initial_carrier
    return points


def contextual_breakdown(
    offering: Offering,
    active: ActiveContext,
    initial: Optional[InitialContext],
    signals: Optional[BehavioralSignals],
    weights: ContextualWeights,
    max_score: float = 100.0,
) -> ScoreBreakdown:
    """Per-section contributions of the contextual score and their clamped total."""
    base = _base_points(offering, weights)
    active_points = _active_context_points(offering, active, weights)
    signal_points = _signal_points(offering, signals, weights)
    initial_points = _initial_context_points(offering, initial, weights)
    total = min(base + active_points + signal_points + initial_points, max_score)
    return ScoreBreakdown(
        base=base,
        active_context=active_points,
        signals=signal_points,
        initial_context=initial_points,
        total=total,
    )


def contextual_score(
    offering: Offering,
    active: ActiveContext,
    initial: Optional[InitialContext],
    signals: Optional[BehavioralSignals],
    weights: ContextualWeights,
    max_score: float = 100.0,
) -> float:
    """Contextual score in [0, max_score] for one compatible offering."""
    return contextual_breakdown(offering, active, initial, signals, weights, max_score).total
