"""
Hard compatibility filter.

Excludes offerings that do not match the active context before any scoring or badge:
category, carrier, person type, line capacity, fibre, combo, modality and the active flag.
Every predicate must pass; absent context selections do not restrict anything.

Public entry points: is_compatible, failed_criterion, filter_compatible, blocking_criteria,
matches_recommendation_filters.
"""

import logging
from typing import Callable, List, Optional, Sequence, Tuple

from advisor.models.context import ActiveContext, RecommendationFilters
from advisor.models.offering import COMBO_CATEGORY, FIBER_CATEGORIES, Offering

logger = logging.getLogger(__name__)

CRITERION_CATEGORY = "categoria"
CRITERION_CARRIER = "operadora"
CRITERION_PERSON_TYPE = "tipoPessoa"
CRITERION_LINES = "linhas"
CRITERION_FIBER = "fibra"
CRITERION_COMBO = "combo"
CRITERION_MODALITY = "modalidade"
CRITERION_ACTIVE = "ativo"


def _matches_category(offering: Offering, ctx: ActiveContext) -> bool:
    """True if no category is selected or the offering's category is selected."""
    return not ctx.categories or offering.category in ctx.categories


def _matches_carrier(offering: Offering, ctx: ActiveContext) -> bool:
    """True if no carrier is selected or the offering's carrier is selected."""
    return not ctx.carriers or offering.carrier in ctx.carriers


def _matches_person_type(offering: Offering, ctx: ActiveContext) -> bool:
    """True if the offering serves both person types or the selected one."""
    return offering.person_type == "ambos" or offering.person_type == ctx.person_type


def _supports_lines(offering: Offering, ctx: ActiveContext) -> bool:
    """True if no line count is requested or the offering can serve that many lines."""
    if not ctx.requested_lines:
        return True
    return ctx.requested_lines <= offering.max_lines


def _satisfies_fiber(offering: Offering, ctx: ActiveContext) -> bool:
    """True if fibre is not required or the offering is a fibre-carrying category."""
    return not ctx.fiber or offering.category in FIBER_CATEGORIES


def _satisfies_combo(offering: Offering, ctx: ActiveContext) -> bool:
    """True if a combo is not required or the offering is a combo."""
    return not ctx.combo or offering.category == COMBO_CATEGORY


def _matches_modality(offering: Offering, ctx: ActiveContext) -> bool:
    """True if no specific modality is requested or the offering supports it."""
    if not ctx.modality or ctx.modality == "ambos":
        return True
    return offering.modality == "ambos" or offering.modality == ctx.modality


def _is_active(offering: Offering, ctx: ActiveContext) -> bool:
    return offering.active


_PREDICATES: Tuple[Tuple[str, Callable[[Offering, ActiveContext], bool]], ...] = (
    (CRITERION_CATEGORY, _matches_category),
    (CRITERION_CARRIER, _matches_carrier),
    (CRITERION_PERSON_TYPE, _matches_person_type),
    (CRITERION_LINES, _supports_lines),
    (CRITERION_FIBER, _satisfies_fiber),
    (CRITERION_COMBO, _satisfies_combo),
    (CRITERION_MODALITY, _matches_modality),
    (CRITERION_ACTIVE, _is_active),
)


def failed_criterion(offering: Offering, ctx: ActiveContext) -> Optional[str]:
    """Name of the first predicate the offering fails, or None when it is compatible."""
    for name, predicate in _PREDICATES:
        if not predicate(offering, ctx):
            return name
    return None


def is_compatible(offering: Offering, ctx: ActiveContext) -> bool:
    """True if the offering passes every hard predicate for this context."""
    return failed_criterion(offering, ctx) is None


def filter_compatible(
    offerings: Optional[Sequence[Offering]],
    ctx: ActiveContext,
) -> List[Offering]:
    """Return the offerings that pass every hard predicate, in catalog order."""
    if not offerings:
        return []
    compatible = []
    for offering in offerings:
        reason = failed_criterion(offering, ctx)
        if reason is not None:
            logger.debug("excluded offering=%s name=%r criterion=%s", offering.id, offering.name, reason)
            continue
        compatible.append(offering)
    logger.info("compatible offerings: %d of %d", len(compatible), len(offerings))
    return compatible


def matches_recommendation_filters(offering: Offering, filters: RecommendationFilters) -> bool:
    """Basic filter of the recommendation path: active, person type, category, carrier."""
    if not offering.active:
        return False
    if offering.person_type != "ambos" and offering.person_type != filters.person_type:
        return False
    if filters.category and offering.category != filters.category:
        return False
    if filters.carrier and offering.carrier != filters.carrier:
        return False
    return True


def _count_compatible(offerings: Sequence[Offering], ctx: ActiveContext) -> int:
    return sum(1 for offering in offerings if is_compatible(offering, ctx))


def _relaxations(ctx: ActiveContext) -> List[Tuple[str, ActiveContext]]:
    """Contexts with one selected criterion removed: carrier, category, lines, fibre."""
    relaxed = []
    if ctx.carriers:
        relaxed.append((CRITERION_CARRIER, ctx.model_copy(update={"carriers": set()})))
    if ctx.categories:
        relaxed.append((CRITERION_CATEGORY, ctx.model_copy(update={"categories": set()})))
    if ctx.requested_lines:
        relaxed.append((CRITERION_LINES, ctx.model_copy(update={"lines": None})))
    if ctx.fiber:
        relaxed.append((CRITERION_FIBER, ctx.model_copy(update={"fiber": False})))
    return relaxed


def blocking_criteria(
    offerings: Optional[Sequence[Offering]],
    ctx: ActiveContext,
) -> List[str]:
    """
    Criteria whose removal alone would bring back more offerings.

    Used for "no results, try removing X" messaging; ctx is never modified.
    """
    if not offerings:
        return []
    current = _count_compatible(offerings, ctx)
    blockers = []
    for name, relaxed_ctx in _relaxations(ctx):
        if _count_compatible(offerings, relaxed_ctx) > current:
            blockers.append(name)
    return blockers
