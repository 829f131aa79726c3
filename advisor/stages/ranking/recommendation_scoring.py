"""
Recommendation scoring: bonuses and penalties around the catalog base score.

Separate formula from the contextual policy (it rewards exact filter matches, penalises
mismatches and adds a price term). Also builds the human-readable rationale shown on cards.
"""

from typing import List

from advisor.models.config import RecommendationWeights
from advisor.models.context import RecommendationFilters
from advisor.models.offering import Offering
from advisor.utils.lines import parse_line_quantity

DEFAULT_RATIONALE = "Plano recomendado para você"
RATIONALE_SEPARATOR = " • "


def _matching_uses(offering: Offering, filters: RecommendationFilters) -> List[str]:
    """Requested uses the offering is recommended for, in request order."""
    if not filters.uses or not offering.recommended_use:
        return []
    return [use for use in filters.uses if use in offering.recommended_use]


def _device_range(offering: Offering):
    return offering.min_devices or 1, offering.max_devices or 999


def recommendation_score(
    offering: Offering,
    filters: RecommendationFilters,
    weights: RecommendationWeights,
    max_score: float = 100.0,
) -> float:
    """Recommendation score clamped to [0, max_score]."""
    score = float(offering.score_base or weights.default_base)

    if filters.person_type == offering.person_type:
        score += weights.person_type_match
    elif offering.person_type == "ambos":
        score += weights.person_type_both
    else:
        score += weights.person_type_mismatch

    if filters.modality and offering.modality:
        if filters.modality == offering.modality:
            score += weights.modality_match
        elif offering.modality == "ambos":
            score += weights.modality_both
        else:
            score += weights.modality_mismatch

    if filters.category:
        if offering.category == filters.category:
            score += weights.category_match
        else:
            score += weights.category_mismatch

    if filters.carrier:
        if offering.carrier == filters.carrier:
            score += weights.carrier_match
        else:
            score += weights.carrier_mismatch

    score += len(_matching_uses(offering, filters)) * weights.use_match

    if filters.device_count:
        low, high = _device_range(offering)
        if low <= filters.device_count <= high:
            score += weights.devices_in_range
        elif filters.device_count < low:
            score += weights.devices_below_min
        else:
            score += weights.devices_above_max

    if filters.line_quantity:
        wanted = parse_line_quantity(filters.line_quantity)
        plan_lines = offering.effective_lines
        if plan_lines >= wanted:
            score += weights.lines_supported
            if plan_lines == wanted:
                score += weights.lines_exact_bonus
        else:
            score += weights.lines_insufficient

    if offering.featured:
        score += weights.featured

    if offering.price:
        score += max(
            0.0,
            min(weights.price_max_bonus, weights.price_max_bonus - offering.price / weights.price_divisor),
        )

    return max(0.0, min(max_score, score))


def recommendation_rationale(offering: Offering, filters: RecommendationFilters) -> str:
    """Why the offering fits these filters, as a short " • "-joined sentence."""
    reasons = []

    if filters.person_type == "PF":
        if offering.speed:
            reasons.append(f"Velocidade de {offering.speed}")
        if offering.data_allowance:
            reasons.append(f"{offering.data_allowance} de dados")
    else:
        if offering.sla:
            reasons.append("Com garantia de SLA")
        if offering.effective_lines > 1:
            reasons.append(f"{offering.effective_lines} linhas inclusas")

    uses = _matching_uses(offering, filters)
    if uses:
        reasons.append(f"Ideal para {', '.join(uses)}")

    if filters.device_count:
        low, high = _device_range(offering)
        if low <= filters.device_count <= high:
            plural = "s" if filters.device_count > 1 else ""
            reasons.append(f"Perfeito para {filters.device_count} dispositivo{plural}")

    if filters.line_quantity:
        wanted = parse_line_quantity(filters.line_quantity)
        plan_lines = offering.effective_lines
        if plan_lines >= wanted:
            if plan_lines == 1:
                reasons.append("Perfeito para linha individual")
            else:
                reasons.append(f"Suporta até {plan_lines} linhas")

    return RATIONALE_SEPARATOR.join(reasons) if reasons else DEFAULT_RATIONALE
