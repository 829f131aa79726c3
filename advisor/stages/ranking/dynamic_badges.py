"""
Dynamic badge: the one context-aware label that explains why a plan fits.

Candidates are collected by rule and the highest priority wins; equal priorities keep
rule order. Custom badge text may reference [preco], [velocidade], [franquia] and [linhas].
"""

import logging
import re
from typing import List, Optional

from advisor.models.context import ActiveContext
from advisor.models.offering import Offering
from advisor.models.scoring import DynamicBadge
from advisor.utils.money import format_brl

logger = logging.getLogger(__name__)

CHEAP_PRICE_CENTS = 10_000
GENEROUS_ALLOWANCE_GB = 50
_GB_PATTERN = re.compile(r"(\d+)\s*GB", re.IGNORECASE)


def _render_custom_text(offering: Offering, ctx: ActiveContext) -> str:
    """Substitute the catalog's badge placeholders."""
    text = offering.badge_text or ""
    text = text.replace("[preco]", format_brl(offering.price))
    if offering.speed:
        text = text.replace("[velocidade]", offering.speed)
    if offering.data_allowance:
        text = text.replace("[franquia]", offering.data_allowance)
    if ctx.lines:
        text = text.replace("[linhas]", str(ctx.lines))
    return text


def _allowance_badge(offering: Offering) -> Optional[DynamicBadge]:
    allowance = offering.data_allowance or ""
    if "ilimitado" in allowance.lower():
        return DynamicBadge(text="Internet ilimitada", variant="success", priority=2, reason="franquia-ilimitada")
    match = _GB_PATTERN.search(allowance)
    if match and int(match.group(1)) >= GENEROUS_ALLOWANCE_GB:
        return DynamicBadge(
            text=f"{allowance} de internet", variant="info", priority=2, reason="franquia-generosa"
        )
    return None


def badge_candidates(offering: Offering, ctx: ActiveContext) -> List[DynamicBadge]:
    """Every dynamic badge the offering qualifies for, in rule order."""
    badges = []

    if ctx.lines and ctx.lines > 1 and offering.allows_line_calculator:
        total = offering.price * ctx.lines
        badges.append(DynamicBadge(
            text=f"{ctx.lines} linhas {format_brl(total)} total",
            variant="success",
            priority=10,
            reason="calculadora-linhas",
        ))

    if ctx.person_type == "PJ" and offering.person_type == "PJ":
        badges.append(DynamicBadge(text="Ideal para empresas", variant="info", priority=9, reason="tipo-pessoa-pj"))

    if ctx.person_type == "PF" and offering.person_type == "PF" and offering.category in ("movel", "combo"):
        badges.append(DynamicBadge(text="Indicado para uso diário", variant="info", priority=8, reason="tipo-pessoa-pf"))

    if ctx.fiber and offering.category == "fibra" and offering.speed:
        badges.append(DynamicBadge(
            text=f"Fibra {offering.speed}", variant="primary", priority=8, reason="fibra-velocidade"
        ))

    if offering.badge_text and offering.badge_text.strip():
        badges.append(DynamicBadge(
            text=_render_custom_text(offering, ctx), variant="info", priority=7, reason="badge-customizado"
        ))

    if offering.featured:
        badges.append(DynamicBadge(text="Mais popular", variant="default", priority=6, reason="destaque-admin"))

    if offering.price < CHEAP_PRICE_CENTS and offering.category in ("movel", "fibra"):
        badges.append(DynamicBadge(
            text="Ótimo custo-benefício", variant="success", priority=5, reason="preco-competitivo"
        ))

    if offering.category == "combo" and ctx.combo:
        badges.append(DynamicBadge(text="Pacote completo", variant="info", priority=4, reason="combo-completo"))

    if offering.sla and ctx.person_type == "PJ":
        badges.append(DynamicBadge(text="Com SLA garantido", variant="info", priority=3, reason="sla-empresarial"))

    if offering.category == "movel" and offering.data_allowance:
        allowance = _allowance_badge(offering)
        if allowance is not None:
            badges.append(allowance)

    return badges


def dynamic_badge(offering: Offering, ctx: ActiveContext) -> Optional[DynamicBadge]:
    """Highest-priority dynamic badge for the offering, or None."""
    badges = badge_candidates(offering, ctx)
    if not badges:
        return None
    selected = max(badges, key=lambda b: b.priority)
    logger.debug("badge offering=%s text=%r reason=%s", offering.id, selected.text, selected.reason)
    return selected
