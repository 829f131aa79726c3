"""
Opportunity stage movement rules for automated (message-driven) kanban updates.

A static successor table says where automation may move an opportunity. Stages with an
empty successor set are manual-only. Closed and lost opportunities are never moved: a
legal successor there means "open a new opportunity" and the original stays frozen.
"""

import logging
from typing import Dict, FrozenSet, Optional

from pydantic import BaseModel

logger = logging.getLogger(__name__)

LEAD = "LEAD"
CONTACT = "CONTATO"
PROPOSAL = "PROPOSTA"
PROPOSAL_SENT = "PROPOSTA ENVIADA"
AWAITING_CONTRACT = "AGUARDANDO CONTRATO"
CONTRACT_SENT = "CONTRATO ENVIADO"
AWAITING_ACCEPTANCE = "AGUARDANDO ACEITE"
AWAITING_ATTENTION = "AGUARDANDO ATENÇÃO"
SUPPLIER = "FORNECEDOR"
AUTOMATIC = "AUTOMÁTICA"
CLOSED = "FECHADO"
LOST = "PERDIDO"

TERMINAL_STAGES: FrozenSet[str] = frozenset({CLOSED, LOST})

# Stages the automation must never act on.
MANUAL_LOCKED_STAGES: FrozenSet[str] = frozenset({
    PROPOSAL_SENT,
    CONTRACT_SENT,
    AWAITING_ACCEPTANCE,
    AWAITING_ATTENTION,
    AWAITING_CONTRACT,
})

ALLOWED_MOVEMENTS: Dict[str, FrozenSet[str]] = {
    LEAD: frozenset({CONTACT, PROPOSAL, SUPPLIER, LOST}),
    CONTACT: frozenset({PROPOSAL, LOST}),
    PROPOSAL: frozenset(),
    PROPOSAL_SENT: frozenset(),
    AWAITING_CONTRACT: frozenset(),
    CONTRACT_SENT: frozenset(),
    AWAITING_ACCEPTANCE: frozenset(),
    AWAITING_ATTENTION: frozenset(),
    SUPPLIER: frozenset({CONTACT, PROPOSAL, AUTOMATIC}),
    AUTOMATIC: frozenset({CONTACT, PROPOSAL, LOST}),
    # A client writing again after close/loss restarts the funnel in a new opportunity.
    CLOSED: frozenset({CONTACT, PROPOSAL}),
    LOST: frozenset({CONTACT, PROPOSAL}),
}


class MovementDecision(BaseModel):
    """Outcome of validate_movement; both flags are never true at once."""

    allowed: bool
    should_create_new: bool


def successors(stage: str) -> FrozenSet[str]:
    """Legal automated successors of a stage (empty for unknown stages)."""
    return ALLOWED_MOVEMENTS.get(stage, frozenset())


def validate_movement(
    current_stage: Optional[str],
    proposed_stage: Optional[str],
) -> MovementDecision:
    """
    Decide whether automation may move an opportunity from current to proposed stage.

    Missing stages impose no restriction. From FECHADO/PERDIDO a legal successor yields
    should_create_new=True and allowed=False.
    """
    if not current_stage or not proposed_stage:
        return MovementDecision(allowed=True, should_create_new=False)

    legal = proposed_stage in successors(current_stage)
    terminal = current_stage in TERMINAL_STAGES
    decision = MovementDecision(
        allowed=legal and not terminal,
        should_create_new=legal and terminal,
    )

    if decision.should_create_new:
        logger.info(
            "%s -> %s: new opportunity, current one stays frozen in %s",
            current_stage, proposed_stage, current_stage,
        )
    elif not decision.allowed:
        logger.warning("movement blocked: %s -> %s", current_stage, proposed_stage)
    return decision
