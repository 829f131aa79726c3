"""
Opportunity Stage Movement Tests

Automation may only follow the successor table; closed and lost opportunities
are never moved but may spawn a new opportunity.

Run:
----
    pytest tests/test_movement.py -v
"""

import itertools

import pytest

from advisor.opportunities import (
    ALLOWED_MOVEMENTS,
    MANUAL_LOCKED_STAGES,
    TERMINAL_STAGES,
    successors,
    validate_movement,
)


class TestValidateMovement:
    """validate_movement decisions."""

    def test_reply_after_close_spawns_new_opportunity(self):
        decision = validate_movement("FECHADO", "CONTATO")
        assert decision.allowed is False
        assert decision.should_create_new is True

    def test_proposal_stage_is_manual(self):
        decision = validate_movement("PROPOSTA", "FECHADO")
        assert decision.allowed is False
        assert decision.should_create_new is False

    @pytest.mark.parametrize(
        "current, proposed",
        [
            ("LEAD", "CONTATO"),
            ("LEAD", "PROPOSTA"),
            ("LEAD", "FORNECEDOR"),
            ("LEAD", "PERDIDO"),
            ("CONTATO", "PROPOSTA"),
            ("FORNECEDOR", "AUTOMÁTICA"),
            ("AUTOMÁTICA", "PERDIDO"),
        ],
    )
    def test_allowed_moves(self, current, proposed):
        decision = validate_movement(current, proposed)
        assert decision.allowed is True
        assert decision.should_create_new is False

    @pytest.mark.parametrize(
        "current, proposed",
        [("CONTATO", "LEAD"), ("CONTATO", "FECHADO"), ("FECHADO", "PERDIDO"), ("PERDIDO", "LEAD")],
    )
    def test_blocked_moves(self, current, proposed):
        decision = validate_movement(current, proposed)
        assert decision.allowed is False
        assert decision.should_create_new is False

    def test_lost_opportunity_reopened_as_new(self):
        decision = validate_movement("PERDIDO", "PROPOSTA")
        assert (decision.allowed, decision.should_create_new) == (False, True)

    @pytest.mark.parametrize("current, proposed", [(None, "CONTATO"), ("LEAD", None), ("", "")])
    def test_missing_stage_is_unrestricted(self, current, proposed):
        decision = validate_movement(current, proposed)
        assert decision.allowed is True
        assert decision.should_create_new is False

    def test_unknown_stage_has_no_successors(self):
        assert successors("ARQUIVADO") == frozenset()
        assert validate_movement("ARQUIVADO", "CONTATO").allowed is False

    def test_manual_stages_have_no_successors(self):
        for stage in MANUAL_LOCKED_STAGES:
            assert ALLOWED_MOVEMENTS[stage] == frozenset()

    def test_flags_never_both_true(self):
        stages = list(ALLOWED_MOVEMENTS)
        for current, proposed in itertools.product(stages, stages):
            decision = validate_movement(current, proposed)
            assert not (decision.allowed and decision.should_create_new)
            if current in TERMINAL_STAGES:
                assert decision.allowed is False
