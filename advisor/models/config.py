"""
Scoring configuration — weight tables for both scoring policies and ranking limits.

ScoringConfig defaults are defined here. The server may pass a dict
(e.g. from a JSON file at SCORING_CONFIG_PATH); from_dict() merges it with these defaults.
"""

from typing import Dict, Optional

from pydantic import BaseModel, Field, model_validator

POLICY_CONTEXTUAL = "contextual"
POLICY_RECOMMENDATION = "recommendation"
POLICY_NAMES = (POLICY_CONTEXTUAL, POLICY_RECOMMENDATION)


class ContextualWeights(BaseModel):
    """Weights for the contextual policy (base 20 + active 40 + signals 30 + initial 10)."""

    # -------------------------------------------------------------------------
    # Base score: min(score_base / base_divisor, base_cap)
    # -------------------------------------------------------------------------

    base_divisor: float = 5.0
    base_cap: float = 20.0

    # -------------------------------------------------------------------------
    # Active context alignment
    # -------------------------------------------------------------------------

    carrier_match: float = 10.0
    category_match: float = 10.0
    # Plan lines exactly equal to the requested lines.
    lines_exact: float = 10.0
    # Plan lines within lines_near_tolerance of the request.
    lines_near: float = 5.0
    lines_near_tolerance: int = 1
    recommended_use: float = 5.0
    featured: float = 5.0

    # -------------------------------------------------------------------------
    # Behavioral signals
    # -------------------------------------------------------------------------

    viewed: float = 8.0
    compared: float = 6.0
    cart_added: float = 4.0
    # Dwell time in the offering's category; the long threshold wins when both pass.
    dwell_long_ms: int = 60_000
    dwell_long: float = 8.0
    dwell_short_ms: int = 30_000
    dwell_short: float = 4.0
    fiber_interest: float = 4.0

    # -------------------------------------------------------------------------
    # Initial context (tie-break only)
    # -------------------------------------------------------------------------

    initial_category: float = 5.0
    initial_carrier: float = 5.0

    @model_validator(mode="after")
    def dwell_thresholds_ordered(self):
        if self.dwell_short_ms > self.dwell_long_ms:
            raise ValueError(
                f"dwell_short_ms ({self.dwell_short_ms}) must not exceed dwell_long_ms ({self.dwell_long_ms})"
            )
        if self.base_divisor <= 0:
            raise ValueError(f"base_divisor must be positive, got {self.base_divisor}")
        return self


class RecommendationWeights(BaseModel):
    """Weights for the recommendation policy (additive bonuses and penalties around a base)."""

    # Base used when the offering has no score_base.
    default_base: float = 50.0

    person_type_match: float = 25.0
    person_type_both: float = 15.0
    person_type_mismatch: float = -20.0

    modality_match: float = 15.0
    modality_both: float = 8.0
    modality_mismatch: float = -10.0

    category_match: float = 20.0
    category_mismatch: float = -15.0

    carrier_match: float = 10.0
    carrier_mismatch: float = -5.0

    # Per matching recommended use.
    use_match: float = 5.0

    devices_in_range: float = 10.0
    devices_below_min: float = -8.0
    devices_above_max: float = -15.0

    lines_supported: float = 12.0
    lines_exact_bonus: float = 3.0
    lines_insufficient: float = -10.0

    featured: float = 5.0

    # Price term: max(0, min(price_max_bonus, price_max_bonus - price / price_divisor))
    price_max_bonus: float = 10.0
    price_divisor: float = 5000.0


class ScoringConfig(BaseModel):
    """Configuration for the scoring engine."""

    contextual: ContextualWeights = Field(default_factory=ContextualWeights)
    recommendation: RecommendationWeights = Field(default_factory=RecommendationWeights)

    # Policy used when a request does not name one.
    default_policy: str = POLICY_CONTEXTUAL

    # Upper clamp for every policy.
    max_score: float = 100.0

    # How many ranked positions get a positional badge.
    positional_badges: int = 3

    @model_validator(mode="after")
    def known_default_policy(self):
        if self.default_policy not in POLICY_NAMES:
            raise ValueError(
                f"Unknown default_policy {self.default_policy!r}; expected one of {POLICY_NAMES}"
            )
        if self.max_score <= 0:
            raise ValueError(f"max_score must be positive, got {self.max_score}")
        return self

    @classmethod
    def from_dict(cls, config_dict: Dict) -> "ScoringConfig":
        """Create config from dictionary (e.g., loaded from JSON)."""
        flat = {}
        if "contextual" in config_dict:
            flat["contextual"] = ContextualWeights(
                **(ContextualWeights().model_dump() | dict(config_dict["contextual"]))
            )
        if "recommendation" in config_dict:
            flat["recommendation"] = RecommendationWeights(
                **(RecommendationWeights().model_dump() | dict(config_dict["recommendation"]))
            )
        for key in ("default_policy", "max_score", "positional_badges"):
            if key in config_dict:
                flat[key] = config_dict[key]
        return cls.model_validate(flat)


DEFAULT_CONFIG = ScoringConfig()


def resolve_config(config: Optional["ScoringConfig"]) -> "ScoringConfig":
    """Return config or DEFAULT_CONFIG when none is provided."""
    return config if config is not None else DEFAULT_CONFIG
