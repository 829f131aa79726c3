"""
Session model — everything the engine knows about one storefront session.
"""

import time
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .context import ActiveContext, InitialContext
from .signals import BehavioralSignals

SCHEMA_VERSION = "v1"


class ContextSession(BaseModel):
    """Initial context, active context and behavioral signals for one session."""

    model_config = ConfigDict(populate_by_name=True)

    session_id: str
    initial: Optional[InitialContext] = Field(None, alias="contextoInicial")
    active: ActiveContext = Field(default_factory=ActiveContext, alias="contextoAtivo")
    signals: BehavioralSignals = Field(default_factory=BehavioralSignals, alias="sinais")
    version: str = Field(SCHEMA_VERSION, alias="versao")
    created_at: float = Field(default_factory=time.time)


class ContextSummary(BaseModel):
    """Counts shown in the storefront debug panel."""

    has_initial_context: bool
    active_filters: int
    captured_signals: int
