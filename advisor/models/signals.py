"""
Behavioral signal model — counters and id sets accumulated over a storefront session.

Grows monotonically within a session and is reset only when the session is cleared.
Built from session payloads via BehavioralSignals.model_validate(d).
"""

import time
from enum import Enum
from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class SignalEvent(str, Enum):
    """Interaction events that update BehavioralSignals."""

    CARRIER_CHANGED = "mudanca_operadora"
    CATEGORY_CHANGED = "mudanca_categoria"
    LINES_ADJUSTED = "ajuste_linhas"
    CATEGORY_TIME = "tempo_categoria"
    OFFERING_VIEWED = "plano_visualizado"
    OFFERING_COMPARED = "plano_comparado"
    OFFERING_ADDED_TO_CART = "plano_adicionado_carrinho"
    OFFERING_REMOVED_FROM_CART = "plano_removido_carrinho"
    FIBER_INTEREST = "interesse_fibra"
    COMBO_INTEREST = "interesse_combo"


class BehavioralSignals(BaseModel):
    """
    Session interaction signals.

    dwell_ms_by_category: milliseconds spent browsing each category.
    viewed_ids / compared_ids: de-duplicated offering ids.
    cart_added_ids / cart_removed_ids: append-only event logs.
    """

    model_config = ConfigDict(populate_by_name=True)

    carrier_changes: int = Field(0, alias="trocasOperadora")
    category_changes: int = Field(0, alias="trocasCategoria")
    line_adjustments: List[Optional[int]] = Field(default_factory=list, alias="ajustesLinhas")

    dwell_ms_by_category: Dict[str, int] = Field(default_factory=dict, alias="tempoPorCategoria")
    total_time_ms: int = Field(0, alias="tempoTotal")
    session_started_at: float = Field(default_factory=time.time, alias="inicioSessao")

    viewed_ids: List[str] = Field(default_factory=list, alias="planosVisualizados")
    compared_ids: List[str] = Field(default_factory=list, alias="planosComparados")
    cart_added_ids: List[str] = Field(default_factory=list, alias="planosAdicionadosCarrinho")
    cart_removed_ids: List[str] = Field(default_factory=list, alias="planosRemovidosCarrinho")

    fiber_interest: int = Field(0, alias="interesseFibra")
    combo_interest: int = Field(0, alias="interesseCombo")
    price_preference: Optional[Literal["baixo", "medio", "alto"]] = Field(
        None, alias="preferenciaPorPreco"
    )

    def dwell_ms(self, category: str) -> int:
        """Accumulated dwell time for a category, 0 when never visited."""
        return self.dwell_ms_by_category.get(category) or 0


class CategoryTime(BaseModel):
    """Payload of a tempo_categoria event: time spent browsing one category."""

    model_config = ConfigDict(populate_by_name=True)

    category: str = Field("", alias="categoria")
    ms: float = Field(0, alias="tempo")
