"""
Context models — what the shopper asked for in the current session.

ActiveContext: the live filter selection, replaced on every interaction.
InitialContext: the first meaningful selection, captured once and used only as a tie-break.
RecommendationFilters: the flat filter form consumed by the recommendation policy.
"""

import time
from typing import List, Literal, Optional, Set

from pydantic import BaseModel, ConfigDict, Field

from .offering import Modality

ContextPersonType = Literal["PF", "PJ", "ambos"]


class ActiveContext(BaseModel):
    """Current-session filter selection. Read-only to the engine."""

    model_config = ConfigDict(populate_by_name=True)

    categories: Set[str] = Field(default_factory=set, alias="categorias")
    carriers: Set[str] = Field(default_factory=set, alias="operadoras")
    person_type: ContextPersonType = Field("PF", alias="tipoPessoa")
    lines: Optional[int] = Field(None, alias="linhas")
    modality: Optional[Modality] = Field(None, alias="modalidade")
    fiber: bool = Field(False, alias="fibra")
    combo: bool = False
    updated_at: float = Field(default_factory=time.time, alias="timestamp")

    @property
    def requested_lines(self) -> int:
        """Requested line count, 0 when the shopper has not asked for any."""
        return self.lines if self.lines and self.lines > 0 else 0


class InitialContext(ActiveContext):
    """First-captured ActiveContext. Never overwritten within a session."""

    captured_at: float = Field(default_factory=time.time, alias="capturadoEm")

    @classmethod
    def capture(cls, active: ActiveContext) -> "InitialContext":
        """Freeze a copy of the active context."""
        return cls.model_validate(active.model_dump())


class RecommendationFilters(BaseModel):
    """
    Filters for the recommendation policy (single category/carrier, range-style line quantity).

    line_quantity accepts the storefront's bucket strings: "1", "2", "3-5", "6+", "20+".
    """

    model_config = ConfigDict(populate_by_name=True)

    person_type: Literal["PF", "PJ"] = Field("PF", alias="tipoPessoa")
    modality: Optional[Literal["novo", "portabilidade"]] = Field(None, alias="modalidade")
    line_quantity: Optional[str] = Field(None, alias="quantidadeLinhas")
    category: Optional[str] = Field(None, alias="categoria")
    carrier: Optional[str] = Field(None, alias="operadora")
    uses: List[str] = Field(default_factory=list, alias="uso")
    device_count: Optional[int] = Field(None, alias="numDispositivos")

    @classmethod
    def from_context(cls, active: ActiveContext) -> "RecommendationFilters":
        """
        Derive recommendation filters from an active context.

        Multi-select sets collapse to their first value in sorted order, "ambos" person
        type falls back to PF and "ambos" modality means no modality filter.
        """
        return cls(
            person_type=active.person_type if active.person_type in ("PF", "PJ") else "PF",
            modality=active.modality if active.modality in ("novo", "portabilidade") else None,
            line_quantity=str(active.requested_lines) if active.requested_lines else None,
            category=sorted(active.categories)[0] if active.categories else None,
            carrier=sorted(active.carriers)[0] if active.carriers else None,
        )
