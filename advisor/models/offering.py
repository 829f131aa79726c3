"""
Offering model — typed representation of a catalog plan for the scoring pipeline.

Used by the compatibility filter, both scoring policies, ranking and badges instead of raw dicts.
Built from catalog rows via Offering.model_validate(d); the storefront's camelCase keys
(linhasInclusas, tipoPessoa, ...) are accepted as aliases.
"""

from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

PersonType = Literal["PF", "PJ", "ambos"]
Modality = Literal["novo", "portabilidade", "ambos"]

FIBER_CATEGORIES = ("fibra", "combo", "internet-dedicada")
COMBO_CATEGORY = "combo"


class Offering(BaseModel):
    """
    Catalog offering used across the engine stages.

    Only id is required; every other field has the catalog's column default so partial
    rows score as if the missing attribute contributed nothing.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True, frozen=True)

    id: str
    name: str = Field("", alias="nome")
    description: Optional[str] = Field(None, alias="descricao")
    category: str = Field("", alias="categoria")
    carrier: str = Field("", alias="operadora")
    person_type: PersonType = Field("ambos", alias="tipoPessoa")
    modality: Optional[Modality] = Field("ambos", alias="modalidade")
    lines_included: Optional[int] = Field(1, alias="linhasInclusas")
    min_devices: Optional[int] = Field(1, alias="limiteDispositivosMin")
    max_devices: Optional[int] = Field(999, alias="limiteDispositivosMax")
    price: int = Field(0, alias="preco")
    active: bool = Field(True, alias="ativo")
    featured: bool = Field(False, alias="destaque")
    allows_line_calculator: bool = Field(False, alias="permiteCalculadoraLinhas")
    score_base: Optional[int] = Field(None, alias="scoreBase")
    recommended_use: List[str] = Field(default_factory=list, alias="usoRecomendado")
    badge_text: Optional[str] = Field(None, alias="badgeTexto")
    speed: Optional[str] = Field(None, alias="velocidade")
    data_allowance: Optional[str] = Field(None, alias="franquia")
    sla: Optional[str] = None

    @field_validator("recommended_use", mode="before")
    @classmethod
    def _none_to_empty_list(cls, v):
        return [] if v is None else v

    @field_validator("price", mode="before")
    @classmethod
    def _none_to_zero(cls, v):
        return 0 if v is None else v

    @field_validator("id", mode="before")
    @classmethod
    def _id_as_str(cls, v):
        return str(v) if isinstance(v, int) and not isinstance(v, bool) else v

    @field_validator("active", mode="before")
    @classmethod
    def _active_default(cls, v):
        return True if v is None else v

    @field_validator("featured", "allows_line_calculator", mode="before")
    @classmethod
    def _flag_default(cls, v):
        return False if v is None else v

    @property
    def effective_lines(self) -> int:
        """Lines included in the plan, treating a missing value as a single line."""
        return self.lines_included or 1

    @property
    def max_lines(self) -> int:
        """Largest line count the plan can serve (calculator plans are unbounded)."""
        return 999 if self.allows_line_calculator else self.effective_lines


def ensure_offerings(
    offerings: Optional[List[Union[Dict[str, Any], "Offering"]]],
) -> List["Offering"]:
    """Convert list of dicts or Offerings to list of Offering models for use in the pipeline."""
    return [
        Offering.model_validate(o) if isinstance(o, dict) else o
        for o in offerings or []
    ]
