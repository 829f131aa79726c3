"""Request models for the opportunity pipeline endpoints."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class MovementRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    current_stage: Optional[str] = Field(None, alias="etapaAtual")
    proposed_stage: Optional[str] = Field(None, alias="etapaProposta")


class ClassifyMessageRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    message: str = Field(alias="mensagem")
    current_stage: Optional[str] = Field(None, alias="etapaAtual")
