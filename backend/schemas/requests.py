"""Request body models for the Schema Store API."""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class SchemaCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: Optional[str] = None
    document: dict[str, Any] = Field(..., alias="schema")
    token: Optional[str] = None
