# cargoshop/shared/schemas/common.py
from pydantic import BaseModel, Field
from typing import Optional

class MessageResponse(BaseModel):
    message: str

class DeletedResponse(BaseModel):
    id: str

class DocumentUpdate(BaseModel):
    """Base dos PUT: aceita o próprio id do documento, que é ignorado"""
    id: Optional[str] = Field(None, description="Ignorado; vale o id da URL")

    class Config:
        extra = "forbid"
