# cargoshop/modules/reviews/schemas.py
from pydantic import BaseModel, Field
from typing import Optional

from cargoshop.shared.schemas.common import DocumentUpdate

class ReviewBase(BaseModel):
    orderId: str = Field(..., min_length=1)
    buyer: str = Field(..., min_length=1)
    seller: str = Field(..., min_length=1)
    rate: float = Field(..., ge=0, le=5, description="Nota de 0 a 5")
    message: Optional[str] = None

class ReviewCreate(ReviewBase):
    class Config:
        extra = "forbid"

class ReviewUpdate(DocumentUpdate, ReviewBase):
    pass

class ReviewResponse(ReviewBase):
    id: str
