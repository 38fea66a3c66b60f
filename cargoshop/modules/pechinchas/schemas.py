# cargoshop/modules/pechinchas/schemas.py
from pydantic import AliasChoices, BaseModel, Field
from typing import Optional

from cargoshop.shared.schemas.common import DocumentUpdate
from .transitions import PechinchaStatus

class PechinchaCreate(BaseModel):
    """Proposta do comprador; imagem, preço e vendedor vêm do produto"""
    idProduct: str = Field(..., min_length=1, description="id do produto negociado")
    discount: float = Field(
        ...,
        ge=0,
        validation_alias=AliasChoices("discount", "descount"),
        description="Valor proposto em R$"
    )
    buyer: str = Field(..., min_length=1)
    pstatus: PechinchaStatus = PechinchaStatus.PENDENTE

    class Config:
        extra = "forbid"
        json_schema_extra = {
            "example": {
                "idProduct": "5f1c...",
                "discount": 300,
                "buyer": "bob",
                "pstatus": "pendente"
            }
        }

class PechinchaUpdate(DocumentUpdate):
    productId: str = Field(..., min_length=1)
    discount: float = Field(..., ge=0, validation_alias=AliasChoices("discount", "descount"))
    price: float = Field(..., ge=0)
    buyer: str = Field(..., min_length=1)
    seller: str = Field(..., min_length=1)
    pstatus: PechinchaStatus
    image: Optional[str] = Field(None, description="Ignorado; vem do produto")

class PechinchaResponse(BaseModel):
    id: str
    productId: str
    discount: float
    image: Optional[str] = None
    price: float
    buyer: str
    seller: str
    pstatus: PechinchaStatus
