# cargoshop/modules/products/schemas.py
from pydantic import BaseModel, Field
from typing import Optional

from cargoshop.shared.schemas.common import DocumentUpdate

class ProductBase(BaseModel):
    name: str = Field(..., min_length=1, description="Nome do produto")
    price: float = Field(..., ge=0, description="Preço em R$")
    description: Optional[str] = None
    category: Optional[str] = None
    seller: str = Field(..., min_length=1, description="username do vendedor")
    image: Optional[str] = Field(None, description="URL da imagem")

class ProductCreate(ProductBase):
    class Config:
        extra = "forbid"
        json_schema_extra = {
            "example": {
                "name": "Bike",
                "price": 500,
                "description": "Bicicleta aro 29",
                "category": "Esportes",
                "seller": "alice",
                "image": "http://localhost:5000/images/bike.png"
            }
        }

class ProductUpdate(DocumentUpdate, ProductBase):
    pass

class ProductResponse(ProductBase):
    id: str
