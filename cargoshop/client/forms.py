# cargoshop/client/forms.py
"""Validação dos formulários do cliente, feita antes de chamar a API."""
from pydantic import BaseModel, Field, model_validator, validator
from typing import Optional

MIN_DISCOUNT_RATIO = 0.1
MAX_DISCOUNT_RATIO = 0.9


class ProductForm(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    description: Optional[str] = Field(None, max_length=1000)
    price: float = Field(..., gt=0)
    category: str = Field(..., min_length=1)

    @validator('name', 'category')
    def not_blank(cls, v):
        if not v.strip():
            raise ValueError('Campo obrigatório')
        return v.strip()


class PechinchaForm(BaseModel):
    """Valor proposto, entre 10% e 90% do preço do produto"""
    discount: float = Field(..., gt=0)
    product_price: float = Field(..., gt=0)

    @model_validator(mode="after")
    def discount_in_range(self):
        low = round(MIN_DISCOUNT_RATIO * self.product_price, 2)
        high = round(MAX_DISCOUNT_RATIO * self.product_price, 2)
        if not low <= self.discount <= high:
            raise ValueError(f'O valor deve ficar entre R$ {low:.2f} e R$ {high:.2f}')
        return self


class CheckoutForm(BaseModel):
    endereco: str = Field(..., min_length=5)
    opcaoEnvio: str = Field(..., min_length=1)
    formaPagamento: str = Field(..., min_length=1)


class ReviewForm(BaseModel):
    rate: int = Field(..., ge=1, le=5)
    message: Optional[str] = Field(None, max_length=500)
