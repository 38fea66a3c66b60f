# cargoshop/modules/pedidos/schemas.py
from pydantic import BaseModel, Field
from typing import Optional

from cargoshop.shared.schemas.common import DocumentUpdate

class PedidoBase(BaseModel):
    endereco: str = Field("", description="Endereço de entrega")
    opcaoEnvio: Optional[str] = Field(None, description="Opção de envio")
    formaPagamento: Optional[str] = Field(None, description="Forma de pagamento")
    name: str = Field(..., min_length=1, description="Nome do produto")
    price: float = Field(..., ge=0, description="Valor pago")
    image: Optional[str] = None
    NomeVendedor: str = Field(..., min_length=1)
    comprador: str = Field(..., min_length=1)
    status: str = Field(..., min_length=1)

class PedidoCreate(PedidoBase):
    idProduto: str = Field(..., min_length=1)

    class Config:
        extra = "forbid"
        json_schema_extra = {
            "example": {
                "endereco": "Rua A, 10",
                "opcaoEnvio": "PAC",
                "formaPagamento": "Pix",
                "idProduto": "5f1c...",
                "name": "Bike",
                "price": 300,
                "image": "http://localhost:5000/images/bike.png",
                "NomeVendedor": "alice",
                "comprador": "bob",
                "status": "Finalizado"
            }
        }

class PedidoUpdate(DocumentUpdate, PedidoBase):
    idProduto: Optional[str] = Field(None, description="Ignorado; não muda após a criação")

class PedidoResponse(PedidoBase):
    id: str
    idProduto: Optional[str] = None
