# cargoshop/modules/pedidos/__init__.py
"""
Módulo de Pedidos

Um pedido é criado pelo comprador depois que a pechincha é aceita e o
pagamento é informado. O cliente monta o registro inteiro.

Arquitetura:
- router.py: Endpoints de pedidos
- service.py: Mapeamento de erros e avisos em tempo real
- repository.py: Acesso ao document store
- schemas.py: Modelos de request/response
"""

from .router import router
from .service import PedidosService
from .repository import PedidosRepository

__all__ = [
    "router",
    "PedidosService",
    "PedidosRepository"
]
