# cargoshop/modules/reviews/__init__.py
"""
Módulo de Avaliações

Avaliação do comprador sobre o vendedor depois de um pedido. Não há
checagem de que o pedido exista ou de que o autor participou dele.
"""

from .router import router
from .service import ReviewsService
from .repository import ReviewsRepository

__all__ = [
    "router",
    "ReviewsService",
    "ReviewsRepository"
]
