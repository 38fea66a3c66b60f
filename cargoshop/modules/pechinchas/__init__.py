# cargoshop/modules/pechinchas/__init__.py
"""
Módulo de Pechinchas - Negociação de preço

O comprador propõe um valor (pendente), o vendedor aceita (aceito) e,
depois do pagamento, a pechincha é finalizada (finalizado). Cancelar ou
recusar remove o registro.

Arquitetura:
- router.py: Endpoints de pechinchas
- service.py: Regras, snapshot do produto e mapeamento de erros
- repository.py: Acesso ao document store
- schemas.py: Modelos de request/response
- transitions.py: Transições válidas de pstatus
"""

from .router import router
from .service import PechinchasService
from .repository import PechinchasRepository

__all__ = [
    "router",
    "PechinchasService",
    "PechinchasRepository"
]
