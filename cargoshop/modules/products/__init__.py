# cargoshop/modules/products/__init__.py
"""
Módulo de Produtos

- Listagem pública de produtos
- Cadastro, edição e remoção por usuários autenticados
- Aviso em tempo real 'productUpdated' a cada alteração

Arquitetura:
- router.py: Endpoints de produtos
- service.py: Regras e mapeamento de erros
- repository.py: Acesso ao document store
- schemas.py: Modelos de request/response
"""

from .router import router
from .service import ProductsService
from .repository import ProductsRepository

__all__ = [
    "router",
    "ProductsService",
    "ProductsRepository"
]
