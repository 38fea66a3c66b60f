# cargoshop/modules/users/__init__.py
"""
Módulo de Usuários - Registro, login e logout

- signup: cria o usuário (não admin) e devolve um token
- login: confere a senha e devolve token e flag admin
- logout: sem estado; o token continua válido até expirar
- listagem de usuários, somente administradores
"""

from .router import router
from .service import UsersService
from .repository import UsersRepository

__all__ = [
    "router",
    "UsersService",
    "UsersRepository"
]
