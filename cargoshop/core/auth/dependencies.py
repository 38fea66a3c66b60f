# cargoshop/core/auth/dependencies.py
from typing import Optional
import logging
from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session

from cargoshop.config.database import get_db
from cargoshop.core.auth.service import AuthService
from cargoshop.core.exceptions import AuthenticationError, AuthorizationError, StoreFailure
from cargoshop.shared.database.document_store import DocumentStore, StoreError
from cargoshop.shared.database.models import USERS

logger = logging.getLogger(__name__)

security = HTTPBearer(auto_error=False)

async def verify_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    db: Session = Depends(get_db)
) -> dict:
    """Obter o usuário atual a partir do bearer token"""

    if credentials is None:
        raise AuthenticationError()

    payload = AuthService.verify_token(credentials.credentials)
    if payload is None:
        raise AuthenticationError()

    username = payload.get("username")
    if username is None:
        raise AuthenticationError()

    try:
        user = DocumentStore(db).get(USERS, username)
    except StoreError as e:
        logger.error(f"❌ Erro carregando usuário do token: {e}")
        raise StoreFailure("Failed to authenticate user")

    # Sem lista de revogação: o token vale até expirar se o usuário existir
    if user is None:
        raise AuthenticationError()

    return user

async def verify_admin(current_user: dict = Depends(verify_user)) -> dict:
    """Dependency que exige usuário administrador"""
    if not current_user.get("admin"):
        raise AuthorizationError()
    return current_user
