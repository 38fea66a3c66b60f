# cargoshop/modules/users/service.py
import logging
from typing import Any, Dict, List
from sqlalchemy.orm import Session

from cargoshop.core.auth.schemas import UserCredentials
from cargoshop.core.auth.service import AuthService
from cargoshop.core.exceptions import ConflictError, CredentialsError, StoreFailure
from cargoshop.shared.database.document_store import StoreError
from .repository import UsersRepository

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Usuário ou senha incorretos!"


class UsersService:
    def __init__(self, db: Session):
        self.db = db
        self.repository = UsersRepository(db)

    async def signup(self, credentials: UserCredentials) -> Dict[str, Any]:
        password_hash = AuthService.get_password_hash(credentials.password)

        try:
            user = self.repository.create_user(credentials.username, password_hash)
        except StoreError as e:
            logger.error(f"❌ {e}")
            raise CredentialsError("Falha no registro", status_code=500)

        if user is None:
            raise ConflictError("Usuário já existe!")

        logger.info(f"👤 Usuário registrado: {credentials.username}")
        return {
            "username": user["username"],
            "token": AuthService.get_token(user)
        }

    async def login(self, credentials: UserCredentials) -> Dict[str, Any]:
        try:
            user = self.repository.get_by_username(credentials.username)
        except StoreError as e:
            logger.error(f"❌ {e}")
            raise CredentialsError("Erro interno do servidor", status_code=500)

        if not user or not AuthService.verify_password(credentials.password, user["password"]):
            raise CredentialsError(INVALID_CREDENTIALS)

        return {
            "username": user["username"],
            "token": AuthService.get_token(user),
            "admin": bool(user.get("admin", False))
        }

    async def list_users(self) -> List[Dict[str, Any]]:
        try:
            users = self.repository.list_users()
        except StoreError as e:
            logger.error(f"❌ {e}")
            raise StoreFailure("Failed to retrieve users")

        return [
            {"username": user["username"], "admin": bool(user.get("admin", False))}
            for user in users
        ]
