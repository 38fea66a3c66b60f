# cargoshop/modules/users/repository.py
from typing import Any, Dict, List, Optional
from sqlalchemy.orm import Session

from cargoshop.shared.database.document_store import DocumentStore
from cargoshop.shared.database.models import USERS

class UsersRepository:
    """Usuários são identificados pelo username"""

    def __init__(self, db: Session):
        self.db = db
        self.store = DocumentStore(db)

    def get_by_username(self, username: str) -> Optional[Dict[str, Any]]:
        return self.store.get(USERS, username)

    def create_user(self, username: str, password_hash: str, admin: bool = False) -> Optional[Dict[str, Any]]:
        """Criar usuário; retorna None se o username já existe"""
        user = {
            "username": username,
            "password": password_hash,
            "admin": admin
        }
        if not self.store.put_if_absent(USERS, username, user):
            return None
        return user

    def list_users(self) -> List[Dict[str, Any]]:
        return self.store.scan(USERS)
