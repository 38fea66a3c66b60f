# cargoshop/core/auth/service.py
from datetime import datetime, timedelta, timezone
from typing import Optional
import logging
from jose import jwt, JWTError
from passlib.context import CryptContext
from cargoshop.config.settings import settings

logger = logging.getLogger(__name__)

# Password context
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

class AuthService:
    """Serviço de autenticação"""

    @staticmethod
    def verify_password(plain_password: str, hashed_password: str) -> bool:
        """Verificar senha"""
        try:
            # bcrypt só considera os primeiros 72 bytes
            encoded_password = plain_password.encode('utf-8')[:72].decode('utf-8', 'ignore')
            return pwd_context.verify(encoded_password, hashed_password)
        except (ValueError, TypeError) as e:
            logger.warning(f"Password verification error: {str(e)}")
            return False

    @staticmethod
    def get_password_hash(password: str) -> str:
        """Gerar hash da senha"""
        encoded_password = password.encode('utf-8')[:72].decode('utf-8', 'ignore')
        return pwd_context.hash(encoded_password)

    @staticmethod
    def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
        """Criar token de acesso com payload {username, admin}"""
        to_encode = data.copy()

        if "username" not in to_encode:
            raise ValueError("username é obrigatório no token")

        if expires_delta:
            expire = datetime.now(timezone.utc) + expires_delta
        else:
            expire = datetime.now(timezone.utc) + timedelta(minutes=settings.access_token_expire_minutes)

        to_encode.update({"exp": expire})

        return jwt.encode(to_encode, settings.secret_key, algorithm=settings.algorithm)

    @staticmethod
    def get_token(user: dict) -> str:
        return AuthService.create_access_token(
            {"username": user["username"], "admin": bool(user.get("admin", False))}
        )

    @staticmethod
    def verify_token(token: str) -> Optional[dict]:
        """Verificar e decodificar token (assinatura e expiração)"""
        try:
            payload = jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])
            return payload
        except JWTError:
            return None
