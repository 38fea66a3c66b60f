# cargoshop/core/exceptions.py
from typing import Dict, Optional
from fastapi import HTTPException, status


class ApiError(HTTPException):
    """Erro HTTP renderizado como {body_key: detail}"""
    body_key = "error"

    def __init__(self, status_code: int, detail: str, headers: Optional[Dict[str, str]] = None):
        super().__init__(status_code=status_code, detail=detail, headers=headers)


class AuthenticationError(ApiError):
    def __init__(self, detail: str = "Unauthorized"):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            headers={"WWW-Authenticate": "Bearer"},
        )


class AuthorizationError(ApiError):
    def __init__(self, detail: str = "Apenas administradores podem realizar esta ação!"):
        super().__init__(status_code=status.HTTP_403_FORBIDDEN, detail=detail)


class NotFoundError(ApiError):
    def __init__(self, detail: str):
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class StoreFailure(ApiError):
    def __init__(self, detail: str):
        super().__init__(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=detail)


class TransitionError(ApiError):
    def __init__(self, detail: str):
        super().__init__(status_code=status.HTTP_409_CONFLICT, detail=detail)


class UploadError(ApiError):
    def __init__(self, detail: str, status_code: int = status.HTTP_400_BAD_REQUEST):
        super().__init__(status_code=status_code, detail=detail)


class CredentialsError(ApiError):
    """Login/signup respondem com {message: ...}"""
    body_key = "message"

    def __init__(self, detail: str = "Usuário ou senha incorretos!", status_code: int = status.HTTP_401_UNAUTHORIZED):
        super().__init__(status_code=status_code, detail=detail)


class ConflictError(ApiError):
    body_key = "message"

    def __init__(self, detail: str):
        super().__init__(status_code=status.HTTP_409_CONFLICT, detail=detail)
