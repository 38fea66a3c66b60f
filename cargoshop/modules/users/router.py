# cargoshop/modules/users/router.py
from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from cargoshop.config.database import get_db
from cargoshop.core.auth.dependencies import verify_admin
from cargoshop.core.auth.schemas import UserCredentials, SignupResponse, LoginResponse, UserResponse
from cargoshop.shared.schemas.common import MessageResponse
from .service import UsersService

router = APIRouter()

@router.get("", response_model=List[UserResponse])
async def list_users(
    current_user: dict = Depends(verify_admin),
    db: Session = Depends(get_db)
):
    """Listar usuários (somente administradores)"""
    service = UsersService(db)
    return await service.list_users()

@router.post("/signup", response_model=SignupResponse)
async def signup(
    credentials: UserCredentials,
    db: Session = Depends(get_db)
):
    """
    Registrar um novo usuário

    **Returns:**
    - username e token JWT (1 hora)
    """
    service = UsersService(db)
    return await service.signup(credentials)

@router.post("/login", response_model=LoginResponse)
async def login(
    credentials: UserCredentials,
    db: Session = Depends(get_db)
):
    """
    Login com username e senha

    **Returns:**
    - username, token JWT e flag admin
    - 401 {message: "Usuário ou senha incorretos!"} se falhar
    """
    service = UsersService(db)
    return await service.login(credentials)

@router.get("/logout", response_model=MessageResponse)
async def logout():
    """Logout sem estado: o token não é invalidado"""
    return {"message": "Deslogado com sucesso!"}
