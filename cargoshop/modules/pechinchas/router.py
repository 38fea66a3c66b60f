# cargoshop/modules/pechinchas/router.py
from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from cargoshop.config.database import get_db
from cargoshop.core.auth.dependencies import verify_user
from cargoshop.core.realtime import ConnectionManager, get_broadcaster
from cargoshop.shared.schemas.common import DeletedResponse
from .service import PechinchasService
from .schemas import PechinchaCreate, PechinchaUpdate, PechinchaResponse

router = APIRouter()

@router.get("", response_model=List[PechinchaResponse])
async def list_pechinchas(
    current_user: dict = Depends(verify_user),
    db: Session = Depends(get_db),
    broadcaster: ConnectionManager = Depends(get_broadcaster)
):
    service = PechinchasService(db, broadcaster)
    return await service.list_pechinchas()

@router.post("", response_model=PechinchaResponse)
async def create_pechincha(
    pechincha_data: PechinchaCreate,
    current_user: dict = Depends(verify_user),
    db: Session = Depends(get_db),
    broadcaster: ConnectionManager = Depends(get_broadcaster)
):
    """
    Propor um valor para um produto

    **Snapshot do produto:**
    - image, price e seller são copiados do produto, não do corpo
    - produto inexistente responde 404 "Product not found"
    """
    service = PechinchasService(db, broadcaster)
    return await service.create_pechincha(pechincha_data)

@router.get("/{pechincha_id}", response_model=PechinchaResponse)
async def get_pechincha(
    pechincha_id: str,
    current_user: dict = Depends(verify_user),
    db: Session = Depends(get_db),
    broadcaster: ConnectionManager = Depends(get_broadcaster)
):
    service = PechinchasService(db, broadcaster)
    return await service.get_pechincha(pechincha_id)

@router.put("/{pechincha_id}", response_model=PechinchaResponse)
async def update_pechincha(
    pechincha_id: str,
    pechincha_data: PechinchaUpdate,
    current_user: dict = Depends(verify_user),
    db: Session = Depends(get_db),
    broadcaster: ConnectionManager = Depends(get_broadcaster)
):
    """
    Sobrescrever a pechincha (editar valor, aceitar, finalizar)

    Sem ENFORCE_PECHINCHA_TRANSITIONS qualquer usuário autenticado pode
    gravar qualquer pstatus.
    """
    service = PechinchasService(db, broadcaster)
    return await service.update_pechincha(pechincha_id, pechincha_data, current_user["username"])

@router.delete("/{pechincha_id}", response_model=DeletedResponse)
async def delete_pechincha(
    pechincha_id: str,
    current_user: dict = Depends(verify_user),
    db: Session = Depends(get_db),
    broadcaster: ConnectionManager = Depends(get_broadcaster)
):
    """Cancelar (comprador) ou recusar (vendedor) remove o registro"""
    service = PechinchasService(db, broadcaster)
    return await service.delete_pechincha(pechincha_id)
