# cargoshop/modules/pedidos/router.py
from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from cargoshop.config.database import get_db
from cargoshop.core.auth.dependencies import verify_user
from cargoshop.core.realtime import ConnectionManager, get_broadcaster
from cargoshop.shared.schemas.common import DeletedResponse
from .service import PedidosService
from .schemas import PedidoCreate, PedidoUpdate, PedidoResponse

router = APIRouter()

@router.get("", response_model=List[PedidoResponse])
async def list_pedidos(
    current_user: dict = Depends(verify_user),
    db: Session = Depends(get_db),
    broadcaster: ConnectionManager = Depends(get_broadcaster)
):
    service = PedidosService(db, broadcaster)
    return await service.list_pedidos()

@router.post("", response_model=PedidoResponse)
async def create_pedido(
    pedido_data: PedidoCreate,
    current_user: dict = Depends(verify_user),
    db: Session = Depends(get_db),
    broadcaster: ConnectionManager = Depends(get_broadcaster)
):
    """
    Registrar um pedido

    O servidor não conhece a pechincha de origem: o cliente envia nome,
    preço, vendedor e comprador já resolvidos.
    """
    service = PedidosService(db, broadcaster)
    return await service.create_pedido(pedido_data)

@router.get("/{pedido_id}", response_model=PedidoResponse)
async def get_pedido(
    pedido_id: str,
    current_user: dict = Depends(verify_user),
    db: Session = Depends(get_db),
    broadcaster: ConnectionManager = Depends(get_broadcaster)
):
    service = PedidosService(db, broadcaster)
    return await service.get_pedido(pedido_id)

@router.put("/{pedido_id}", response_model=PedidoResponse)
async def update_pedido(
    pedido_id: str,
    pedido_data: PedidoUpdate,
    current_user: dict = Depends(verify_user),
    db: Session = Depends(get_db),
    broadcaster: ConnectionManager = Depends(get_broadcaster)
):
    service = PedidosService(db, broadcaster)
    return await service.update_pedido(pedido_id, pedido_data)

@router.delete("/{pedido_id}", response_model=DeletedResponse)
async def delete_pedido(
    pedido_id: str,
    current_user: dict = Depends(verify_user),
    db: Session = Depends(get_db),
    broadcaster: ConnectionManager = Depends(get_broadcaster)
):
    service = PedidosService(db, broadcaster)
    return await service.delete_pedido(pedido_id)
