# cargoshop/modules/products/router.py
from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from cargoshop.config.database import get_db
from cargoshop.core.auth.dependencies import verify_user
from cargoshop.core.realtime import ConnectionManager, get_broadcaster
from cargoshop.shared.schemas.common import DeletedResponse
from .service import ProductsService
from .schemas import ProductCreate, ProductUpdate, ProductResponse

router = APIRouter()

@router.get("", response_model=List[ProductResponse])
async def list_products(
    db: Session = Depends(get_db),
    broadcaster: ConnectionManager = Depends(get_broadcaster)
):
    """
    Listar todos os produtos

    Rota pública: não exige token (ao contrário de GET /products/{id}).
    """
    service = ProductsService(db, broadcaster)
    return await service.list_products()

@router.post("", response_model=ProductResponse)
async def create_product(
    product_data: ProductCreate,
    current_user: dict = Depends(verify_user),
    db: Session = Depends(get_db),
    broadcaster: ConnectionManager = Depends(get_broadcaster)
):
    """Cadastrar produto. O vendedor é o informado no corpo; não há checagem de dono."""
    service = ProductsService(db, broadcaster)
    return await service.create_product(product_data)

@router.get("/{product_id}", response_model=ProductResponse)
async def get_product(
    product_id: str,
    current_user: dict = Depends(verify_user),
    db: Session = Depends(get_db),
    broadcaster: ConnectionManager = Depends(get_broadcaster)
):
    service = ProductsService(db, broadcaster)
    return await service.get_product(product_id)

@router.put("/{product_id}", response_model=ProductResponse)
async def update_product(
    product_id: str,
    product_data: ProductUpdate,
    current_user: dict = Depends(verify_user),
    db: Session = Depends(get_db),
    broadcaster: ConnectionManager = Depends(get_broadcaster)
):
    """Sobrescrever todos os campos do produto (cria se o id não existir)"""
    service = ProductsService(db, broadcaster)
    return await service.update_product(product_id, product_data)

@router.delete("/{product_id}", response_model=DeletedResponse)
async def delete_product(
    product_id: str,
    current_user: dict = Depends(verify_user),
    db: Session = Depends(get_db),
    broadcaster: ConnectionManager = Depends(get_broadcaster)
):
    service = ProductsService(db, broadcaster)
    return await service.delete_product(product_id)
