# cargoshop/modules/products/service.py
import logging
from typing import Any, Dict, List
from sqlalchemy.orm import Session

from cargoshop.core.exceptions import NotFoundError, StoreFailure
from cargoshop.core.realtime import ConnectionManager, PRODUCT_UPDATED
from cargoshop.shared.database.document_store import StoreError
from .repository import ProductsRepository
from .schemas import ProductCreate, ProductUpdate

logger = logging.getLogger(__name__)

# Campos regravados pelo PUT
TRACKED_FIELDS = ("name", "price", "description", "category", "seller", "image")


class ProductsService:
    def __init__(self, db: Session, broadcaster: ConnectionManager):
        self.db = db
        self.repository = ProductsRepository(db)
        self.broadcaster = broadcaster

    async def list_products(self) -> List[Dict[str, Any]]:
        try:
            return self.repository.list_all()
        except StoreError as e:
            logger.error(f"❌ {e}")
            raise StoreFailure("Failed to retrieve products")

    async def create_product(self, product_data: ProductCreate) -> Dict[str, Any]:
        try:
            product = self.repository.create(product_data.model_dump())
        except StoreError as e:
            logger.error(f"❌ {e}")
            raise StoreFailure("Failed to create product")

        await self.broadcaster.broadcast(PRODUCT_UPDATED)
        return product

    async def get_product(self, product_id: str) -> Dict[str, Any]:
        try:
            product = self.repository.get_by_id(product_id)
        except StoreError as e:
            logger.error(f"❌ {e}")
            raise StoreFailure("Failed to get product")

        if product is None:
            raise NotFoundError("Product not found")
        return product

    async def update_product(self, product_id: str, product_data: ProductUpdate) -> Dict[str, Any]:
        attributes = product_data.model_dump(include=set(TRACKED_FIELDS))
        try:
            product = self.repository.update(product_id, attributes)
        except StoreError as e:
            logger.error(f"❌ {e}")
            raise StoreFailure("Failed to update product")

        await self.broadcaster.broadcast(PRODUCT_UPDATED)
        return product

    async def delete_product(self, product_id: str) -> Dict[str, str]:
        try:
            self.repository.delete(product_id)
        except StoreError as e:
            logger.error(f"❌ {e}")
            raise StoreFailure("Failed to delete product")

        await self.broadcaster.broadcast(PRODUCT_UPDATED)
        return {"id": product_id}
