# cargoshop/modules/pechinchas/service.py
import logging
from typing import Any, Dict, List
from sqlalchemy.orm import Session

from cargoshop.config.settings import settings
from cargoshop.core.exceptions import NotFoundError, StoreFailure, TransitionError
from cargoshop.core.realtime import ConnectionManager, PECHINCHA_UPDATED
from cargoshop.shared.database.document_store import StoreError
from .repository import PechinchasRepository
from .schemas import PechinchaCreate, PechinchaUpdate
from .transitions import PechinchaStatus, actor_role, check_transition

logger = logging.getLogger(__name__)


class PechinchasService:
    def __init__(self, db: Session, broadcaster: ConnectionManager):
        self.db = db
        self.repository = PechinchasRepository(db)
        self.broadcaster = broadcaster
        self.enforce_transitions = settings.enforce_pechincha_transitions

    async def list_pechinchas(self) -> List[Dict[str, Any]]:
        try:
            return self.repository.list_all()
        except StoreError as e:
            logger.error(f"❌ {e}")
            raise StoreFailure("Failed to retrieve pechinchas")

    async def create_pechincha(self, pechincha_data: PechinchaCreate) -> Dict[str, Any]:
        """Criar pechincha com snapshot de imagem, preço e vendedor do produto"""
        if self.enforce_transitions and pechincha_data.pstatus != PechinchaStatus.PENDENTE:
            raise TransitionError("Uma pechincha nova deve estar 'pendente'")

        try:
            # leitura do produto e escrita da pechincha na mesma transação
            with self.repository.store.atomic():
                product = self.repository.get_product(pechincha_data.idProduct)
                if product is None:
                    raise NotFoundError("Product not found")

                pechincha = self.repository.create({
                    "productId": product["id"],
                    "discount": pechincha_data.discount,
                    "image": product.get("image"),
                    "price": product.get("price"),
                    "buyer": pechincha_data.buyer,
                    "seller": product.get("seller"),
                    "pstatus": pechincha_data.pstatus.value
                })
        except StoreError as e:
            logger.error(f"❌ {e}")
            raise StoreFailure("Failed to create pechincha")

        await self.broadcaster.broadcast(PECHINCHA_UPDATED)
        return pechincha

    async def get_pechincha(self, pechincha_id: str) -> Dict[str, Any]:
        try:
            pechincha = self.repository.get_by_id(pechincha_id)
        except StoreError as e:
            logger.error(f"❌ {e}")
            raise StoreFailure("Failed to get pechincha")

        if pechincha is None:
            raise NotFoundError("Pechincha not found")
        return pechincha

    def _check_transition(self, pechincha_id: str, requested: PechinchaStatus, username: str):
        current = self.repository.get_by_id(pechincha_id)
        if current is None:
            raise NotFoundError("Pechincha not found")

        error = check_transition(current.get("pstatus"), requested.value, actor_role(username, current))
        if error:
            logger.info(f"⛔ {username} em {pechincha_id}: {error}")
            raise TransitionError(error)

    async def update_pechincha(
        self,
        pechincha_id: str,
        pechincha_data: PechinchaUpdate,
        username: str
    ) -> Dict[str, Any]:
        """Sobrescrever a pechincha; a imagem é relida do produto"""
        try:
            with self.repository.store.atomic():
                if self.enforce_transitions:
                    self._check_transition(pechincha_id, pechincha_data.pstatus, username)

                product = self.repository.get_product(pechincha_data.productId)
                if product is None:
                    raise NotFoundError("Product not found")

                pechincha = self.repository.update(pechincha_id, {
                    "productId": pechincha_data.productId,
                    "discount": pechincha_data.discount,
                    "price": pechincha_data.price,
                    "buyer": pechincha_data.buyer,
                    "seller": pechincha_data.seller,
                    "image": product.get("image"),
                    "pstatus": pechincha_data.pstatus.value
                })
        except StoreError as e:
            logger.error(f"❌ {e}")
            raise StoreFailure("Failed to update pechincha")

        await self.broadcaster.broadcast(PECHINCHA_UPDATED)
        return pechincha

    async def delete_pechincha(self, pechincha_id: str) -> Dict[str, str]:
        try:
            self.repository.delete(pechincha_id)
        except StoreError as e:
            logger.error(f"❌ {e}")
            raise StoreFailure("Failed to delete pechincha")

        await self.broadcaster.broadcast(PECHINCHA_UPDATED)
        return {"id": pechincha_id}
