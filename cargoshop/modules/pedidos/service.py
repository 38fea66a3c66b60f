# cargoshop/modules/pedidos/service.py
import logging
from typing import Any, Dict, List
from sqlalchemy.orm import Session

from cargoshop.core.exceptions import NotFoundError, StoreFailure
from cargoshop.core.realtime import ConnectionManager, PEDIDO_UPDATED
from cargoshop.shared.database.document_store import StoreError
from .repository import PedidosRepository
from .schemas import PedidoCreate, PedidoUpdate

logger = logging.getLogger(__name__)

# idProduto fica fora: o PUT não o regrava
TRACKED_FIELDS = (
    "endereco", "opcaoEnvio", "formaPagamento", "name", "price",
    "image", "NomeVendedor", "comprador", "status"
)


class PedidosService:
    def __init__(self, db: Session, broadcaster: ConnectionManager):
        self.db = db
        self.repository = PedidosRepository(db)
        self.broadcaster = broadcaster

    async def list_pedidos(self) -> List[Dict[str, Any]]:
        try:
            return self.repository.list_all()
        except StoreError as e:
            logger.error(f"❌ {e}")
            raise StoreFailure("Failed to retrieve orders")

    async def create_pedido(self, pedido_data: PedidoCreate) -> Dict[str, Any]:
        try:
            pedido = self.repository.create(pedido_data.model_dump())
        except StoreError as e:
            logger.error(f"❌ {e}")
            raise StoreFailure("Failed to create order")

        await self.broadcaster.broadcast(PEDIDO_UPDATED)
        return pedido

    async def get_pedido(self, pedido_id: str) -> Dict[str, Any]:
        try:
            pedido = self.repository.get_by_id(pedido_id)
        except StoreError as e:
            logger.error(f"❌ {e}")
            raise StoreFailure("Failed to retrieve order")

        if pedido is None:
            raise NotFoundError("Order not found")
        return pedido

    async def update_pedido(self, pedido_id: str, pedido_data: PedidoUpdate) -> Dict[str, Any]:
        attributes = pedido_data.model_dump(include=set(TRACKED_FIELDS))
        try:
            pedido = self.repository.update(pedido_id, attributes)
        except StoreError as e:
            logger.error(f"❌ {e}")
            raise StoreFailure("Failed to update order")

        await self.broadcaster.broadcast(PEDIDO_UPDATED)
        return pedido

    async def delete_pedido(self, pedido_id: str) -> Dict[str, str]:
        try:
            self.repository.delete(pedido_id)
        except StoreError as e:
            logger.error(f"❌ {e}")
            raise StoreFailure("Failed to delete order")

        await self.broadcaster.broadcast(PEDIDO_UPDATED)
        return {"id": pedido_id}
