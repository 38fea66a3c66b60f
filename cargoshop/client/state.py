# cargoshop/client/state.py
import logging
from typing import Any, Dict, List, Optional

from .api import MarketplaceClient, RESOURCES

logger = logging.getLogger(__name__)

# Evento do canal de tempo real -> recurso a recarregar
EVENT_RESOURCES = {
    "productUpdated": "products",
    "pechinchaUpdated": "pechinchas",
    "pedidoUpdated": "pedidos",
    "reviewUpdated": "reviews",
}


class ResourceSlice:
    """Cache local de um recurso, indexado por id"""

    def __init__(self, name: str):
        self.name = name
        self.items: Dict[str, Dict[str, Any]] = {}
        self.status = "not_loaded"
        self.error: Optional[str] = None

    def set_all(self, items: List[Dict[str, Any]]):
        self.items = {item["id"]: item for item in items}
        self.status = "loaded"
        self.error = None

    def upsert(self, item: Dict[str, Any]):
        self.items[item["id"]] = item

    def remove(self, item_id: str):
        self.items.pop(item_id, None)

    def get(self, item_id: str) -> Optional[Dict[str, Any]]:
        return self.items.get(item_id)

    def all(self) -> List[Dict[str, Any]]:
        return list(self.items.values())

    def where(self, **filters) -> List[Dict[str, Any]]:
        return [
            item for item in self.items.values()
            if all(item.get(field) == value for field, value in filters.items())
        ]


class MarketplaceState:
    """Estado global do cliente: um slice por recurso"""

    def __init__(self, client: MarketplaceClient):
        self.client = client
        self.slices = {name: ResourceSlice(name) for name in RESOURCES}

    def __getitem__(self, resource: str) -> ResourceSlice:
        return self.slices[resource]

    async def refresh(self, resource: str) -> List[Dict[str, Any]]:
        """Busca a lista completa do recurso e substitui o cache"""
        items = await self.client.list(resource)
        self.slices[resource].set_all(items)
        return items

    async def handle_event(self, event: str) -> Optional[str]:
        """Recarrega o recurso avisado; eventos desconhecidos são ignorados"""
        resource = EVENT_RESOURCES.get(event)
        if resource is None:
            logger.debug(f"Evento ignorado: {event}")
            return None
        await self.refresh(resource)
        return resource

    async def add(self, resource: str, data: Dict[str, Any]) -> Dict[str, Any]:
        item = await self.client.create(resource, data)
        self.slices[resource].upsert(item)
        return item

    async def update(self, resource: str, item: Dict[str, Any]) -> Dict[str, Any]:
        updated = await self.client.update(resource, item["id"], item)
        self.slices[resource].upsert(updated)
        return updated

    async def remove(self, resource: str, item_id: str) -> str:
        result = await self.client.delete(resource, item_id)
        self.slices[resource].remove(result["id"])
        return result["id"]
