# cargoshop/shared/database/collection_repository.py
import uuid
from typing import Any, Dict, List, Optional

from sqlalchemy.orm import Session

from .document_store import DocumentStore


class CollectionRepository:
    """Operações CRUD sobre uma coleção identificada por id gerado"""
    collection: str = ""

    def __init__(self, db: Session):
        self.db = db
        self.store = DocumentStore(db)

    @staticmethod
    def new_id() -> str:
        return str(uuid.uuid4())

    def list_all(self) -> List[Dict[str, Any]]:
        return self.store.scan(self.collection)

    def get_by_id(self, item_id: str) -> Optional[Dict[str, Any]]:
        return self.store.get(self.collection, item_id)

    def create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        item = {"id": self.new_id(), **data}
        return self.store.put(self.collection, item["id"], item)

    def update(self, item_id: str, attributes: Dict[str, Any]) -> Dict[str, Any]:
        return self.store.update(self.collection, item_id, attributes)

    def delete(self, item_id: str) -> str:
        self.store.delete(self.collection, item_id)
        return item_id
