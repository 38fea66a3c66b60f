# cargoshop/modules/pechinchas/repository.py
from typing import Any, Dict, Optional

from cargoshop.shared.database.collection_repository import CollectionRepository
from cargoshop.shared.database.models import PECHINCHAS, PRODUCTS

class PechinchasRepository(CollectionRepository):
    collection = PECHINCHAS

    def get_product(self, product_id: str) -> Optional[Dict[str, Any]]:
        """Produto referenciado pela pechincha"""
        return self.store.get(PRODUCTS, product_id)
