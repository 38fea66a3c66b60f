# cargoshop/modules/pedidos/repository.py
from cargoshop.shared.database.collection_repository import CollectionRepository
from cargoshop.shared.database.models import ORDERS

class PedidosRepository(CollectionRepository):
    collection = ORDERS
