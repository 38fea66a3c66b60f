# cargoshop/modules/products/repository.py
from cargoshop.shared.database.collection_repository import CollectionRepository
from cargoshop.shared.database.models import PRODUCTS

class ProductsRepository(CollectionRepository):
    collection = PRODUCTS
