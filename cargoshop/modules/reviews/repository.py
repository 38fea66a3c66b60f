# cargoshop/modules/reviews/repository.py
from cargoshop.shared.database.collection_repository import CollectionRepository
from cargoshop.shared.database.models import REVIEWS

class ReviewsRepository(CollectionRepository):
    collection = REVIEWS
