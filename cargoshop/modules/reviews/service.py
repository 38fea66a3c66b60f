# cargoshop/modules/reviews/service.py
import logging
from typing import Any, Dict, List
from sqlalchemy.orm import Session

from cargoshop.core.exceptions import NotFoundError, StoreFailure
from cargoshop.core.realtime import ConnectionManager, REVIEW_UPDATED
from cargoshop.shared.database.document_store import StoreError
from .repository import ReviewsRepository
from .schemas import ReviewCreate, ReviewUpdate

logger = logging.getLogger(__name__)

TRACKED_FIELDS = ("orderId", "buyer", "seller", "rate", "message")


class ReviewsService:
    def __init__(self, db: Session, broadcaster: ConnectionManager):
        self.db = db
        self.repository = ReviewsRepository(db)
        self.broadcaster = broadcaster

    async def list_reviews(self) -> List[Dict[str, Any]]:
        try:
            return self.repository.list_all()
        except StoreError as e:
            logger.error(f"❌ {e}")
            raise StoreFailure("Failed to retrieve reviews")

    async def create_review(self, review_data: ReviewCreate) -> Dict[str, Any]:
        try:
            review = self.repository.create(review_data.model_dump())
        except StoreError as e:
            logger.error(f"❌ {e}")
            raise StoreFailure("Failed to create review")

        await self.broadcaster.broadcast(REVIEW_UPDATED)
        return review

    async def get_review(self, review_id: str) -> Dict[str, Any]:
        try:
            review = self.repository.get_by_id(review_id)
        except StoreError as e:
            logger.error(f"❌ {e}")
            raise StoreFailure("Failed to get review")

        if review is None:
            raise NotFoundError("Review not found")
        return review

    async def update_review(self, review_id: str, review_data: ReviewUpdate) -> Dict[str, Any]:
        attributes = review_data.model_dump(include=set(TRACKED_FIELDS))
        try:
            review = self.repository.update(review_id, attributes)
        except StoreError as e:
            logger.error(f"❌ {e}")
            raise StoreFailure("Failed to update review")

        await self.broadcaster.broadcast(REVIEW_UPDATED)
        return review

    async def delete_review(self, review_id: str) -> Dict[str, str]:
        try:
            self.repository.delete(review_id)
        except StoreError as e:
            logger.error(f"❌ {e}")
            raise StoreFailure("Failed to delete review")

        await self.broadcaster.broadcast(REVIEW_UPDATED)
        return {"id": review_id}
