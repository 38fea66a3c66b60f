# cargoshop/modules/reviews/router.py
from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from cargoshop.config.database import get_db
from cargoshop.core.auth.dependencies import verify_user
from cargoshop.core.realtime import ConnectionManager, get_broadcaster
from cargoshop.shared.schemas.common import DeletedResponse
from .service import ReviewsService
from .schemas import ReviewCreate, ReviewUpdate, ReviewResponse

router = APIRouter()

@router.get("", response_model=List[ReviewResponse])
async def list_reviews(
    current_user: dict = Depends(verify_user),
    db: Session = Depends(get_db),
    broadcaster: ConnectionManager = Depends(get_broadcaster)
):
    service = ReviewsService(db, broadcaster)
    return await service.list_reviews()

@router.post("", response_model=ReviewResponse)
async def create_review(
    review_data: ReviewCreate,
    current_user: dict = Depends(verify_user),
    db: Session = Depends(get_db),
    broadcaster: ConnectionManager = Depends(get_broadcaster)
):
    service = ReviewsService(db, broadcaster)
    return await service.create_review(review_data)

@router.get("/{review_id}", response_model=ReviewResponse)
async def get_review(
    review_id: str,
    current_user: dict = Depends(verify_user),
    db: Session = Depends(get_db),
    broadcaster: ConnectionManager = Depends(get_broadcaster)
):
    service = ReviewsService(db, broadcaster)
    return await service.get_review(review_id)

@router.put("/{review_id}", response_model=ReviewResponse)
async def update_review(
    review_id: str,
    review_data: ReviewUpdate,
    current_user: dict = Depends(verify_user),
    db: Session = Depends(get_db),
    broadcaster: ConnectionManager = Depends(get_broadcaster)
):
    service = ReviewsService(db, broadcaster)
    return await service.update_review(review_id, review_data)

@router.delete("/{review_id}", response_model=DeletedResponse)
async def delete_review(
    review_id: str,
    current_user: dict = Depends(verify_user),
    db: Session = Depends(get_db),
    broadcaster: ConnectionManager = Depends(get_broadcaster)
):
    service = ReviewsService(db, broadcaster)
    return await service.delete_review(review_id)
