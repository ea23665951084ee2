from fastapi import APIRouter, Depends, HTTPException, status
from typing import List
import logging

from bookstore.api.deps import get_review_service
from bookstore.schemas.review import ReviewSchema
from bookstore.services import ReviewService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/reviews", tags=["reviews"])


@router.get("/", response_model=List[ReviewSchema])
def read_reviews(service: ReviewService = Depends(get_review_service)) -> List[ReviewSchema]:
    return service.get_all()


@router.get("/{review_id}", response_model=ReviewSchema)
def read_review(review_id: int, service: ReviewService = Depends(get_review_service)) -> ReviewSchema:
    review = service.get_by_id(review_id)
    if review is None:
        logger.warning(f"Review {review_id} not found")
        raise HTTPException(status_code=404, detail="Review not found")
    return review


@router.post("/", response_model=ReviewSchema, status_code=status.HTTP_201_CREATED)
def create_review(review: ReviewSchema, service: ReviewService = Depends(get_review_service)) -> ReviewSchema:
    return service.create(review)


@router.put("/{review_id}")
def update_review(review_id: int, review: ReviewSchema, service: ReviewService = Depends(get_review_service)) -> dict:
    review.id = review_id
    service.update(review)
    return {"message": "Review updated"}


@router.delete("/{review_id}")
def delete_review(review_id: int, service: ReviewService = Depends(get_review_service)) -> dict:
    service.delete(review_id)
    return {"message": "Review deleted"}
