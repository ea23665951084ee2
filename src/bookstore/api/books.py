from fastapi import APIRouter, Depends, HTTPException, status
from typing import List
import logging

from bookstore.api.deps import get_book_service
from bookstore.schemas.book import BookSchema
from bookstore.schemas.order import OrderSchema
from bookstore.schemas.review import ReviewSchema
from bookstore.services import BookService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/books", tags=["books"])


@router.get("/", response_model=List[BookSchema])
def read_books(service: BookService = Depends(get_book_service)) -> List[BookSchema]:
    return service.get_all()


@router.get("/{book_id}", response_model=BookSchema)
def read_book(book_id: int, service: BookService = Depends(get_book_service)) -> BookSchema:
    book = service.get_by_id(book_id)
    if book is None:
        logger.warning(f"Book {book_id} not found")
        raise HTTPException(status_code=404, detail="Book not found")
    return book


@router.post("/", response_model=BookSchema, status_code=status.HTTP_201_CREATED)
def create_book(book: BookSchema, service: BookService = Depends(get_book_service)) -> BookSchema:
    return service.create(book)


@router.put("/{book_id}")
def update_book(book_id: int, book: BookSchema, service: BookService = Depends(get_book_service)) -> dict:
    book.id = book_id
    service.update(book)
    return {"message": "Book updated"}


@router.delete("/{book_id}")
def delete_book(book_id: int, service: BookService = Depends(get_book_service)) -> dict:
    service.delete(book_id)
    return {"message": "Book deleted"}


@router.get("/{book_id}/reviews", response_model=List[ReviewSchema])
def read_book_reviews(book_id: int, service: BookService = Depends(get_book_service)) -> List[ReviewSchema]:
    return service.get_reviews(book_id)


@router.get("/{book_id}/orders", response_model=List[OrderSchema])
def read_book_orders(book_id: int, service: BookService = Depends(get_book_service)) -> List[OrderSchema]:
    return service.get_orders(book_id)
