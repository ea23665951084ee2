from fastapi import APIRouter, Depends, HTTPException, status
from typing import List
import logging

from bookstore.api.deps import get_order_service
from bookstore.schemas.order import OrderSchema
from bookstore.services import OrderService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/orders", tags=["orders"])


@router.get("/", response_model=List[OrderSchema])
def read_orders(service: OrderService = Depends(get_order_service)) -> List[OrderSchema]:
    return service.get_all()


@router.get("/{order_id}", response_model=OrderSchema)
def read_order(order_id: int, service: OrderService = Depends(get_order_service)) -> OrderSchema:
    order = service.get_by_id(order_id)
    if order is None:
        logger.warning(f"Order {order_id} not found")
        raise HTTPException(status_code=404, detail="Order not found")
    return order


@router.post("/", response_model=OrderSchema, status_code=status.HTTP_201_CREATED)
def create_order(order: OrderSchema, service: OrderService = Depends(get_order_service)) -> OrderSchema:
    return service.create(order)


@router.put("/{order_id}")
def update_order(order_id: int, order: OrderSchema, service: OrderService = Depends(get_order_service)) -> dict:
    order.id = order_id
    service.update(order)
    return {"message": "Order updated"}


@router.delete("/{order_id}")
def delete_order(order_id: int, service: OrderService = Depends(get_order_service)) -> dict:
    service.delete(order_id)
    return {"message": "Order deleted"}


@router.post("/{order_id}/books/{book_id}", status_code=status.HTTP_201_CREATED)
def add_book_to_order(order_id: int, book_id: int, service: OrderService = Depends(get_order_service)) -> dict:
    service.add_book(order_id, book_id)
    return {"message": "Book added to order"}


@router.delete("/{order_id}/books/{book_id}")
def remove_book_from_order(order_id: int, book_id: int, service: OrderService = Depends(get_order_service)) -> dict:
    service.remove_book(order_id, book_id)
    return {"message": "Book removed from order"}
