"""
Orders API Endpoints
CRUD operations over /api/orders

Errors raised by the repository (validation or storage) are turned into
500 responses by the handler registered in inventory_api.core.exceptions.
"""
from typing import Any, Dict

from fastapi import APIRouter, Body, Depends, Response, status

from inventory_api.core.database import Database, get_database
from inventory_api.repositories.order_repository import OrderRepository

router = APIRouter()


# Dependency: Get order repository
def get_order_repository(db: Database = Depends(get_database)) -> OrderRepository:
    return OrderRepository(db)


@router.get("")
def get_orders(repo: OrderRepository = Depends(get_order_repository)):
    """List every order"""
    return [order.to_dict() for order in repo.find_all()]


@router.get("/{order_id}")
def get_order(order_id: int, repo: OrderRepository = Depends(get_order_repository)):
    """
    Get a single order

    Returns null (with 200) when no order has this id
    """
    order = repo.find_by_id(order_id)
    return order.to_dict() if order else None


@router.post("", status_code=status.HTTP_201_CREATED)
def create_order(
    data: Dict[str, Any] = Body(...),
    repo: OrderRepository = Depends(get_order_repository)
):
    """Create an order and return it with its new id"""
    return repo.create(data).to_dict()


@router.put("/{order_id}")
def update_order(
    order_id: int,
    data: Dict[str, Any] = Body(...),
    repo: OrderRepository = Depends(get_order_repository)
):
    """Replace an order's fields and echo them back"""
    return repo.update(order_id, data).to_dict()


@router.delete("/{order_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def delete_order(order_id: int, repo: OrderRepository = Depends(get_order_repository)):
    """Delete an order (no error if it does not exist)"""
    repo.delete(order_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
