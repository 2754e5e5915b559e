"""
Products API Endpoints
Products have no fixed schema; bodies are stored column-for-column

Errors raised by the repository (validation or storage) are turned into
500 responses by the handler registered in inventory_api.core.exceptions.
"""
from typing import Any, Dict

from fastapi import APIRouter, Body, Depends, Response, status

from inventory_api.core.database import Database, get_database
from inventory_api.repositories.product_repository import ProductRepository

router = APIRouter()


# Dependency: Get product repository
def get_product_repository(db: Database = Depends(get_database)) -> ProductRepository:
    return ProductRepository(db)


@router.get("")
def get_products(repo: ProductRepository = Depends(get_product_repository)):
    """List every product"""
    return [product.to_dict() for product in repo.find_all()]


@router.get("/{product_id}")
def get_product(product_id: int, repo: ProductRepository = Depends(get_product_repository)):
    """
    Get a single product

    Returns null (with 200) when no product has this id
    """
    product = repo.find_by_id(product_id)
    return product.to_dict() if product else None


@router.post("", status_code=status.HTTP_201_CREATED)
def create_product(
    data: Dict[str, Any] = Body(...),
    repo: ProductRepository = Depends(get_product_repository)
):
    """
    Create a product

    Every key in the body is stored as a column; the response echoes the
    body with the generated id
    """
    return repo.create(data).to_dict()


@router.put("/{product_id}")
def update_product(
    product_id: int,
    data: Dict[str, Any] = Body(...),
    repo: ProductRepository = Depends(get_product_repository)
):
    """Overwrite the submitted columns of a product"""
    return repo.update(product_id, data).to_dict()


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def delete_product(product_id: int, repo: ProductRepository = Depends(get_product_repository)):
    """Delete a product"""
    repo.delete(product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
