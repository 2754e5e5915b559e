"""
Suppliers API Endpoints
CRUD operations over /api/suppliers

Errors raised by the repository (validation or storage) are turned into
500 responses by the handler registered in inventory_api.core.exceptions.
"""
from typing import Any, Dict

from fastapi import APIRouter, Body, Depends, Response, status

from inventory_api.core.database import Database, get_database
from inventory_api.repositories.supplier_repository import SupplierRepository

router = APIRouter()


# Dependency: Get supplier repository
def get_supplier_repository(db: Database = Depends(get_database)) -> SupplierRepository:
    return SupplierRepository(db)


@router.get("")
def get_suppliers(repo: SupplierRepository = Depends(get_supplier_repository)):
    """List every supplier"""
    return [supplier.to_dict() for supplier in repo.find_all()]


@router.get("/{supplier_id}")
def get_supplier(supplier_id: int, repo: SupplierRepository = Depends(get_supplier_repository)):
    """
    Get a single supplier

    Returns null (with 200) when no supplier has this id
    """
    supplier = repo.find_by_id(supplier_id)
    return supplier.to_dict() if supplier else None


@router.post("", status_code=status.HTTP_201_CREATED)
def create_supplier(
    data: Dict[str, Any] = Body(...),
    repo: SupplierRepository = Depends(get_supplier_repository)
):
    """Create a supplier and return it with its new id"""
    return repo.create(data).to_dict()


@router.put("/{supplier_id}")
def update_supplier(
    supplier_id: int,
    data: Dict[str, Any] = Body(...),
    repo: SupplierRepository = Depends(get_supplier_repository)
):
    """
    Replace a supplier

    Full replacement: optional fields missing from the body are cleared
    """
    return repo.update(supplier_id, data).to_dict()


@router.delete("/{supplier_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def delete_supplier(supplier_id: int, repo: SupplierRepository = Depends(get_supplier_repository)):
    """Delete a supplier"""
    repo.delete(supplier_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
