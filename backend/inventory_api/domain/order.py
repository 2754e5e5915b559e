"""
Order Domain Model

Represents a purchase order placed with a supplier.
"""
from datetime import date
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Order(BaseModel):
    """
    Order domain model

    supplier_id points at a supplier row but is not checked against it;
    whatever the database accepts is stored.

    Fields:
        id: Internal order ID (assigned by the database)
        supplier_id: Supplier the order was placed with (required)
        order_date: Date the order was placed (required)
        total_amount: Order total (required)
        status: Free-form order status
    """

    id: Optional[int] = Field(None, description="Internal order ID")
    supplier_id: Optional[int] = Field(None, description="Supplier ID")
    order_date: Optional[date] = Field(None, description="Order date")
    total_amount: Optional[Decimal] = Field(None, description="Order total")
    status: Optional[str] = Field(None, description="Order status")

    model_config = ConfigDict(from_attributes=True, extra="ignore", coerce_numbers_to_str=True)

    def to_dict(self) -> dict:
        """
        Convert to dictionary

        Decimal is converted to float for JSON compatibility.
        """
        data = self.model_dump()
        if data.get('total_amount') is not None:
            data['total_amount'] = float(data['total_amount'])
        return data
