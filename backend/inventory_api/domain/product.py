"""
Product Domain Model

Products carry no fixed schema beyond their id: every field the caller
sends is stored as a column of the products table and read back as-is.
"""
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Product(BaseModel):
    """Product domain model - id plus an open set of columns"""

    id: Optional[int] = Field(None, description="Internal product ID")

    model_config = ConfigDict(extra="allow")

    @property
    def columns(self) -> dict:
        """Caller-defined columns, without the id"""
        return dict(self.model_extra or {})

    def to_dict(self) -> dict:
        """Convert to dictionary, Decimal columns as float"""
        data = {'id': self.id}
        for key, value in self.columns.items():
            data[key] = float(value) if isinstance(value, Decimal) else value
        return data
