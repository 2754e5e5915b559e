"""
Supplier Domain Model

Represents a supplier that products are bought from and orders are placed with.
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Supplier(BaseModel):
    """
    Supplier domain model

    Fields:
        id: Internal supplier ID (assigned by the database)
        name: Supplier name (required)
        contact_name: Person to talk to
        contact_email: Contact e-mail address
        contact_phone: Contact phone number
        address: Postal address
    """

    id: Optional[int] = Field(None, description="Internal supplier ID")
    name: Optional[str] = Field(None, description="Supplier name")
    contact_name: Optional[str] = Field(None, description="Contact person")
    contact_email: Optional[str] = Field(None, description="Contact e-mail")
    contact_phone: Optional[str] = Field(None, description="Contact phone")
    address: Optional[str] = Field(None, description="Postal address")

    model_config = ConfigDict(from_attributes=True, extra="ignore", coerce_numbers_to_str=True)

    def to_dict(self) -> dict:
        """Convert to a JSON-ready dictionary"""
        return self.model_dump()
