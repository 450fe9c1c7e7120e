"""
Pydantic schema for the Customer entity.

JSON payloads use camelCase names (``firstName``, ``lastName``) while
Python code uses snake_case attributes.  Either spelling is accepted on
input.  An ``id`` of ``0`` means the customer has not been assigned an
identifier yet.  Revenue must be a finite number: NaN and infinities cannot
be represented in the JSON responses.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Customer(BaseModel):
    """A customer record as stored and as exchanged over HTTP."""

    model_config = ConfigDict(populate_by_name=True)

    id: int = Field(0, description="Customer identifier; 0 means not yet assigned")
    first_name: Optional[str] = Field(None, alias="firstName", description="Given name")
    last_name: Optional[str] = Field(None, alias="lastName", description="Family name")
    revenue: float = Field(0, allow_inf_nan=False, description="Revenue attributed to the customer")
