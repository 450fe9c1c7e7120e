"""Customer commands dispatched through the mediator."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class AddCustomerCommand:
    """Create a new customer; the store assigns its id."""

    first_name: Optional[str]
    last_name: Optional[str]
    revenue: float = 0


@dataclass(frozen=True)
class UpdateCustomerCommand:
    """Overwrite the name and revenue of the customer with ``id``."""

    id: int
    first_name: Optional[str]
    last_name: Optional[str]
    revenue: float = 0


@dataclass(frozen=True)
class DeleteCustomerCommand:
    id: int
