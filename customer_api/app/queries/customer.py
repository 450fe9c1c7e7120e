"""Customer queries dispatched through the mediator."""

from dataclasses import dataclass


@dataclass(frozen=True)
class GetAllCustomersQuery:
    pass


@dataclass(frozen=True)
class GetCustomerQuery:
    id: int
