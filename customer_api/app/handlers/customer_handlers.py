"""
Handlers for customer commands and queries.

Handlers keep a reference to the store and nothing else.  They perform
no validation: the request object is unwrapped, the matching store
operation is called and its result is returned unchanged.
"""

from __future__ import annotations

from typing import List, Optional

from customer_api.app.commands.customer import (
    AddCustomerCommand,
    DeleteCustomerCommand,
    UpdateCustomerCommand,
)
from customer_api.app.core.mediator import Mediator
from customer_api.app.queries.customer import GetAllCustomersQuery, GetCustomerQuery
from customer_api.app.schemas.customer import Customer
from customer_api.app.services.customer_store import CustomerStore


class _StoreHandler:
    def __init__(self, store: CustomerStore) -> None:
        self.store = store


class GetAllCustomersHandler(_StoreHandler):
    async def handle(self, query: GetAllCustomersQuery) -> List[Customer]:
        return self.store.list_all()


class GetCustomerHandler(_StoreHandler):
    async def handle(self, query: GetCustomerQuery) -> Optional[Customer]:
        return self.store.get_by_id(query.id)


class AddCustomerHandler(_StoreHandler):
    async def handle(self, command: AddCustomerCommand) -> Customer:
        """Store a new customer built from the command fields.

        The command carries no id, so the store always assigns one.
        """
        return self.store.add_customer(command.first_name, command.last_name, command.revenue)


class UpdateCustomerHandler(_StoreHandler):
    async def handle(self, command: UpdateCustomerCommand) -> Optional[Customer]:
        customer = Customer(
            id=command.id,
            first_name=command.first_name,
            last_name=command.last_name,
            revenue=command.revenue,
        )
        return self.store.update(customer)


class DeleteCustomerHandler(_StoreHandler):
    async def handle(self, command: DeleteCustomerCommand) -> None:
        self.store.delete(command.id)


_HANDLERS = {
    GetAllCustomersQuery: GetAllCustomersHandler,
    GetCustomerQuery: GetCustomerHandler,
    AddCustomerCommand: AddCustomerHandler,
    UpdateCustomerCommand: UpdateCustomerHandler,
    DeleteCustomerCommand: DeleteCustomerHandler,
}

# Every request type the customer routes dispatch.
CUSTOMER_REQUEST_TYPES = tuple(_HANDLERS)


def register_customer_handlers(mediator: Mediator, store: CustomerStore) -> None:
    """Register one handler per customer request type, all sharing ``store``."""
    for request_type, handler_cls in _HANDLERS.items():
        mediator.register(request_type, handler_cls(store))
