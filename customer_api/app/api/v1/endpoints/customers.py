"""
Customer endpoints for API v1.

These routes expose CRUD operations for customers.  Each route only
translates HTTP input into a command or query, sends it through the
mediator and turns the result into a response.  A missing customer is
reported as 404 for reads and updates; deleting an unknown id is a
no‑op and still answers 204.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from customer_api.app.api.deps import get_mediator
from customer_api.app.commands.customer import (
    AddCustomerCommand,
    DeleteCustomerCommand,
    UpdateCustomerCommand,
)
from customer_api.app.core.mediator import Mediator
from customer_api.app.queries.customer import GetAllCustomersQuery, GetCustomerQuery
from customer_api.app.schemas.customer import Customer

router = APIRouter()


@router.get("", response_model=List[Customer])
async def list_customers(mediator: Mediator = Depends(get_mediator)) -> List[Customer]:
    """Return every customer in insertion order."""
    return await mediator.send(GetAllCustomersQuery())


@router.get("/{customer_id}", response_model=Customer)
async def get_customer(customer_id: int, mediator: Mediator = Depends(get_mediator)) -> Customer:
    """Retrieve a single customer by ID.

    Returns HTTP 404 if no customer has this ID.
    """
    customer = await mediator.send(GetCustomerQuery(customer_id))
    if customer is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Customer not found")
    return customer


@router.post("", response_model=Customer, status_code=status.HTTP_201_CREATED)
async def add_customer(customer_in: Customer, mediator: Mediator = Depends(get_mediator)) -> Customer:
    """Create a customer.

    Any ``id`` in the body is ignored; the store assigns the next free one.
    """
    command = AddCustomerCommand(
        first_name=customer_in.first_name,
        last_name=customer_in.last_name,
        revenue=customer_in.revenue,
    )
    return await mediator.send(command)


@router.put("", response_model=Customer)
async def update_customer(customer_in: Customer, mediator: Mediator = Depends(get_mediator)) -> Customer:
    """Overwrite the customer identified by the body's ``id``."""
    command = UpdateCustomerCommand(
        id=customer_in.id,
        first_name=customer_in.first_name,
        last_name=customer_in.last_name,
        revenue=customer_in.revenue,
    )
    customer = await mediator.send(command)
    if customer is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Customer not found")
    return customer


@router.delete("/{customer_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_customer(customer_id: int, mediator: Mediator = Depends(get_mediator)) -> None:
    await mediator.send(DeleteCustomerCommand(customer_id))
    return None
