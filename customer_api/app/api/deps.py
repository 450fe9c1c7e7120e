"""Shared FastAPI dependencies."""

from fastapi import Request

from customer_api.app.core.mediator import Mediator


def get_mediator(request: Request) -> Mediator:
    """Return the mediator built by ``create_app`` for this application."""
    return request.app.state.mediator
