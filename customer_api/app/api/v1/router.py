"""
Top‑level router for version 1 of the API.

The customer routes are mounted under the singular ``/customer`` prefix.
``create_app`` includes this router under ``Settings.api_prefix``, which
defaults to ``/api``, so the routes are served at ``/api/customer``
(the path existing clients call).  Set ``API_PREFIX=""`` to serve them
at bare ``/customer``.
"""

from fastapi import APIRouter

from .endpoints import customers

router = APIRouter()

router.include_router(customers.router, prefix="/customer", tags=["customer"])
