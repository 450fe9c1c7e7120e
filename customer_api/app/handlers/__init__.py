"""
Request handlers.

Each handler serves exactly one command or query type and delegates to
the customer store.  ``register_customer_handlers`` is the only place
that knows which handler serves which type.
"""

from .customer_handlers import CUSTOMER_REQUEST_TYPES, register_customer_handlers

__all__ = ["CUSTOMER_REQUEST_TYPES", "register_customer_handlers"]
