"""
Application package initializer.

The application is split into small layers: ``schemas`` (the Customer
payload), ``services`` (the in‑memory customer store), ``commands`` and
``queries`` (typed request objects), ``handlers`` (one per request type),
``core`` (configuration, logging and the mediator) and ``api`` (the
versioned HTTP routers).  ``main`` wires them together.
"""

from .main import app  # noqa: F401
