"""
Request dispatch from the API layer to handlers.

The :class:`Mediator` is a plain mapping from a request type (a command
or query class) to the single handler responsible for it.  Routes build a
request object and ``await mediator.send(request)``; they never import
handlers directly.

Wiring mistakes are configuration errors rather than data errors:
registering two handlers for one type raises immediately, and
``ensure_registered`` lets the composition root fail at startup when a
type has no handler at all.
"""

from __future__ import annotations

import inspect
import logging
from typing import Any, Awaitable, Callable, Dict, Iterable, Tuple, Type

logger = logging.getLogger(__name__)

HandlerFunc = Callable[[Any], Awaitable[Any]]


class MediatorError(Exception):
    """Base class for mediator configuration errors."""


class HandlerNotFoundError(MediatorError):
    """No handler is registered for a request type."""

    def __init__(self, request_type: type) -> None:
        super().__init__(f"No handler registered for {request_type.__name__}")
        self.request_type = request_type


class DuplicateHandlerError(MediatorError):
    """A second handler was registered for a request type."""

    def __init__(self, request_type: type) -> None:
        super().__init__(f"A handler is already registered for {request_type.__name__}")
        self.request_type = request_type


class Mediator:
    """Route request objects to their uniquely registered handler."""

    def __init__(self) -> None:
        self._handlers: Dict[type, HandlerFunc] = {}

    def register(self, request_type: Type[Any], handler: Any) -> None:
        """Register ``handler`` for ``request_type``.

        ``handler`` is either an object with an async ``handle`` method or
        an async callable taking the request.
        """
        if request_type in self._handlers:
            raise DuplicateHandlerError(request_type)
        func = getattr(handler, "handle", handler)
        if not inspect.iscoroutinefunction(func):
            raise TypeError(f"Handler for {request_type.__name__} must be an async callable")
        self._handlers[request_type] = func
        logger.debug("Registered handler for %s", request_type.__name__)

    def ensure_registered(self, request_types: Iterable[type]) -> None:
        """Raise :class:`HandlerNotFoundError` for the first unhandled type."""
        for request_type in request_types:
            if request_type not in self._handlers:
                raise HandlerNotFoundError(request_type)

    def registered_types(self) -> Tuple[type, ...]:
        return tuple(self._handlers)

    async def send(self, request: Any) -> Any:
        """Dispatch ``request`` to its handler and return the handler's result.

        Lookup is by exact type; subclasses of a registered type are not
        matched.
        """
        request_type = type(request)
        func = self._handlers.get(request_type)
        if func is None:
            raise HandlerNotFoundError(request_type)
        logger.debug("Dispatching %s", request_type.__name__)
        return await func(request)
