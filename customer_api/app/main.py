"""
Main entrypoint for the Customer API.

This module is the composition root: ``create_app`` configures logging,
builds the customer store, registers one handler per request type with
the mediator and mounts the versioned routers.  The application is also
instantiated at import time as ``app`` so it can be served directly::

    uvicorn customer_api.app.main:app --reload
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from .api.v1.router import router as v1_router
from .core.config import Settings, settings
from .core.logging_config import setup_logging
from .core.mediator import Mediator, MediatorError
from .handlers import CUSTOMER_REQUEST_TYPES, register_customer_handlers
from .services.customer_store import CustomerStore

logger = logging.getLogger(__name__)


def create_app(app_settings: Optional[Settings] = None, store: Optional[CustomerStore] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    app_settings : Optional[Settings]
        Settings to use instead of the module level ``settings``.
    store : Optional[CustomerStore]
        Store to serve.  When omitted a new store is built, seeded with
        the sample customers unless ``seed_customers`` is false.

    Raises
    ------
    MediatorError
        If a customer request type ends up without exactly one handler.
    """
    app_settings = app_settings or settings
    setup_logging(app_settings.log_level, app_settings.log_file or None)

    if store is None:
        store = CustomerStore.with_seed_data() if app_settings.seed_customers else CustomerStore()

    mediator = Mediator()
    register_customer_handlers(mediator, store)
    mediator.ensure_registered(CUSTOMER_REQUEST_TYPES)

    app = FastAPI(
        title=app_settings.project_name,
        version=app_settings.api_version,
        debug=app_settings.debug,
    )
    app.state.store = store
    app.state.mediator = mediator

    app.include_router(v1_router, prefix=app_settings.api_prefix)

    @app.exception_handler(MediatorError)
    async def mediator_error_handler(request: Request, exc: MediatorError) -> JSONResponse:
        logger.error("Cannot dispatch %s %s: %s", request.method, request.url.path, exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": str(exc)},
        )

    logger.info("Customer API ready with %d customers", len(store))
    return app


app = create_app()
