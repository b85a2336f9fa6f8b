"""
Main entrypoint for the SkyBook Pro API.

This module assembles the FastAPI application, sets up logging,
creates the entity store and includes the API router.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``.  Run it with uvicorn,
e.g.::

    uvicorn skybook_api.app.main:app --reload

``create_app`` accepts the collaborators it would otherwise build
itself (store, notifier, payment provider, clock) so tests can pass
their own.
"""

import logging
from datetime import datetime
from typing import Callable, Optional

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api.router import router as api_router
from .core.config import Settings, settings as default_settings
from .core.logging_config import setup_logging
from .core.seed import seed_demo_data
from .core.store import EntityStore
from .services.notification_service import Notifier, build_notifier
from .services.payment_service import PaymentProvider, SimulatedPaymentProvider


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[EntityStore] = None,
    notifier: Optional[Notifier] = None,
    payment_provider: Optional[PaymentProvider] = None,
    clock: Optional[Callable[[], datetime]] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    When no ``store`` is given a fresh one is created and, if
    ``settings.seed_demo_data`` is set, filled with the default catalog
    and demo user.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    setup_logging(settings.log_level, settings.log_file or None, debug=settings.debug)
    logger = logging.getLogger(__name__)

    if store is None:
        store = EntityStore()
        if settings.seed_demo_data:
            seed_demo_data(store)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.state.settings = settings
    app.state.store = store
    app.state.notifier = notifier or build_notifier(settings)
    app.state.payment_provider = payment_provider or SimulatedPaymentProvider()
    app.state.clock = clock

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        return JSONResponse(status_code=exc.status_code, content={"message": exc.detail}, headers=exc.headers)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        # Schema violations are client errors (400) listing every
        # offending field.
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": "Invalid input data", "errors": jsonable_encoder(exc.errors())},
        )

    @app.get("/health", tags=["health"])
    async def health() -> dict:
        return {"status": "ok", "service": "skybook-api"}

    app.include_router(api_router, prefix="/api")

    logger.info("%s %s ready", settings.project_name, settings.api_version)
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
