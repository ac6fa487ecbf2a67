"""
Main entrypoint for the Product Pricing API.

This module assembles the FastAPI application, sets up logging and
includes the API routers.  ``create_app`` builds and configures the
app for a given :class:`Settings`; the default instance is created at
import time as ``app`` so it can be served directly, e.g.::

    uvicorn product_pricing_api.app.main:app --reload
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.v1.endpoints import health
from .api.v1.router import router as v1_router
from .core.config import Settings, settings as default_settings
from .core.context import AppContext
from .core.logging_config import setup_logging


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    The application context (database handle and signing secret) is
    built here and stored on ``app.state.context``.  The database
    connection itself is opened when the application starts and
    closed when it shuts down.

    Parameters
    ----------
    settings : Optional[Settings]
        Settings to use.  Defaults to the environment‑derived
        module‑level instance.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    setup_logging(settings)

    context = AppContext.from_settings(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        context.open()
        try:
            yield
        finally:
            context.close()

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        description="API for managing product pricing and user authentication",
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.context = context

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(v1_router, prefix="/api")
    app.include_router(health.router, tags=["health"])

    return app


# Create the application instance at import time so that tools such as
# uvicorn can locate it.
app = create_app()
