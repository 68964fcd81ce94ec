"""
Main entrypoint for the Person Directory Service.

This module assembles the FastAPI application, sets up logging and
includes the API router.  ``create_app`` builds and configures the
app, which is then instantiated at module import time as ``app``, so
it can be served directly, e.g.::

    uvicorn person_directory.app.main:app --port 3333
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI

from .api.router import router
from .core.config import Settings, settings
from .core.db import Database
from .core.logging_config import setup_logging


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    app_settings : Optional[Settings]
        Settings to build the app with.  Defaults to the module-level
        ``settings`` read from the environment.

    Returns
    -------
    FastAPI
        A configured application whose database handle is available
        as ``app.state.db``.
    """
    app_settings = app_settings or settings
    # Initialise logging before anything else so that the startup hook
    # below can log.
    setup_logging(app_settings)

    db = Database(app_settings.database_url)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        # Create the persons table on startup if it is missing.
        db.init_schema()
        yield

    app = FastAPI(
        title=app_settings.project_name,
        version=app_settings.api_version,
        lifespan=lifespan,
    )
    app.state.db = db
    app.include_router(router)
    return app


app = create_app()
