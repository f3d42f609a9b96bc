from typing import Optional

from fastapi import FastAPI

from .. import __version__
from ..config import AppSettings
from ..logging import init_logging
from .middleware import RequestLogMiddleware
from .routes import status


def create_app(settings: Optional[AppSettings] = None) -> FastAPI:
    settings = settings or AppSettings()
    init_logging(settings.log_level)

    app = FastAPI(
        title=settings.service_name,
        version=__version__,
        openapi_tags=[
            {"name": "status", "description": "Service identity and liveness"},
        ],
    )

    app.add_middleware(RequestLogMiddleware)
    app.include_router(status.router, tags=["status"])  # GET, HEAD /

    app.state.settings = settings

    return app
