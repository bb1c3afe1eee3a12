from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from verifydip import __version__
from verifydip.api.v1.router import v1_router
from verifydip.core.config import Settings, get_settings
from verifydip.core.errors import register_exception_handlers
from verifydip.core.logging import configure_logging
from verifydip.core.middleware import RequestIdMiddleware
from verifydip.services.idgt_service import IdgtService
from verifydip.storage import Storage, build_storage


def create_app(settings: Optional[Settings] = None, storage: Optional[Storage] = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings)

    app = FastAPI(
        title=settings.app_name,
        version=__version__,
    )

    # One store per app, handed to routes through Depends(get_storage)
    app.state.settings = settings
    app.state.storage = storage if storage is not None else build_storage(settings)
    app.state.idgt_service = IdgtService(app.state.storage, settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    # Middleware: Request ID
    app.add_middleware(RequestIdMiddleware, header_name=settings.request_id_header)

    register_exception_handlers(app)

    # API
    app.include_router(v1_router, prefix=settings.api_prefix)

    return app


app = create_app()
