from __future__ import annotations

import logging
from typing import Any, Dict, List

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


def error_list(errors) -> List[Dict[str, Any]]:
    """Strip pydantic error entries down to JSON-safe keys."""
    return [
        {"loc": list(e.get("loc", ())), "msg": e.get("msg"), "type": e.get("type")}
        for e in errors
    ]


def _request_id(request: Request) -> str | None:
    return getattr(request.state, "request_id", None)


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        logger.info(
            "request validation failed",
            extra={"path": request.url.path, "request_id": _request_id(request)},
        )
        return JSONResponse(
            status_code=400,
            content=jsonable_encoder(
                {"detail": "Invalid request", "errors": error_list(exc.errors())}
            ),
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception(
            "unhandled error",
            extra={"path": request.url.path, "request_id": _request_id(request)},
        )
        return JSONResponse(status_code=500, content={"detail": "Internal server error"})
