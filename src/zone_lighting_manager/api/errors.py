"""Translate domain exceptions into JSON error responses."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from ..const import INVALID_ZONE_ID_MESSAGE, MALFORMED_BODY_MESSAGE
from ..exception import InvalidZoneId, MalformedPayload

logger = logging.getLogger(__name__)


async def invalid_zone_id_handler(
    request: Request, exc: InvalidZoneId
) -> JSONResponse:
    logger.debug(
        f"Rejected {request.method} {request.url.path}: zone id {exc.raw!r}"
    )
    return JSONResponse(
        status_code=400, content={"error": INVALID_ZONE_ID_MESSAGE}
    )


async def malformed_payload_handler(
    request: Request, exc: MalformedPayload
) -> JSONResponse:
    logger.debug(f"Rejected {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=400, content={"error": MALFORMED_BODY_MESSAGE}
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the domain error handlers to ``app``."""
    app.add_exception_handler(InvalidZoneId, invalid_zone_id_handler)
    app.add_exception_handler(MalformedPayload, malformed_payload_handler)
