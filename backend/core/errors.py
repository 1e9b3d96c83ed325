from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.status import HTTP_500_INTERNAL_SERVER_ERROR

from backend.api.schemas import ApiErrorResponse, ErrorPayload, Meta
from backend.core.exceptions import InvalidOption, SummoraError

logger = logging.getLogger(__name__)


def _meta(request: Request) -> Meta:
    rid = getattr(request.state, "request_id", "unknown")
    return Meta(request_id=rid)


def _error_response(request: Request, status_code: int, payload: ErrorPayload) -> JSONResponse:
    body = ApiErrorResponse(error=payload, meta=_meta(request))
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))


async def summora_exception_handler(request: Request, exc: SummoraError):
    logger.info("Request rejected (code=%s, status=%d)", exc.code, exc.status_code)
    return _error_response(
        request,
        exc.status_code,
        ErrorPayload(code=exc.code, message=exc.message, details=exc.details),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return _error_response(
        request,
        InvalidOption.status_code,
        ErrorPayload(
            code="validation_error",
            message="Invalid request body",
            details={"errors": jsonable_encoder(exc.errors())},
        ),
    )


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return _error_response(
        request,
        HTTP_500_INTERNAL_SERVER_ERROR,
        ErrorPayload(code="internal_error", message="Unexpected server error"),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(SummoraError, summora_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
