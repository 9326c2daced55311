"""
FastAPI application entry point for the record book backend.
"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from recordbook.config import Settings, get_settings
from recordbook.db import DocumentStore
from recordbook.dependencies import build_store
from recordbook.errors import (
    ERR_BAD_DATE,
    ERR_BAD_REQUEST,
    ERR_MISSING_FIELDS,
    ERR_NO_QUERY,
    ERR_QUERY_MUST_BE_BOOL,
    ERR_QUERY_MUST_BE_INT,
    ApiError,
    StoreError,
    interpret_error,
)
from recordbook.repositories import build_repositories
from recordbook.routes import router
from recordbook.upc import HttpUpcClient, UpcClient

logger = logging.getLogger(__name__)

_MISSING_TYPES = {"missing", "string_too_short"}
_NOT_AN_OBJECT_TYPES = {"json_invalid", "dict_type", "model_attributes_type"}


def validation_message(errors: list[dict]) -> str:
    """
    Pick the client-facing message for a failed request validation.

    A body that is not a JSON object is a bad request outright. A missing or
    empty query parameter comes next, then a missing body field, then a bad
    date.
    """
    types = {error.get("type") for error in errors}
    if types & _NOT_AN_OBJECT_TYPES:
        return ERR_BAD_REQUEST
    for error in errors:
        loc = error.get("loc") or ()
        if loc and loc[0] == "query" and error.get("type") in _MISSING_TYPES:
            return ERR_NO_QUERY
    if types & _MISSING_TYPES:
        return ERR_MISSING_FIELDS
    if "bad_date" in types:
        return ERR_BAD_DATE
    for error in errors:
        loc = error.get("loc") or ()
        if loc and loc[0] == "query":
            if error.get("type") == "int_parsing":
                return ERR_QUERY_MUST_BE_INT
            if error.get("type") == "bool_parsing":
                return ERR_QUERY_MUST_BE_BOOL
    return ERR_BAD_REQUEST


def _error_response(exc: BaseException) -> JSONResponse:
    response = interpret_error(exc)
    return JSONResponse(status_code=response.code, content={"message": response.message})


async def handle_api_error(request: Request, exc: ApiError) -> JSONResponse:
    return _error_response(exc)


async def handle_store_error(request: Request, exc: StoreError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("Store failure on %s %s: %s", request.method, request.url.path, exc)
    return _error_response(exc)


async def handle_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    return JSONResponse(
        status_code=400, content={"message": validation_message(list(exc.errors()))}
    )


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return _error_response(exc)


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[DocumentStore] = None,
    upc_client: Optional[UpcClient] = None,
) -> FastAPI:
    settings = settings or get_settings()
    logging.basicConfig(level=settings.log_level.upper())

    app = FastAPI(title="4-H Record Book Backend", version="0.1.0")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["Authorization", "Content-Type"],
    )

    app.state.settings = settings
    app.state.store = store if store is not None else build_store(settings)
    app.state.repositories = build_repositories(app.state.store)
    app.state.upc_client = upc_client or HttpUpcClient(
        endpoint=settings.upc_endpoint,
        api_key=settings.upc_api_key,
        timeout=settings.upc_timeout_seconds,
    )

    app.add_exception_handler(ApiError, handle_api_error)
    app.add_exception_handler(StoreError, handle_store_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)

    app.include_router(router, prefix=settings.api_prefix)
    return app


app = create_app()
