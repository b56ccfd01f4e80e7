#!/usr/bin/env python3
"""
Service errors and the handlers that turn them into JSON responses.

Every error body has the same shape:
    {"success": false, "error": "<message>", "type": "<error class>"}
"""

import logging

from fastapi import Request
from starlette.exceptions import HTTPException
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class ServiceException(Exception):
    """Base exception for service layer errors."""
    status_code = 500


class JobNotFoundException(ServiceException):
    """The requested job does not exist."""
    status_code = 404


def error_response(status_code: int, error: str, error_type: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "error": error, "type": error_type}
    )


async def service_exception_handler(request: Request, exc: ServiceException) -> JSONResponse:
    """
    Map a ServiceException to its status code.

    Client errors (4xx) are logged at INFO, anything else at ERROR with
    the traceback.
    """
    if exc.status_code < 500:
        logger.info(f"{request.method} {request.url.path} -> {exc.status_code}: {exc}")
    else:
        logger.error(f"Service error in {request.url.path}: {exc}", exc_info=exc)

    return error_response(exc.status_code, str(exc), exc.__class__.__name__)


async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    return error_response(exc.status_code, exc.detail, "HTTPException")


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Last resort: hide internals from the client, keep them in the log."""
    logger.error(f"Unexpected error in {request.url.path}", exc_info=exc)
    return error_response(500, "Internal server error", "InternalError")
