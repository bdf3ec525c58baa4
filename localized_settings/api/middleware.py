"""
FastAPI Middleware

Request logging, request IDs and per-request language selection.
"""

import time
import uuid
from typing import Awaitable, Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from localized_settings.core.locale import (
    get_active_language,
    normalize_language,
    reset_active_language,
    set_active_language,
)
from localized_settings.core.logger import get_logger

logger = get_logger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Simple middleware to log API requests and responses.
    """

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        start_time = time.time()
        method = request.method
        path = request.url.path
        client_ip = request.client.host if request.client else "unknown"
        request_id = getattr(request.state, "request_id", "unknown")

        logger.debug("Request: %s %s from %s [%s]", method, path, client_ip, request_id)

        try:
            response = await call_next(request)
        except Exception as e:
            logger.error(
                "Request failed: %s %s - %s (%.3fs) [%s]",
                method,
                path,
                str(e),
                time.time() - start_time,
                request_id,
                exc_info=True,
            )
            raise

        duration = time.time() - start_time
        if response.status_code >= 500:
            log = logger.error
        elif response.status_code >= 400:
            log = logger.warning
        else:
            log = logger.info
        log(
            "%s %s - %d (%.3fs) [%s]",
            method,
            path,
            response.status_code,
            duration,
            request_id,
        )
        return response


class RequestIDMiddleware(BaseHTTPMiddleware):
    """
    Reads X-Request-ID from request headers or generates a new UUID.
    Stores it in request.state.request_id and echoes it in the response.
    """

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        request.state.request_id = request_id

        response = await call_next(request)

        response.headers["X-Request-ID"] = request_id
        return response


class LocaleMiddleware(BaseHTTPMiddleware):
    """
    Selects the language used to resolve localized settings for one request.

    Priority: ``?lang=`` query parameter, then the Accept-Language header,
    then the configured default. The result is stored in
    request.state.language, activated in the locale context for the
    duration of the request, and echoed as Content-Language.
    """

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        language = normalize_language(
            request.query_params.get("lang")
        ) or normalize_language(request.headers.get("Accept-Language"))

        token = set_active_language(language)
        try:
            request.state.language = get_active_language()
            response = await call_next(request)
        finally:
            reset_active_language(token)

        response.headers["Content-Language"] = request.state.language
        return response
