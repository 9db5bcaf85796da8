"""
API Middleware Module

Request timing for the endpoints log, and a last-resort translation of fee
errors that escape a route into JSON responses.
"""

import time
import logging
from fastapi import Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.middleware.base import RequestResponseEndpoint

from greekpay.config.logging_config import log_endpoint_request
from greekpay.payments.errors import FeeCalculationError

logger = logging.getLogger(__name__)


class RequestTimingMiddleware(BaseHTTPMiddleware):
    """Write one endpoints-log line per request and expose the duration."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        start = time.perf_counter()
        response = await call_next(request)
        duration = time.perf_counter() - start

        log_endpoint_request(request.method, request.url.path, response.status_code, duration)
        response.headers["X-Process-Time"] = f"{duration:.4f}"
        return response


class FeeErrorMiddleware(BaseHTTPMiddleware):
    """
    Turn exceptions a route did not handle into JSON error bodies.

    Fee calculation errors are the caller's fault (400); anything else is a
    500 with the traceback in the errors log.
    """

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        try:
            return await call_next(request)
        except FeeCalculationError as e:
            logger.warning(f"Unhandled fee error on {request.url.path}: {e}")
            return JSONResponse(status_code=400, content={"detail": str(e)})
        except Exception as e:
            logger.error(f"Unhandled error on {request.method} {request.url.path}: {e}", exc_info=True)
            return JSONResponse(status_code=500, content={"detail": "Internal server error"})


def setup_cors_middleware(app, config):
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.allowed_origins,
        allow_credentials=config.allowed_credentials,
        allow_methods=config.allowed_methods,
        allow_headers=config.allowed_headers,
    )


def setup_middleware(app, config):
    """Install CORS, error translation and request timing (outermost last)."""
    setup_cors_middleware(app, config)
    app.add_middleware(FeeErrorMiddleware)
    app.add_middleware(RequestTimingMiddleware)
