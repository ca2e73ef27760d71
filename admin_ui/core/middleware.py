import logging
import time
from typing import Callable, List

from fastapi import Request
from fastapi.responses import JSONResponse


logger = logging.getLogger(__name__)


def _request_id(request: Request) -> str:
    return f"{int(time.time() * 1000)}-{id(request)}"


def _apply_cors_headers(response, origin: str | None, allowed_origins: List[str]):
    if origin and origin in allowed_origins:
        response.headers["Access-Control-Allow-Origin"] = origin
        response.headers["Access-Control-Allow-Credentials"] = "true"
        response.headers["Access-Control-Allow-Methods"] = "GET, OPTIONS"
        response.headers["Access-Control-Allow-Headers"] = "*"
    return response


async def log_requests(request: Request, call_next: Callable):
    start_time = time.time()
    request_id = _request_id(request)

    try:
        response = await call_next(request)
        process_time = time.time() - start_time
        # Only log slow requests (>1s) or errors
        if process_time > 1.0 or response.status_code >= 400:
            logger.info(f"[{request_id}] {request.method} {request.url.path} - {response.status_code} - {process_time:.2f}s")
        return response
    except Exception as e:
        process_time = time.time() - start_time
        logger.error(f"[{request_id}] {request.method} {request.url.path} - ERROR: {str(e)} - {process_time:.2f}s")
        raise


def build_exception_handler(allowed_origins: List[str]):
    """Return the catch-all handler, closed over the CORS origins of the app."""

    async def global_exception_handler(request: Request, exc: Exception):
        request_id = _request_id(request)
        logger.error(f"[{request_id}] Unhandled exception in {request.method} {request.url.path}: {str(exc)}", exc_info=True)

        response = JSONResponse(status_code=500, content={"detail": "Internal server error"})
        return _apply_cors_headers(response, request.headers.get("origin"), allowed_origins)

    return global_exception_handler
