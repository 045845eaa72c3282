# File: app/core/logging.py

"""
Logging setup and the per-request access log.
"""

import logging
import time

from fastapi import FastAPI, Request

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

access_logger = logging.getLogger("app.access")


def configure_logging(level: str = "INFO") -> None:
    """
    Install one stream handler on the root logger.

    Safe to call more than once (each create_application() calls it);
    an existing handler is left alone and only the level is updated.
    """
    root = logging.getLogger()
    root.setLevel(level.upper())
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)


def add_access_log(app: FastAPI) -> None:
    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start = time.perf_counter()
        # An exception escaping the app is rendered as a 500 further out.
        status_code = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
            return response
        finally:
            duration_ms = (time.perf_counter() - start) * 1000
            access_logger.info(
                "%s %s %s %.1fms",
                request.method,
                request.url.path,
                status_code,
                duration_ms,
            )
