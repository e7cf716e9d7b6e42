"""Request logging middleware"""
import time

from config.logger import logger
from fastapi import Request


async def log_requests(request: Request, call_next):
    """Log failed HTTP requests with their duration; successful ones only at debug"""
    started = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - started) * 1000

    if response.status_code >= 400:
        logger.warning(f"{request.method} {request.url.path} - Status: {response.status_code} ({elapsed_ms:.1f} ms)")
    else:
        logger.debug(f"{request.method} {request.url.path} - {response.status_code} ({elapsed_ms:.1f} ms)")
    return response
