# fleet/web/app.py
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI, Request

from fleet.core.config import settings
from fleet.core.logging import setup_logging
from fleet.middleware.error_handler import http_error_handler
from fleet.middleware.request_id import RequestIDMiddleware
from fleet.middleware.request_timing import RequestTimingMiddleware
from fleet.web.client import DriversClient, QueryCache
from fleet.web.pages import router as pages_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    http = httpx.AsyncClient(base_url=settings.api_base_url, timeout=30.0)
    app.state.drivers_client = DriversClient(http, QueryCache(settings.ui_cache_ttl_seconds))
    try:
        yield
    finally:
        await app.state.drivers_client.aclose()


setup_logging()
app = FastAPI(title=f"{settings.app_name}-ui", lifespan=lifespan, docs_url=None, redoc_url=None, openapi_url=None)

app.add_middleware(RequestTimingMiddleware)
app.add_middleware(RequestIDMiddleware)

app.include_router(pages_router)

@app.exception_handler(Exception)
async def _unhandled_exc_handler(request: Request, exc: Exception):
    return await http_error_handler(request, exc)
