# fleet/main.py
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from starlette.exceptions import HTTPException as StarletteHTTPException

from fleet.core.config import settings
from fleet.core.logging import setup_logging
from fleet.api.v1.routers.drivers import router as drivers_router
from fleet.infrastructure.db.session import init_db

from fleet.middleware.error_handler import http_error_handler
from fleet.middleware.request_id import RequestIDMiddleware
from fleet.middleware.request_timing import RequestTimingMiddleware


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.auto_create_tables:
        await init_db()
    yield


async def _http_exc_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})

async def _validation_exc_handler(request: Request, exc: RequestValidationError):
    # malformed or rule-breaking driver payloads are a plain bad request
    return JSONResponse(status_code=400, content={"detail": jsonable_encoder(exc.errors())})

async def _unhandled_exc_handler(request: Request, exc: Exception):
    return await http_error_handler(request, exc)

def healthz():
    return {"ok": True}


def create_app() -> FastAPI:
    docs = settings.environment == "dev"
    app = FastAPI(
        title=settings.app_name,
        lifespan=lifespan,
        docs_url="/swagger" if docs else None,
        redoc_url=None,
        openapi_url="/openapi.json" if docs else None,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestTimingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    app.include_router(drivers_router)
    app.add_exception_handler(StarletteHTTPException, _http_exc_handler)
    app.add_exception_handler(RequestValidationError, _validation_exc_handler)
    app.add_exception_handler(Exception, _unhandled_exc_handler)
    app.add_api_route("/healthz", healthz, methods=["GET"])
    return app


setup_logging()
app = create_app()
