# main.py

"""FastAPI application for the kitchenpos point-of-sale backend."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from config import get_settings

from . import db as app_db
from .middlewares import LoggingMiddleware, RequestIdMiddleware
from .obs import configure_logging
from .routes_menu_groups import router as menu_groups_router
from .routes_menus import router as menus_router
from .routes_order_tables import router as order_tables_router
from .routes_orders import router as orders_router
from .routes_products import router as products_router
from .utils.responses import err

settings = get_settings()
configure_logging(settings.log_level.upper())
logger = logging.getLogger("kitchenpos")


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("starting %s env=%s", settings.app_name, settings.app_env)
    app_db.init_db()
    yield
    logger.info("stopping %s", settings.app_name)


app = FastAPI(title=settings.app_name, lifespan=lifespan)

# Added innermost first: the request id must be set before request logging.
app.add_middleware(LoggingMiddleware)
app.add_middleware(RequestIdMiddleware)


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    logger.warning(
        exc.detail,
        extra={
            "status": exc.status_code,
            "route": request.url.path,
            "method": request.method,
        },
    )
    return JSONResponse(err(exc.status_code, exc.detail), status_code=exc.status_code)


@app.exception_handler(Exception)
async def general_error_handler(request: Request, exc: Exception):
    logger.exception(
        "unhandled_error",
        extra={"status": 500, "route": request.url.path, "method": request.method},
    )
    return JSONResponse(err(500, "Internal Server Error"), status_code=500)


@app.get("/health")
async def health() -> dict:
    return {"status": "ok", "app": settings.app_name, "env": settings.app_env}


app.include_router(order_tables_router)
app.include_router(products_router)
app.include_router(menu_groups_router)
app.include_router(menus_router)
app.include_router(orders_router)
