from __future__ import annotations

import logging
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from order_placement.api.routes_orders import get_order_processor, router as orders_router
from order_placement.api.schemas import error_envelope
from order_placement.core.config import get_settings
from order_placement.core.errors import InvalidInputError
from order_placement.core.logging import configure_logging

settings = get_settings()
configure_logging(settings.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(title=settings.app_name, version=settings.app_version)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.on_event("startup")
def on_startup() -> None:
    logger.info("starting service=%s version=%s", settings.service_name, settings.app_version)
    if settings.cors_allows_all:
        logger.warning("CORS allows all origins; set OPS_CORS_ALLOWED_ORIGINS to explicit values outside local dev.")
    # Bad repair table config fails here, not on the first request.
    get_order_processor()
    for route in app.routes:
        for method in sorted(getattr(route, "methods", None) or []):
            logger.info("route registered: method=%s path=%s", method, route.path)


@app.on_event("shutdown")
def on_shutdown() -> None:
    logger.info("shutting down service=%s", settings.service_name)


@app.exception_handler(InvalidInputError)
async def invalid_input_handler(request: Request, exc: InvalidInputError):
    logger.error("request rejected: method=%s path=%s reason=%s", request.method, request.url.path, exc.reason)
    return JSONResponse(
        status_code=400,
        content=error_envelope(InvalidInputError.default_message, exc.reason),
    )


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    detail = [
        {"loc": [str(part) for part in error.get("loc", ())], "msg": str(error.get("msg", ""))}
        for error in exc.errors()
    ]
    logger.error("failed to bind request body: path=%s errors=%s", request.url.path, len(detail))
    return JSONResponse(status_code=400, content=error_envelope(InvalidInputError.default_message, detail))


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("request error: method=%s path=%s", request.method, request.url.path)
    return JSONResponse(
        status_code=500,
        content={"error": "Internal server error", "message": "Something went wrong"},
    )


@app.get("/health")
def health() -> dict:
    return {
        "status": "healthy",
        "service": settings.service_name,
        "version": settings.app_version,
        "timestamp": datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ"),
    }


app.include_router(orders_router)
