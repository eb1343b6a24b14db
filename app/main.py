import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.routing import Match

from app.core.config import settings
from app.core.errors import format_validation_errors
from app.core.logging import configure_logging
from app.api.api import api_router

configure_logging()
logger = logging.getLogger(__name__)

app = FastAPI(title=settings.APP_NAME)

# CORS: use CORS_ORIGINS from env in production; default to localhost for dev
_default_origins = [
    "http://127.0.0.1:5000", "http://localhost:5000",
    "http://127.0.0.1:5173", "http://localhost:5173",
]
_origins = [o.strip() for o in settings.CORS_ORIGINS.split(",") if o.strip()] if settings.CORS_ORIGINS else _default_origins
app.add_middleware(
    CORSMiddleware,
    allow_origins=_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router)

# Message for a request that fails parameter/body validation, keyed by route path
_VALIDATION_MESSAGES = {
    "/api/routes/search": "Invalid search parameters",
    "/api/routes/{route_id}/schedules/{schedule_id}": "Invalid parameters",
    "/api/routes/{route_id}/schedules/{schedule_id}/fare": "Invalid parameters",
    "/api/routes/{route_id}/schedules": "Invalid route ID",
    "/api/schedules/{schedule_id}/seats": "Invalid schedule ID",
    "/api/bookings": "Invalid booking data",
    "/api/bookings/{booking_id}": "Invalid booking ID",
}


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    body = exc.detail if isinstance(exc.detail, dict) else {"message": str(exc.detail)}
    return JSONResponse(status_code=exc.status_code, content=body, headers=getattr(exc, "headers", None))


def _matched_route_path(request: Request) -> str | None:
    """Path template of the route serving this request; scope["route"] is not set when validation fails."""
    for route in request.app.router.routes:
        match, _ = route.matches(request.scope)
        if match == Match.FULL:
            return getattr(route, "path", None)
    return None


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    message = _VALIDATION_MESSAGES.get(_matched_route_path(request), "Invalid request")
    return JSONResponse(
        status_code=400,
        content={"message": message, "errors": format_validation_errors(exc.errors())},
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"message": "Internal server error"})


@app.get("/health")
def health():
    return {"status": "ok"}
