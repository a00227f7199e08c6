# app/main.py

import sys
import logging
import time

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.config import LOG_LEVEL, LOG_FILE, CORS_ORIGINS, PORT
from app.core.exceptions import AppError, Unauthenticated

# --- Configure logging FIRST ---
_handlers = [logging.StreamHandler(sys.stdout)]
if LOG_FILE:
    _handlers.append(logging.FileHandler(LOG_FILE, mode="a"))

# Configure root logger
logging.basicConfig(
    level=getattr(logging, LOG_LEVEL, logging.INFO),
    format="%(asctime)s [%(name)s:%(levelname)s] %(message)s",
    handlers=_handlers,
)

# Create main logger
logger = logging.getLogger("workout_planner")
logger.setLevel(getattr(logging, LOG_LEVEL, logging.INFO))

# Set uvicorn / fastapi loggers to same level
for _name in ("uvicorn.error", "uvicorn.access", "fastapi"):
    logging.getLogger(_name).setLevel(getattr(logging, LOG_LEVEL, logging.INFO))

logger.info(f"Logging configured at {LOG_LEVEL} level")

# --- Routers ---
from app.api.authentication import router as auth_router
from app.api.plans          import router as plans_router
from app.api.days           import router as days_router
from app.api.exercises      import router as exercises_router

# --- Create FastAPI app ---
app = FastAPI(
    title       = "Workout Planner API",
    version     = "1.0.0",
    description = "Plans, days, sections and exercises for the workout planner mobile app"
)

@app.middleware("http")
async def log_requests(request: Request, call_next):
    start_time = time.time()

    logger.info(f"Incoming request: {request.method} {request.url.path}")
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(f"Headers: {dict(request.headers)}")

    response = await call_next(request)

    process_time = time.time() - start_time
    logger.info(f"Request completed in {process_time:.3f}s with status {response.status_code}")
    return response

# --- Error handlers: every error body is {"error": <message>, "code": <code>} ---

_HTTP_CODES = {
    400: "validation_error",
    401: "unauthenticated",
    403: "forbidden",
    404: "not_found",
    405: "method_not_allowed",
    409: "conflict",
}

def _error(status_code: int, message: str, code: str, headers: dict = None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message, "code": code}, headers=headers)

@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, Unauthenticated) else None
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return _error(exc.status_code, exc.message, exc.code, headers)

@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    raw_body = await request.body()
    logger.error(
        f"Validation error for {request.url.path}\n"
        f"Raw JSON was:\n{raw_body.decode('utf-8', errors='replace') if raw_body else 'No body'}\n"
        f"Errors:\n{exc.errors()!r}"
    )
    errors = exc.errors()
    message = "Invalid request"
    if errors:
        first = errors[0]
        field = ".".join(str(p) for p in first.get("loc", ()) if p != "body")
        message = f"{field}: {first.get('msg')}" if field else str(first.get("msg"))
    return _error(400, message, "validation_error")

@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return _error(
        exc.status_code,
        str(exc.detail),
        _HTTP_CODES.get(exc.status_code, "http_error"),
        getattr(exc, "headers", None),
    )

@app.exception_handler(SQLAlchemyError)
async def database_exception_handler(request: Request, exc: SQLAlchemyError):
    logger.error(f"Database error on {request.method} {request.url.path}", exc_info=exc)
    return _error(500, "Internal server error", "server_error")

@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unexpected error on {request.method} {request.url.path}", exc_info=exc)
    return _error(500, "Internal server error", "server_error")

# --- CORS (the mobile app talks to us directly) ---
app.add_middleware(
    CORSMiddleware,
    allow_origins     = CORS_ORIGINS,
    allow_credentials = True,
    allow_methods     = ["*"],
    allow_headers     = ["*"],
)

# --- Include all routers ---
app.include_router(auth_router)
app.include_router(plans_router)
app.include_router(days_router)
app.include_router(exercises_router)

@app.on_event("startup")
async def startup_event():
    logger.info("Starting Workout Planner API")
    logger.info("API docs available at /docs")

# --- Health endpoint ---
@app.get("/health", tags=["Health"])
async def health_check():
    return {"ok": True}


if __name__ == "__main__":
    import uvicorn

    # Listen on all interfaces so phones on the same network can reach the API
    uvicorn.run(app, host="0.0.0.0", port=PORT)
