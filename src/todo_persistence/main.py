import logging
import sqlite3
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .logging_config import setup_logging
from .settings import get_settings
from .routers import todos as todos_router

logger = logging.getLogger(__name__)

openapi_tags = [
    {"name": "health", "description": "Service health and status endpoints."},
    {"name": "todos", "description": "Create, read, replace and delete Todo items."},
]

_settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(_settings.log_level, _settings.log_format)
    logger.info("Starting with %s persistence", _settings.persistence_backend)
    yield


app = FastAPI(
    title="Todo Persistence",
    description="Todo item storage service with pluggable storage backends.",
    version="0.1.0",
    openapi_tags=openapi_tags,
    lifespan=lifespan,
)

origins = _settings.cors_allow_origins or ["*"]
app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    Answer malformed requests with 422 and a body of the form
    ``{"error": "ValidationError", "message": ..., "detail": [...]}``.
    """
    return JSONResponse(
        status_code=422,
        content={
            "error": "ValidationError",
            "message": "Request validation failed",
            "detail": exc.errors(),
        },
    )


@app.exception_handler(sqlite3.Error)
async def storage_exception_handler(request: Request, exc: sqlite3.Error) -> JSONResponse:
    """Log a failed storage operation and answer with a generic 500 body."""
    logger.error("Storage failure on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=500,
        content={"error": "StorageError", "message": "Storage operation failed"},
    )


# PUBLIC_INTERFACE
@app.get("/", summary="Health Check", tags=["health"])
def health_check():
    """Report liveness and the active persistence backend."""
    return {"message": "Healthy", "backend": _settings.persistence_backend}


app.include_router(todos_router.router)
