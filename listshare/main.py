"""
ListShare

FastAPI application entry point.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import HTMLResponse, RedirectResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from listshare.api import router as lists_router
from listshare.api.deps import get_renderer
from listshare.api.middleware.request_context import REQUEST_ID_HEADER, RequestContextMiddleware
from listshare.config import get_settings
from listshare.database import init_db, ping_db, close_db
from listshare.kernel.errors import NotFoundError, StoreFailure
from listshare.logging_config import configure_logging, get_logger
from listshare.schemas.common import HealthResponse

settings = get_settings()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator:
    """
    Application lifespan handler.

    Runs startup and shutdown tasks.
    """
    configure_logging(
        log_level=settings.log_level,
        environment=settings.environment,
        debug=settings.debug,
    )

    logger.info("Starting %s v%s", settings.project_name, settings.version)
    await ping_db()
    await init_db()
    logger.info("Database initialized")

    yield

    logger.info("Shutting down...")
    await close_db()
    logger.info("Database connections closed")


app = FastAPI(
    title=settings.project_name,
    description="Share lists with friends and browse theirs.",
    version=settings.version,
    lifespan=lifespan,
    docs_url="/docs" if settings.debug else None,
    redoc_url="/redoc" if settings.debug else None,
)

app.add_middleware(RequestContextMiddleware)


def _error_page(request: Request, status_code: int, title: str, detail: str) -> HTMLResponse:
    response = get_renderer().render_error(status_code, title, detail)
    req_id = getattr(request.state, "request_id", None)
    if req_id:
        response.headers[REQUEST_ID_HEADER] = req_id
    return response


@app.exception_handler(NotFoundError)
async def not_found_handler(request: Request, exc: NotFoundError):
    """Unknown list, or a list whose owner cannot be found."""
    logger.info("Not found: %s", exc.message)
    return _error_page(request, status.HTTP_404_NOT_FOUND, "Not Found", exc.message)


@app.exception_handler(StoreFailure)
async def store_failure_handler(request: Request, exc: StoreFailure):
    """Store reads are not retried; the whole request fails."""
    # RecordStore already logged the driver error
    logger.info("Store failure during %s, returning 500", exc.operation)
    detail = exc.message if settings.debug else "Something went wrong loading this page."
    return _error_page(
        request,
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "Server Error",
        detail,
    )


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """404 for unknown routes and similar framework errors."""
    return _error_page(request, exc.status_code, "Error", str(exc.detail))


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Malformed path parameters, e.g. a list id that is not a UUID."""
    fields = ", ".join(".".join(str(loc) for loc in err["loc"]) for err in exc.errors())
    return _error_page(
        request,
        status.HTTP_404_NOT_FOUND,
        "Not Found",
        f"Invalid request: {fields}",
    )


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    """Handle unexpected exceptions."""
    logger.exception("Unhandled exception: %s", exc)
    detail = f"{type(exc).__name__}: {exc}" if settings.debug else "Internal server error"
    return _error_page(
        request,
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "Server Error",
        detail,
    )


@app.get("/health", response_model=HealthResponse, tags=["Health"])
async def health_check():
    """Check application health."""
    return HealthResponse(status="ok", version=settings.version)


@app.get("/", include_in_schema=False)
async def root():
    return RedirectResponse(url="/lists")


app.include_router(lists_router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "listshare.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
