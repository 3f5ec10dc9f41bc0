from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from contextlib import asynccontextmanager
import logging

from multiblog.core.config import settings
from multiblog.core.errors import ApiError, MethodNotAllowedError, NotFoundError, ValidationError
from multiblog.core.logging import configure_logging
from multiblog.database.engine import create_db_and_tables
from multiblog.routers import blogs, authors, categories, posts, tags, comments, simple

# Configure logging
configure_logging()
logger = logging.getLogger(__name__)

ROOT_MESSAGE = "Blog API Server - Use /api/* endpoints"


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Starting application...")

    if settings.AUTO_CREATE_TABLES:
        # With AUTO_CREATE_TABLES=false the schema comes from: alembic upgrade head
        create_db_and_tables()
        logger.info("✓ Database tables ensured")

    logger.info("Application startup complete")

    yield

    logger.info("Application shutdown complete")

app = FastAPI(
    title="Multiblog API",
    description="CRUD API for blogs, authors, categories, posts, tags and comments",
    version="1.0.0",
    docs_url=f"{settings.API_PREFIX}/docs",
    redoc_url=None,
    openapi_url=f"{settings.API_PREFIX}/openapi.json",
    lifespan=lifespan
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        settings.FRONTEND_URL,
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(blogs.router, prefix=settings.API_PREFIX)
app.include_router(authors.router, prefix=settings.API_PREFIX)
app.include_router(categories.router, prefix=settings.API_PREFIX)
app.include_router(posts.router, prefix=settings.API_PREFIX)
app.include_router(tags.router, prefix=settings.API_PREFIX)
app.include_router(comments.router, prefix=settings.API_PREFIX)
app.include_router(simple.router, prefix=settings.API_PREFIX)  # Simple: /api/simple (text-to-posts)


# ========================================
# ERROR HANDLERS
# ========================================

def is_api_path(path: str) -> bool:
    return path == settings.API_PREFIX or path.startswith(settings.API_PREFIX + "/")


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def validation_message(exc: RequestValidationError) -> str:
    """First validation problem as a field-specific sentence."""
    errors = exc.errors()
    if not errors:
        return "Invalid request"

    error = errors[0]
    error_type = error.get("type")
    loc = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path")]
    field = ".".join(loc)

    if error_type == "json_invalid":
        return "Request body is not valid JSON"
    if error_type == "missing":
        return f"{field} is required" if field else "Request body is required"
    if error_type == "value_error":
        # Messages raised by our validators are already complete sentences
        return str(error.get("msg", "")).removeprefix("Value error, ")
    return f"{field}: {error.get('msg')}" if field else str(error.get("msg"))


@app.exception_handler(ApiError)
async def api_error_handler(request: Request, exc: ApiError):
    return error_response(exc.status_code, exc.message)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    error = ValidationError(validation_message(exc))
    return error_response(error.status_code, error.message)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 404:
        if not is_api_path(request.url.path):
            return PlainTextResponse(ROOT_MESSAGE, status_code=200)
        return await api_error_handler(request, NotFoundError("Resource not found"))
    if exc.status_code == 405:
        return await api_error_handler(request, MethodNotAllowedError("Method not allowed"))
    return error_response(exc.status_code, str(exc.detail))


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return error_response(500, "Internal server error")


@app.get("/health")
def health_check():
    return {"status": "healthy"}
