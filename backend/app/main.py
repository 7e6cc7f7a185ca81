"""FastAPI application entry point."""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.api.v1 import brands
from app.core.config import settings
from app.core.errors import BrandServiceError
from app.core.logging import get_logger, setup_logging

logger = get_logger("app")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown lifecycle hooks."""
    level = "DEBUG" if settings.APP_ENV == "development" else settings.LOG_LEVEL
    setup_logging(level, json_logs=settings.LOG_JSON)
    logger.info("Application starting", env=settings.APP_ENV)
    yield
    logger.info("Application shutting down")


app = FastAPI(
    title="Brands API",
    description="Brand CRUD with seeding and schema-conformance repair",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Restrict in production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(BrandServiceError)
async def brand_service_error_handler(request: Request, exc: BrandServiceError) -> JSONResponse:
    """Map service errors to status codes; 5xx bodies never carry internals."""
    if exc.status_code >= 500:
        logger.error(
            "Brand service failure",
            path=request.url.path,
            error=exc.message,
            details=exc.details,
        )
        message = "Internal Server Error"
    else:
        message = exc.message
    return JSONResponse(
        status_code=exc.status_code,
        content={"statusCode": exc.status_code, "message": message},
    )


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Malformed request bodies are bad requests, like failed schema checks."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"statusCode": status.HTTP_400_BAD_REQUEST, "message": "Request body must be a JSON object"},
    )


app.include_router(brands.router)


@app.get("/health", tags=["Health"])
async def health_check() -> dict[str, str]:
    """Public health-check endpoint."""
    return {"status": "ok", "env": settings.APP_ENV}
