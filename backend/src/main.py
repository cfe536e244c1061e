"""Main FastAPI Application

Wires middleware, global exception handlers and the API routers from
`presentation`. Run locally for development with:

    uvicorn main:app --reload

Keep application logic in `domain`, `application` and `infrastructure`
to preserve a clean architecture.
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi.util import get_remote_address

from core.config import settings
from core.database import init_db, close_db, health_check as database_health_check
from core.logging_config import configure_logging
from core.exceptions import (
    DomainException,
    AuthorizationException,
    ValidationException,
    RepositoryException,
    ResourceNotFoundException,
)
from application.services.jobs.dormancy_sweeper import get_sweeper, start_sweeper, stop_sweeper
from presentation.api.v1.endpoints import (
    admin_router,
    candidates_router,
    employers_router,
    jobs_router,
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events"""
    logger.info(f"Starting {settings.APP_NAME} ({settings.ENVIRONMENT})...")

    await init_db()
    logger.info("Database initialized")

    start_sweeper()

    yield

    logger.info("Shutting down gracefully...")
    await stop_sweeper()
    await close_db()
    logger.info("Database connections closed")


limiter = Limiter(
    key_func=get_remote_address,
    default_limits=[f"{settings.RATE_LIMIT_PER_MINUTE}/minute"],
    enabled=settings.RATE_LIMIT_ENABLED,
)


app = FastAPI(
    title=settings.APP_NAME,
    description="Job board API: job post lifecycle for candidates, employers and admins",
    version="1.0.0",
    lifespan=lifespan,
    docs_url="/docs" if settings.DEBUG else None,
    redoc_url="/redoc" if settings.DEBUG else None
)


app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.state.limiter = limiter
app.add_middleware(SlowAPIMiddleware)


@app.exception_handler(RateLimitExceeded)
async def rate_limit_handler(request: Request, exc: RateLimitExceeded):
    return JSONResponse(
        status_code=status.HTTP_429_TOO_MANY_REQUESTS,
        content={"detail": "Rate limit exceeded. Please try again later."}
    )


@app.exception_handler(DomainException)
async def domain_exception_handler(request: Request, exc: DomainException):
    """Handle domain-level exceptions"""
    logger.warning(f"Domain exception on {request.method} {request.url.path}: {str(exc)}")

    detail = str(exc)
    if isinstance(exc, AuthorizationException):
        status_code = status.HTTP_403_FORBIDDEN
    elif isinstance(exc, ValidationException):
        status_code = status.HTTP_422_UNPROCESSABLE_ENTITY
    elif isinstance(exc, ResourceNotFoundException):
        status_code = status.HTTP_404_NOT_FOUND
    elif isinstance(exc, RepositoryException):
        # Storage details stay in the log
        status_code = status.HTTP_400_BAD_REQUEST
        detail = "Database operation failed"
    else:
        # InvalidStateTransitionException and anything else domain-level
        status_code = status.HTTP_400_BAD_REQUEST

    return JSONResponse(
        status_code=status_code,
        content={"detail": detail}
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Catch-all exception handler"""
    logger.opt(exception=exc).error(f"Unhandled exception: {str(exc)}")

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"}
    )


app.include_router(
    employers_router,
    prefix="/api/v1/employers",
    tags=["Employer Jobs"]
)

app.include_router(
    admin_router,
    prefix="/api/v1/admin",
    tags=["Admin Jobs"]
)

app.include_router(
    candidates_router,
    prefix="/api/v1/candidates",
    tags=["Candidate Jobs"]
)

app.include_router(
    jobs_router,
    prefix="/api/v1",
    tags=["Jobs"]
)


@app.get("/health")
@app.get("/api/health")
async def health():
    """Health check endpoint"""
    database_ok = await database_health_check()
    sweeper = get_sweeper()
    return {
        "status": "healthy" if database_ok else "degraded",
        "service": "job-board-api",
        "database": "up" if database_ok else "down",
        "dormancy_sweeper": "running" if sweeper and sweeper.running else "stopped",
        "version": "1.0.0"
    }


if __name__ == "__main__":
    import uvicorn

    configure_logging()
    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG
    )
