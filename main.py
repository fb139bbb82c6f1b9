# main.py
"""
DesiFit API - Main Application.

FastAPI app serving AI fitness plans and a local weight tracker.
"""

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
from datetime import datetime, timezone
import logging
import sentry_sdk
from sentry_sdk.integrations.fastapi import FastApiIntegration
from sentry_sdk.integrations.logging import LoggingIntegration

from settings import settings
from app.utils.errors import ConfigurationError, DesiFitException, ProviderError

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

# Initialize Sentry for error tracking
if settings.SENTRY_DSN:
    sentry_sdk.init(
        dsn=settings.SENTRY_DSN,
        environment=settings.SENTRY_ENVIRONMENT,
        traces_sample_rate=settings.SENTRY_TRACES_SAMPLE_RATE,
        integrations=[
            FastApiIntegration(),
            LoggingIntegration(
                level=logging.INFO,
                event_level=logging.ERROR
            ),
        ],
    )
    logger.info(f"Sentry initialized ({settings.SENTRY_ENVIRONMENT})")
else:
    logger.warning("Sentry DSN not configured - error tracking disabled")

# Import routers
from app.routes import plan, progress
from app.dependencies import get_weight_log

VERSION = "1.0.0"
PLAN_FAILURE_MESSAGE = (
    "Something went wrong while generating your plan. "
    "Please check your connection and try again."
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    logger.info("Starting DesiFit API...")
    if not settings.gemini_configured:
        logger.warning("GEMINI_API_KEY not set - plan generation will fail until configured")
    # Read weight history once; later requests reuse the loaded log
    get_weight_log()

    yield

    logger.info("DesiFit API shutdown complete")


# Create FastAPI app
app = FastAPI(
    title="DesiFit API",
    version=VERSION,
    description="AI personal trainer: body-part workout plans, Indian diet plans and weight tracking",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(DesiFitException)
async def desifit_exception_handler(request: Request, exc: DesiFitException):
    """
    Convert application errors to JSON.

    Plan generation errors all collapse to one user-facing message; the
    specific kind is only logged.
    """
    if isinstance(exc, (ConfigurationError, ProviderError)):
        logger.error(
            f"Plan generation failed ({type(exc).__name__}): {exc.message} - {exc.detail}"
        )
        return JSONResponse(
            status_code=exc.status_code,
            content={"detail": PLAN_FAILURE_MESSAGE}
        )

    logger.error(f"{type(exc).__name__} on {request.url.path}: {exc.detail}")
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.message}
    )


# Health check
@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "ok",
        "environment": settings.ENV,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "version": VERSION
    }


# Include routers
app.include_router(plan.router, prefix="/plan", tags=["Plan"])
app.include_router(progress.router, prefix="/progress", tags=["Progress"])


# Root endpoint
@app.get("/")
async def root():
    """API root endpoint."""
    return {
        "message": "DesiFit API",
        "version": VERSION,
        "docs": "/docs",
        "health": "/health"
    }
