"""Back-office API for a training school."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from backoffice.core.config import settings
from backoffice.core.exceptions import BackofficeError
from backoffice.core.storage import SchoolStorage
from backoffice.routers import (
    candidatures_router,
    cohorts_router,
    comments_router,
    learners_router,
    programs_router,
    questions_router,
    staff_router,
    stats_router,
)

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info("Initializing application...")

    if settings.init_db_on_startup:
        await SchoolStorage.init_models()

    if settings.seed_sample_data:
        await SchoolStorage.seed_sample_data()

    logger.info("Application initialized")

    yield

    logger.info("Shutdown complete")


app = FastAPI(
    title="School Back-Office",
    description="Programs, cohorts, learners, staff and admissions",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(programs_router)
app.include_router(cohorts_router)
app.include_router(learners_router)
app.include_router(comments_router)
app.include_router(staff_router)
app.include_router(questions_router)
app.include_router(candidatures_router, prefix="/api/candidatures")
app.include_router(
    candidatures_router, prefix="/api/applications", include_in_schema=False
)
app.include_router(stats_router)


@app.exception_handler(BackofficeError)
async def backoffice_error_handler(request: Request, exc: BackofficeError):
    """Domain errors -> {"error": message} with the error's status code."""
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(SQLAlchemyError)
async def storage_error_handler(request: Request, exc: SQLAlchemyError):
    """Storage failures -> 500 with the underlying message, no retry."""
    message = str(getattr(exc, "orig", None) or exc)
    logger.error(f"Storage error on {request.method} {request.url.path}: {message}")
    return JSONResponse(status_code=500, content={"error": message})


@app.get("/api")
async def api_info():
    """API information endpoint."""
    return {
        "message": "School Back-Office API",
        "version": "1.0.0",
        "docs": "/docs",
        "status": "active",
    }


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "service": "backoffice"}
