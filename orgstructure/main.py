from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from orgstructure.api import (
    dashboard,
    departments,
    gap_analyses,
    headcount,
    library,
    matrices,
    roles,
)
from orgstructure.middleware import error_handler_middleware, logging_middleware
from orgstructure.core.logging import configure_logging, get_logger
from orgstructure.core.settings import get_settings
from orgstructure.persistence import get_document_store

settings = get_settings()

# Configure structured logging
configure_logging(
    log_level=settings.log_level,
    json_logs=settings.json_logs,
    app_name=settings.app_name,
    environment=settings.environment.value,
)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    store = get_document_store()
    logger.info("Application started", db_path=str(store.db_path), version=settings.version)
    yield
    logger.info("Application stopped")


app = FastAPI(
    title="Org Structure API",
    description="Departments, roles, responsibility matrices, gap analysis and headcount planning",
    version=settings.version,
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    lifespan=lifespan,
)

# Middleware registration order matters!
# Logging middleware should be first to capture all requests
app.middleware("http")(logging_middleware)
# Error handler should be after logging to catch errors in logged requests
app.middleware("http")(error_handler_middleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(departments.router, prefix="/api", tags=["departments"])
app.include_router(roles.router, prefix="/api", tags=["roles"])
app.include_router(library.router, prefix="/api", tags=["library"])
app.include_router(matrices.router, prefix="/api", tags=["matrices"])
app.include_router(gap_analyses.router, prefix="/api", tags=["gap-analysis"])
app.include_router(headcount.router, prefix="/api", tags=["headcount"])
app.include_router(dashboard.router, prefix="/api", tags=["dashboard"])


@app.get("/")
async def root():
    return {"message": "Welcome to Org Structure API", "version": settings.version}


@app.get("/health")
async def health_check():
    """Health check endpoint for monitoring."""
    return {"status": "healthy", "version": settings.version}
