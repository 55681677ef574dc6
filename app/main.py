"""
Reservation Service - FastAPI Application
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import structlog

from app.config import settings
from app.database import Database
from app.api import reservations, tables
from app.exceptions import register_exception_handlers
from app.services.table_client import TableInfoClient

SERVICE_NAME = "reservation-service"
VERSION = "1.0.0"

# Configure structured logging
logging.basicConfig(format="%(message)s", level=settings.log_level.upper())

structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.processors.JSONRenderer()
        if settings.log_format == "json"
        else structlog.dev.ConsoleRenderer(),
    ],
    wrapper_class=structlog.stdlib.BoundLogger,
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    cache_logger_on_first_use=True,
)

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build the database and table client for this app, release them on shutdown"""
    logger.info("Starting reservation service", version=VERSION)

    database = Database(settings.database_url, echo=settings.database_echo)
    if settings.auto_create_tables:
        await database.create_all()
        logger.info("Database synced")

    table_client = TableInfoClient(
        settings.table_service_url,
        timeout=settings.table_service_timeout,
    )

    app.state.database = database
    app.state.table_client = table_client
    try:
        yield
    finally:
        await table_client.aclose()
        await database.dispose()
        logger.info("Shutting down reservation service")


# Create FastAPI application
app = FastAPI(
    title="Reservation Service",
    description="Restaurant table reservations: booking, cancellation and availability",
    version=VERSION,
    lifespan=lifespan,
    docs_url="/api-docs",
    openapi_url="/api-docs/openapi.json",
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)


# Health check endpoint
@app.get("/health")
async def health():
    """Basic health check"""
    return {"status": "healthy", "service": SERVICE_NAME}


# Include API routers
app.include_router(reservations.router, prefix="/api/reservations", tags=["Reservations"])
app.include_router(tables.router, prefix="/api/tables", tags=["Reservations"])


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_debug,
    )
