"""
Student violation tracking API (pelanggaran siswa) with PostgreSQL.
"""
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

import config
from database.connection import Database
from core.exceptions import DisciplineError, StorageError
from core.logger import logger
from middleware.security import (
    RequestLoggingMiddleware, SecurityHeadersMiddleware,
    setup_cors, setup_trusted_hosts
)
from routers.auth import router as auth_router
from routers.users import router as users_router
from routers.kelas import router as kelas_router
from routers.guru import router as guru_router
from routers.siswa import router as siswa_router
from routers.data_pelanggaran import router as data_pelanggaran_router
from routers.pelanggaran_siswa import router as pelanggaran_siswa_router
from routers.pengaturan import router as pengaturan_router
from routers.dashboards import router as dashboards_router


# Lifespan context manager for startup/shutdown
@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan events for FastAPI app.
    Initialize the database on startup and release its pool on shutdown.
    """
    logger.info("=" * 60)
    logger.info(f"Starting {config.APP_NAME} v{config.APP_VERSION}...")
    logger.info("=" * 60)

    if config.db is None:
        try:
            config.db = Database(
                database_url=config.DATABASE_URL,
                pool_size=config.DB_POOL_SIZE,
                max_overflow=config.DB_MAX_OVERFLOW,
                echo=config.DB_ECHO
            )
            # Create tables if they don't exist
            config.db.create_tables()
            logger.info("Database initialized successfully")
        except SQLAlchemyError as e:
            logger.error(f"Failed to initialize database: {e}", exc_info=True)
            raise

    logger.info(f"Environment: {config.ENVIRONMENT}")
    logger.info(f"API Docs: http://{config.SERVER_HOST}:{config.SERVER_PORT}/docs")

    yield

    # Cleanup on shutdown
    logger.info("Shutting down...")
    if config.db:
        config.db.dispose()


# Initialize FastAPI app
app = FastAPI(
    title=config.APP_NAME,
    description="Record student disciplinary violations and summarise them by category and class",
    version=config.APP_VERSION,
    lifespan=lifespan
)

# Setup security middleware
app.add_middleware(SecurityHeadersMiddleware)
app.add_middleware(RequestLoggingMiddleware)
setup_cors(app, config.CORS_ORIGINS, allow_credentials=config.CORS_ALLOW_CREDENTIALS)
if config.ENVIRONMENT == "production":
    setup_trusted_hosts(app, config.TRUSTED_HOSTS)

# Include routers
app.include_router(auth_router)
app.include_router(users_router)
app.include_router(kelas_router)
app.include_router(guru_router)
app.include_router(siswa_router)
app.include_router(data_pelanggaran_router)
app.include_router(pelanggaran_siswa_router)
app.include_router(pengaturan_router)
app.include_router(dashboards_router)


@app.exception_handler(DisciplineError)
async def discipline_error_handler(request: Request, exc: DisciplineError):
    """Map domain errors to their HTTP status."""
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    else:
        logger.info(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.exception_handler(SQLAlchemyError)
async def storage_error_handler(request: Request, exc: SQLAlchemyError):
    """Report database failures as a storage error without leaking SQL."""
    logger.error(f"Database error on {request.method} {request.url.path}: {exc}", exc_info=True)
    error = StorageError()
    return JSONResponse(status_code=error.status_code, content=error.to_dict())


@app.get("/")
def root():
    """Root endpoint with API information."""
    return {
        "message": config.APP_NAME,
        "version": config.APP_VERSION,
        "environment": config.ENVIRONMENT,
        "endpoints": {
            "login": "POST /api/auth/login",
            "users": "/api/users",
            "kelas": "/api/kelas",
            "guru": "/api/guru",
            "siswa": "/api/siswa",
            "search_siswa": "GET /api/siswa/search?query=",
            "data_pelanggaran": "/api/data-pelanggaran",
            "pelanggaran_siswa": "/api/pelanggaran-siswa",
            "pengaturan_instansi": "/api/pengaturan-instansi",
            "dashboard": "GET /api/dashboard/summary",
            "health": "GET /health",
            "docs": "GET /docs"
        }
    }


@app.get("/health")
def health_check():
    """Health check endpoint for monitoring."""
    health_status = {
        "status": "healthy",
        "timestamp": time.time(),
        "checks": {}
    }

    # Check database
    if config.db is None:
        health_status["checks"]["database"] = {"status": "error", "error": "not initialized"}
        health_status["status"] = "degraded"
    else:
        try:
            with config.db.get_session() as db:
                db.execute(text("SELECT 1"))
            health_status["checks"]["database"] = {"status": "ok"}
        except SQLAlchemyError as e:
            logger.warning(f"Health check database probe failed: {e}")
            health_status["checks"]["database"] = {"status": "error", "error": str(e)}
            health_status["status"] = "degraded"

    return health_status


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "app:app",
        host=config.SERVER_HOST,
        port=config.SERVER_PORT,
        reload=config.DEBUG,
        log_level=config.LOG_LEVEL.lower()
    )
