"""
FastAPI main application module for the inventory tracker
"""

from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from typing import Optional
import time
import logging

from inventory_tracker import __version__
from inventory_tracker.core.config import Settings, settings as default_settings
from inventory_tracker.core.database_utils import create_all_tables, check_database_connection
from inventory_tracker.core.errors import InventoryError
from inventory_tracker.core.security import PasswordHasher, TokenService
from inventory_tracker.api.api import api_router

# Configure logging
logging.basicConfig(
    level=getattr(logging, default_settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
)
logger = logging.getLogger(__name__)

def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the application; signing and hashing parameters come from settings
    """
    settings = settings or default_settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Initialize application on startup, clean up on shutdown"""
        logger.info("Starting Inventory Tracker API...")

        if not check_database_connection():
            logger.error("Failed to connect to database")
            raise RuntimeError("Database connection failed")

        # Note: In production, use migrations instead
        if settings.ENVIRONMENT == "development":
            create_all_tables()
            logger.info("Database tables created/verified successfully")

        logger.info("Application startup complete")
        yield
        logger.info("Shutting down Inventory Tracker API...")

    app = FastAPI(
        title="Inventory Tracker API",
        description="Multi-tenant product catalog with low stock dashboard",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    # Identity collaborators, read-only after startup
    app.state.token_service = TokenService(
        secret_key=settings.JWT_SECRET_KEY,
        algorithm=settings.JWT_ALGORITHM,
        expire_minutes=settings.JWT_EXPIRE_MINUTES,
    )
    app.state.password_hasher = PasswordHasher(rounds=settings.BCRYPT_ROUNDS)
    app.state.low_stock_default_threshold = settings.LOW_STOCK_DEFAULT_THRESHOLD

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOWED_HOSTS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Request timing middleware
    @app.middleware("http")
    async def add_process_time_header(request: Request, call_next):
        start_time = time.time()
        response = await call_next(request)
        process_time = time.time() - start_time
        response.headers["X-Process-Time"] = str(process_time)
        return response

    # Include API routes
    app.include_router(api_router)

    # Liveness endpoint
    @app.get("/")
    async def root():
        """Liveness probe"""
        return {"ok": True}

    # Health check endpoint
    @app.get("/health")
    def health_check():
        """Health check endpoint for monitoring"""
        database_ok = check_database_connection()
        return {
            "status": "healthy" if database_ok else "degraded",
            "database": database_ok,
            "timestamp": time.time(),
            "version": __version__
        }

    # Domain errors carry their own status code
    @app.exception_handler(InventoryError)
    async def inventory_error_handler(request: Request, exc: InventoryError):
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    # Malformed bodies and path parameters
    @app.exception_handler(RequestValidationError)
    async def request_validation_error_handler(request: Request, exc: RequestValidationError):
        fields = sorted({
            ".".join(str(part) for part in error["loc"][1:])
            for error in exc.errors()
            if len(error["loc"]) > 1
        })
        message = f"Invalid fields: {', '.join(fields)}" if fields else "Invalid request"
        return JSONResponse(status_code=400, content={"error": message})

    # Global exception handler
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.error(f"Global exception: {exc}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content={"error": "Internal server error"}
        )

    return app

app = create_app()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "inventory_tracker.main:app",
        host="0.0.0.0",
        port=4000,
        reload=default_settings.DEBUG,
        log_level="info"
    )
