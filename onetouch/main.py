import logging
import time
from datetime import datetime, timezone

from fastapi import FastAPI
from contextlib import asynccontextmanager
from sqlalchemy.engine import make_url

from onetouch.config.settings import settings
from onetouch.config.database import engine, init_db
from onetouch.core.exceptions import setup_exception_handlers
from onetouch.core.middleware import setup_middleware
from onetouch.api.router import api_router

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)
logger = logging.getLogger(__name__)

START_TIME = time.monotonic()

@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    url = make_url(settings.sqlalchemy_url)
    logger.info("🚀 %s starting...", settings.app_name)
    logger.info("📍 Version: %s", settings.version)
    logger.info("🌍 Environment: %s", settings.environment)
    logger.info("🐘 Database: %s %s:%s/%s", url.get_backend_name(), url.host, url.port, url.database)
    init_db()

    yield

    # Shutdown
    engine.dispose()
    logger.info("🛑 %s shutting down, database pool closed", settings.app_name)

def create_app() -> FastAPI:
    app = FastAPI(
        title=settings.app_name,
        version=settings.version,
        description="Inventory and sales management API",
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        lifespan=lifespan
    )

    # Setup middleware and error bodies
    setup_middleware(app)
    setup_exception_handlers(app)

    # Include routers
    app.include_router(api_router)

    # Root endpoint
    @app.get("/")
    async def root():
        return {
            "message": f"{settings.app_name} - Inventory & Sales",
            "status": "Online",
            "version": settings.version,
            "database": make_url(settings.sqlalchemy_url).get_backend_name(),
            "environment": settings.environment,
            "cors": "All origins allowed" if "*" in settings.allowed_origins else settings.allowed_origins,
            "endpoints": {
                "products": "/api/products",
                "sales": "/api/sales",
                "stock": "/api/stock/add",
                "stats": "/api/stats"
            }
        }

    @app.get("/health")
    async def health_check():
        return {
            "status": "OK",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "uptime": time.monotonic() - START_TIME
        }

    return app

app = create_app()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "onetouch.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug
    )
