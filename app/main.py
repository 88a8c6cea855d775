import logging
from fastapi import FastAPI
from contextlib import asynccontextmanager

from app.config.settings import settings
from app.config.database import Base, engine
from app.core.exceptions import register_exception_handlers
from app.core.middleware import setup_middleware
from app.api.v1.router import api_router
from app.shared.database import models  # noqa: F401  registra las tablas en Base

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    Base.metadata.create_all(bind=engine)
    logger.info(f"{settings.app_name} starting - version {settings.version}")
    logger.info(f"Environment: {'Development' if settings.debug else 'Production'}")
    
    yield
    
    # Shutdown
    logger.info(f"{settings.app_name} shutting down")

# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    version=settings.version,
    description="Gestión de almacenes: secciones, lotes, órdenes de entrada y de salida",
    docs_url="/docs" if settings.debug else None,
    redoc_url="/redoc" if settings.debug else None,
    lifespan=lifespan
)

# Setup middleware
setup_middleware(app)
register_exception_handlers(app)

# Include routers
app.include_router(api_router)

# Root endpoint
@app.get("/")
async def root():
    return {
        "message": settings.app_name,
        "version": settings.version,
        "status": "running",
        "docs": "/docs" if settings.debug else "Disabled in production",
        "api": "/api/v1"
    }

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug
    )
