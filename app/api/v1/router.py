# app/api/v1/router.py
from fastapi import APIRouter

from app.config.settings import settings
from app.modules.catalog import catalog_router
from app.modules.warehouse import warehouse_router
from app.modules.inbound import inbound_router
from app.modules.outbound import outbound_router


# Crear router principal de la API v1
api_router = APIRouter(prefix="/api/v1")

# ==================== MÓDULOS ====================

api_router.include_router(catalog_router)
api_router.include_router(warehouse_router)
api_router.include_router(inbound_router)
api_router.include_router(outbound_router)

# ==================== ENDPOINTS RAÍZ ====================

@api_router.get("/")
async def api_root():
    """Root endpoint de la API"""
    return {
        "message": f"{settings.app_name} v1",
        "version": settings.version,
        "status": "active",
        "available_endpoints": {
            "sellers": "/api/v1/sellers",
            "products": "/api/v1/products",
            "warehouses": "/api/v1/warehouses",
            "inbound_orders": "/api/v1/inboundorder",
            "outbound_orders": "/api/v1/outboundorder"
        }
    }

@api_router.get("/health")
async def health_check():
    return {
        "status": "healthy",
        "service": settings.app_name,
        "version": settings.version
    }
