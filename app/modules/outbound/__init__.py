"""
Módulo Outbound - Órdenes de salida

Retiro de productos eligiendo un único lote por línea según vencimiento
y cantidad disponible.

Arquitectura:
- router.py: Endpoints FastAPI
- service.py: Lógica de negocio
- repository.py: Acceso a datos y consulta de selección de lote
- schemas.py: Modelos Pydantic de request/response
"""

from .router import router as outbound_router
from .service import OutboundOrderService
from .repository import OutboundRepository

__all__ = [
    "outbound_router",
    "OutboundOrderService",
    "OutboundRepository"
]
