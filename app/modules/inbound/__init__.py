"""
Módulo Inbound - Órdenes de entrada

Ingreso de lotes a secciones del almacén, con validación de operador,
sección, categoría, capacidad y estado del vendedor.

Arquitectura:
- router.py: Endpoints FastAPI
- service.py: Lógica de negocio
- rules.py: Reglas puras de validación
- repository.py: Acceso a datos
- schemas.py: Modelos Pydantic de request/response
"""

from .router import router as inbound_router
from .service import InboundOrderService
from .repository import InboundRepository

__all__ = [
    "inbound_router",
    "InboundOrderService",
    "InboundRepository"
]
