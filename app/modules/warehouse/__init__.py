"""
Módulo Warehouse - Topología del almacén

- Operadores de almacén
- Almacenes y su operador a cargo
- Secciones con capacidad en volumen y categoría de almacenamiento

Arquitectura:
- router.py: Endpoints FastAPI
- service.py: Lógica de negocio
- repository.py: Acceso a datos
- schemas.py: Modelos Pydantic de request/response
"""

from .router import router as warehouse_router
from .service import WarehouseService
from .repository import WarehouseRepository

__all__ = [
    "warehouse_router",
    "WarehouseService", 
    "WarehouseRepository"
]
