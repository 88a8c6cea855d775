# app/modules/warehouse/schemas.py
from pydantic import BaseModel, Field, ConfigDict

from app.shared.database.models import StorageCategory

class WarehouseBaseModel(BaseModel):
    model_config = ConfigDict(from_attributes=True)

# ==================== OPERADORES ====================

class WarehouseOperatorCreate(BaseModel):
    """Alta de operador de almacén"""
    first_name: str = Field(..., min_length=1, max_length=255, pattern=r"^[a-zA-Z\s]*$")
    last_name: str = Field(..., min_length=1, max_length=255, pattern=r"^[a-zA-Z\s]*$")

class WarehouseOperatorResponse(WarehouseBaseModel):
    id: int
    first_name: str
    last_name: str

# ==================== ALMACENES ====================

class WarehouseCreate(BaseModel):
    """Alta de almacén con su operador a cargo"""
    name: str = Field(..., min_length=1, max_length=255, description="Nombre del almacén")
    warehouse_operator_id: int = Field(..., gt=0, description="Operador a cargo")

class WarehouseResponse(WarehouseBaseModel):
    id: int
    name: str
    warehouse_operator_id: int

# ==================== SECCIONES ====================

class SectionCreate(BaseModel):
    """Alta de sección dentro de un almacén"""
    category: StorageCategory = Field(..., description="Tipo de almacenamiento de la sección")
    volume: int = Field(..., gt=0, description="Capacidad total en volumen")

class SectionResponse(BaseModel):
    id: int
    warehouse_id: int
    category: StorageCategory
    volume: int
    used_volume: int
    available_volume: int
