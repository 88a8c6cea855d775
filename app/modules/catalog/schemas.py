# app/modules/catalog/schemas.py
import re
from pydantic import BaseModel, Field, ConfigDict, field_validator
from typing import List
from datetime import date
from decimal import Decimal
from enum import Enum

from app.shared.database.models import StorageCategory

# ==================== ENUMS ====================

class BatchOrder(str, Enum):
    """Orden de los lotes en la ubicación de un producto"""
    LOTE = "L"
    CANTIDAD = "Q"
    VENCIMIENTO = "V"

class PriceOrder(str, Enum):
    """Orden por precio de los productos de un vendedor"""
    ASC = "asc"
    DESC = "desc"

# ==================== CLASE BASE PARA RESPUESTAS ====================

class CatalogBaseModel(BaseModel):
    model_config = ConfigDict(from_attributes=True)

# ==================== VENDEDORES ====================

class SellerCreate(BaseModel):
    """Alta de vendedor"""
    first_name: str = Field(..., pattern=r"^[a-zA-Z\s]*$", description="Nombre")
    last_name: str = Field(..., pattern=r"^[a-zA-Z\s]*$", description="Apellido")
    email: str = Field(..., description="Email del vendedor")
    address: str = Field(..., pattern=r"^[a-zA-Z0-9\s]*$", description="Dirección")
    house_number: int = Field(..., description="Número de casa")
    zip_code: str = Field(..., min_length=8, max_length=8, pattern=r"^[0-9]*$", description="Código postal")
    
    @field_validator('email')
    @classmethod
    def validate_email(cls, v: str):
        if not re.match(r"^[^\s@]+@[a-z]+\.com(\.br)?$", v):
            raise ValueError('El email debe ser un email válido')
        return v

class SellerStatusUpdate(BaseModel):
    active: bool = Field(..., description="True para activar, False para desactivar")

class SellerResponse(CatalogBaseModel):
    id: int
    first_name: str
    last_name: str
    email: str
    address: str
    house_number: int
    zip_code: str
    active: bool

# ==================== PRODUCTOS ====================

class ProductCreate(BaseModel):
    """Alta de producto de un vendedor"""
    seller_id: int = Field(..., gt=0, description="ID del vendedor")
    name: str = Field(..., min_length=1, max_length=255, description="Nombre del producto")
    price: Decimal = Field(..., gt=0, description="Precio unitario")
    category: StorageCategory = Field(..., description="Tipo de almacenamiento")

class ProductResponse(CatalogBaseModel):
    id: int
    seller_id: int
    name: str
    price: Decimal
    category: StorageCategory

# ==================== UBICACIÓN DE PRODUCTO ====================

class SectionLocation(BaseModel):
    section_id: int
    warehouse_id: int

class BatchLocation(BaseModel):
    batch_id: int
    product_quantity: int
    due_date: date

class ProductLocationResponse(BaseModel):
    """Sección y lotes donde está almacenado un producto"""
    section: SectionLocation
    product_id: int
    batch_stock: List[BatchLocation]
