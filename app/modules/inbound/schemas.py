# app/modules/inbound/schemas.py
from pydantic import BaseModel, Field, ConfigDict, field_validator, ValidationInfo
from typing import List, Optional
from datetime import date

# ==================== REQUEST SCHEMAS ====================

class ItemBatchRequest(BaseModel):
    """Lote a almacenar"""
    product_id: int = Field(..., gt=0, description="ID del producto")
    product_quantity: int = Field(..., gt=0, description="Cantidad de unidades del lote")
    volume: int = Field(..., gt=0, description="Volumen que ocupa el lote")
    manufacturing_date: Optional[date] = Field(None, description="Fecha de fabricación")
    due_date: date = Field(..., description="Fecha de vencimiento")
    
    @field_validator('due_date')
    @classmethod
    def validate_due_date(cls, v: date, info: ValidationInfo):
        manufacturing_date = info.data.get('manufacturing_date')
        if manufacturing_date and v <= manufacturing_date:
            raise ValueError('La fecha de vencimiento debe ser posterior a la de fabricación')
        return v

class InboundOrderCreate(BaseModel):
    """Orden de entrada de lotes a una sección"""
    warehouse_id: int = Field(..., gt=0, description="ID del almacén")
    section_id: int = Field(..., gt=0, description="ID de la sección destino")
    warehouse_operator_id: int = Field(..., gt=0, description="ID del operador que registra")
    item_batches: List[ItemBatchRequest] = Field(..., min_length=1, description="Lotes a almacenar")

# ==================== RESPONSE SCHEMAS ====================

class ItemBatchResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    
    id: int
    inbound_order_id: int
    product_id: int
    product_quantity: int
    volume: int
    manufacturing_date: Optional[date] = None
    due_date: date

class InboundOrderResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    
    id: int
    order_date: date
    warehouse_id: int
    section_id: int
    warehouse_operator_id: int
    item_batches: List[ItemBatchResponse]
