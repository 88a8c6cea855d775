# app/modules/outbound/schemas.py
from pydantic import BaseModel, Field
from typing import List
from datetime import date

# ==================== REQUEST SCHEMAS ====================

class OutboundItemRequest(BaseModel):
    """Cantidad de un producto a retirar"""
    product_id: int = Field(..., gt=0, description="ID del producto")
    quantity: int = Field(..., gt=0, description="Cantidad a retirar")

class OutboundOrderCreate(BaseModel):
    """Orden de salida de productos de un almacén"""
    warehouse_id: int = Field(..., gt=0, description="ID del almacén")
    warehouse_operator_id: int = Field(..., gt=0, description="ID del operador que registra")
    items: List[OutboundItemRequest] = Field(..., min_length=1, description="Productos a retirar")

# ==================== RESPONSE SCHEMAS ====================

class OutboundItemBatchResponse(BaseModel):
    """Lote elegido para una línea de la orden de salida"""
    id: int
    outbound_order_id: int
    item_batch_id: int
    product_id: int
    quantity: int
    due_date: date
    remaining_quantity: int

class OutboundOrderResponse(BaseModel):
    id: int
    order_date: date
    warehouse_id: int
    warehouse_operator_id: int
    item_batches: List[OutboundItemBatchResponse]
