# app/modules/catalog/router.py
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from typing import Optional

from app.config.database import get_db
from app.shared.database.models import StorageCategory
from app.shared.schemas.pagination import PageableResponse
from .service import CatalogService
from .schemas import (
    SellerCreate, SellerStatusUpdate, SellerResponse,
    ProductCreate, ProductResponse, ProductLocationResponse, PriceOrder
)

router = APIRouter(tags=["Catalog - Vendedores y Productos"])

# ==================== VENDEDORES ====================

@router.post("/sellers", response_model=SellerResponse, status_code=status.HTTP_201_CREATED)
async def create_seller(
    seller_data: SellerCreate,
    db: Session = Depends(get_db)
):
    """
    Registrar un vendedor
    
    **Validaciones:**
    - Nombre, apellido y dirección sin caracteres especiales
    - Email con dominio .com o .com.br
    - Código postal de 8 dígitos
    """
    service = CatalogService(db)
    return service.create_seller(seller_data)


@router.get("/sellers/{seller_id}", response_model=SellerResponse)
async def get_seller(
    seller_id: int,
    db: Session = Depends(get_db)
):
    service = CatalogService(db)
    return service.get_seller(seller_id)


@router.patch("/sellers/{seller_id}/active", response_model=SellerResponse)
async def update_seller_status(
    seller_id: int,
    status_update: SellerStatusUpdate,
    db: Session = Depends(get_db)
):
    """
    Activar o desactivar un vendedor
    
    Los productos de un vendedor inactivo no pueden entrar al almacén.
    """
    service = CatalogService(db)
    return service.update_seller_status(seller_id, status_update.active)


@router.get("/sellers/{seller_id}/products", response_model=PageableResponse)
async def list_seller_products(
    seller_id: int,
    order: PriceOrder = Query(PriceOrder.ASC, description="Orden por precio: asc o desc"),
    page: int = Query(0, ge=0),
    size: Optional[int] = Query(None, ge=1),
    db: Session = Depends(get_db)
):
    """Productos de un vendedor ordenados por precio"""
    service = CatalogService(db)
    return service.list_seller_products(seller_id, order, page, size)

# ==================== PRODUCTOS ====================

@router.post("/products", response_model=ProductResponse, status_code=status.HTTP_201_CREATED)
async def create_product(
    product_data: ProductCreate,
    db: Session = Depends(get_db)
):
    service = CatalogService(db)
    return service.create_product(product_data)


@router.get("/products", response_model=PageableResponse)
async def list_products(
    page: int = Query(0, ge=0),
    size: Optional[int] = Query(None, ge=1),
    category: Optional[StorageCategory] = Query(None, description="Filtrar por categoría"),
    db: Session = Depends(get_db)
):
    """Listado paginado de productos"""
    service = CatalogService(db)
    return service.list_products(page, size, category)


@router.get("/products/{product_id}", response_model=ProductResponse)
async def get_product(
    product_id: int,
    db: Session = Depends(get_db)
):
    service = CatalogService(db)
    return service.get_product(product_id)


@router.get("/products/{product_id}/warehouse", response_model=ProductLocationResponse)
async def get_product_location(
    product_id: int,
    order: Optional[str] = Query(None, description="L = lote, Q = cantidad, V = vencimiento; otro valor, sin orden"),
    db: Session = Depends(get_db)
):
    """
    Ubicación de un producto en el almacén
    
    **Retorna:** sección y almacén, más todos los lotes del producto
    """
    service = CatalogService(db)
    return service.get_product_location(product_id, order)
