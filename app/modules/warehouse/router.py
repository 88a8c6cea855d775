# app/modules/warehouse/router.py
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.config.database import get_db
from .service import WarehouseService
from .schemas import (
    WarehouseOperatorCreate, WarehouseOperatorResponse,
    WarehouseCreate, WarehouseResponse,
    SectionCreate, SectionResponse
)

router = APIRouter(prefix="/warehouses", tags=["Warehouse - Almacenes"])


@router.post("/operators", response_model=WarehouseOperatorResponse, status_code=status.HTTP_201_CREATED)
async def create_operator(
    operator_data: WarehouseOperatorCreate,
    db: Session = Depends(get_db)
):
    service = WarehouseService(db)
    return service.create_operator(operator_data)


@router.post("", response_model=WarehouseResponse, status_code=status.HTTP_201_CREATED)
async def create_warehouse(
    warehouse_data: WarehouseCreate,
    db: Session = Depends(get_db)
):
    """
    Crear almacén
    
    El operador indicado es el único que puede registrar órdenes en él.
    """
    service = WarehouseService(db)
    return service.create_warehouse(warehouse_data)


@router.get("/sections/{section_id}", response_model=SectionResponse)
async def get_section(
    section_id: int,
    db: Session = Depends(get_db)
):
    """Sección con su volumen ocupado y disponible"""
    service = WarehouseService(db)
    return service.get_section(section_id)


@router.get("/{warehouse_id}", response_model=WarehouseResponse)
async def get_warehouse(
    warehouse_id: int,
    db: Session = Depends(get_db)
):
    service = WarehouseService(db)
    return service.get_warehouse(warehouse_id)


@router.post("/{warehouse_id}/sections", response_model=SectionResponse, status_code=status.HTTP_201_CREATED)
async def create_section(
    warehouse_id: int,
    section_data: SectionCreate,
    db: Session = Depends(get_db)
):
    service = WarehouseService(db)
    return service.create_section(warehouse_id, section_data)
