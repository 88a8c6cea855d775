# app/modules/warehouse/service.py
import logging
from sqlalchemy.orm import Session

from app.core.exceptions import NotFoundException
from app.shared.database.models import Warehouse, Section
from .repository import WarehouseRepository
from .schemas import (
    WarehouseOperatorCreate, WarehouseOperatorResponse,
    WarehouseCreate, WarehouseResponse,
    SectionCreate, SectionResponse
)

logger = logging.getLogger(__name__)


class WarehouseService:
    """
    Servicio de la topología del almacén: operadores, almacenes y secciones
    """
    
    def __init__(self, db: Session):
        self.db = db
        self.repository = WarehouseRepository(db)
    
    def create_operator(self, operator_data: WarehouseOperatorCreate) -> WarehouseOperatorResponse:
        operator = self.repository.create_operator(operator_data.model_dump())
        return WarehouseOperatorResponse.model_validate(operator)
    
    def create_warehouse(self, warehouse_data: WarehouseCreate) -> WarehouseResponse:
        if not self.repository.get_operator_by_id(warehouse_data.warehouse_operator_id):
            raise NotFoundException("Operador no encontrado.")
        
        warehouse = self.repository.create_warehouse(warehouse_data.model_dump())
        logger.info(f"Almacén {warehouse.id} creado con operador {warehouse.warehouse_operator_id}")
        return WarehouseResponse.model_validate(warehouse)
    
    def get_warehouse(self, warehouse_id: int) -> WarehouseResponse:
        return WarehouseResponse.model_validate(self._find_warehouse(warehouse_id))
    
    def create_section(self, warehouse_id: int, section_data: SectionCreate) -> SectionResponse:
        self._find_warehouse(warehouse_id)
        section = self.repository.create_section({
            "warehouse_id": warehouse_id,
            **section_data.model_dump()
        })
        return self._build_section_response(section)
    
    def get_section(self, section_id: int) -> SectionResponse:
        section = self.repository.get_section_by_id(section_id)
        if not section:
            raise NotFoundException("Sección no encontrada.")
        return self._build_section_response(section)
    
    def _find_warehouse(self, warehouse_id: int) -> Warehouse:
        warehouse = self.repository.get_warehouse_by_id(warehouse_id)
        if not warehouse:
            raise NotFoundException("Almacén no encontrado.")
        return warehouse
    
    def _build_section_response(self, section: Section) -> SectionResponse:
        used = self.repository.get_used_volume(section.id)
        return SectionResponse(
            id=section.id,
            warehouse_id=section.warehouse_id,
            category=section.category,
            volume=section.volume,
            used_volume=used,
            available_volume=section.volume - used
        )
