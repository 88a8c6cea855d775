# app/modules/inbound/service.py
import logging
from datetime import date
from typing import List
from sqlalchemy.orm import Session

from app.core.exceptions import NotFoundException, BusinessRuleException
from app.modules.catalog.repository import CatalogRepository
from app.modules.warehouse.repository import WarehouseRepository
from app.shared.database.models import (
    InboundOrder, Warehouse, WarehouseOperator, Section, Product, Seller
)
from . import rules
from .repository import InboundRepository
from .schemas import InboundOrderCreate, ItemBatchRequest, ItemBatchResponse, InboundOrderResponse

logger = logging.getLogger(__name__)


class InboundOrderService:
    """
    Servicio de órdenes de entrada.
    
    Valida y persiste los lotes que se almacenan en una sección. Cualquier
    regla incumplida aborta la orden completa, no solo el lote afectado.
    """
    
    def __init__(self, db: Session):
        self.db = db
        self.repository = InboundRepository(db)
        self.warehouse_repository = WarehouseRepository(db)
        self.catalog_repository = CatalogRepository(db)
    
    def create_inbound_order(self, order_data: InboundOrderCreate) -> List[ItemBatchResponse]:
        """
        Almacenar los lotes de la orden en la sección indicada.
        
        Validaciones, en orden:
        - el operador pertenece al almacén
        - la sección pertenece al almacén
        - la categoría de cada producto coincide con la de la sección
        - el volumen total cabe en la capacidad disponible
        - el vendedor de cada producto está activo
        """
        warehouse = self._find_warehouse(order_data.warehouse_id)
        section = self._find_section(order_data.section_id)
        operator = self._find_operator(order_data.warehouse_operator_id)
        products = [self._find_product(batch.product_id) for batch in order_data.item_batches]
        
        self._validate_creation(order_data.item_batches, warehouse, operator, section, products)
        
        inbound_order = self.repository.create_inbound_order(
            {
                "order_date": date.today(),
                "warehouse_id": warehouse.id,
                "section_id": section.id,
                "warehouse_operator_id": operator.id
            },
            [batch.model_dump() for batch in order_data.item_batches]
        )
        logger.info(
            f"Orden de entrada {inbound_order.id} creada en sección {section.id} "
            f"con {len(inbound_order.item_batches)} lotes"
        )
        
        return [ItemBatchResponse.model_validate(batch) for batch in inbound_order.item_batches]
    
    def update_item_batches(
        self,
        inbound_order_id: int,
        batches: List[ItemBatchRequest]
    ) -> List[ItemBatchResponse]:
        """
        Reemplazar todos los lotes de una orden de entrada.
        
        Solo se revalidan categoría y capacidad: almacén, operador y sección
        quedaron fijados al crear la orden.
        """
        inbound_order = self.repository.get_inbound_order_by_id(inbound_order_id)
        if not inbound_order:
            raise NotFoundException("Orden de entrada no encontrada.")
        
        products = [self._find_product(batch.product_id) for batch in batches]
        section = self._find_section(inbound_order.section_id)
        
        self._validate_update(batches, inbound_order, section, products)
        
        inbound_order = self.repository.replace_item_batches(
            inbound_order,
            [batch.model_dump() for batch in batches]
        )
        logger.info(f"Lotes de la orden de entrada {inbound_order_id} reemplazados ({len(batches)} lotes)")
        
        return [ItemBatchResponse.model_validate(batch) for batch in inbound_order.item_batches]
    
    def get_inbound_order(self, inbound_order_id: int) -> InboundOrderResponse:
        inbound_order = self.repository.get_inbound_order_by_id(inbound_order_id)
        if not inbound_order:
            raise NotFoundException("Orden de entrada no encontrada.")
        return InboundOrderResponse.model_validate(inbound_order)
    
    # ==================== VALIDACIONES ====================
    
    def _validate_creation(
        self,
        batches: List[ItemBatchRequest],
        warehouse: Warehouse,
        operator: WarehouseOperator,
        section: Section,
        products: List[Product]
    ):
        volume_to_store = sum(batch.volume for batch in batches)
        
        if not rules.operator_belongs_to_warehouse(warehouse, operator):
            self._reject("Este operador no forma parte del almacén.")
        
        if not rules.section_belongs_to_warehouse(section, warehouse):
            self._reject("Esta sección no forma parte del almacén.")
        
        self._verify_categories(products, section)
        self._verify_capacity(section, volume_to_store, self.warehouse_repository.get_used_volume(section.id))
        
        if not rules.sellers_active(self._find_sellers(products)):
            self._reject("Vendedor inactivo.")
    
    def _validate_update(
        self,
        batches: List[ItemBatchRequest],
        inbound_order: InboundOrder,
        section: Section,
        products: List[Product]
    ):
        volume_to_store = sum(batch.volume for batch in batches)
        
        self._verify_categories(products, section)
        # Los lotes actuales de la orden se reemplazan, no cuentan como ocupados
        used_volume = self.warehouse_repository.get_used_volume(
            section.id, exclude_inbound_order_id=inbound_order.id
        )
        self._verify_capacity(section, volume_to_store, used_volume)
        
        if self.repository.has_outbound_picks(inbound_order.id):
            self._reject("Los lotes de esta orden ya tienen salidas registradas.")
    
    def _verify_categories(self, products: List[Product], section: Section):
        if not rules.categories_match_section(products, section):
            self._reject("La categoría del producto no es compatible con la sección.")
    
    def _verify_capacity(self, section: Section, volume_to_store: int, used_volume: int):
        if not rules.fits_in_section(section, used_volume, volume_to_store):
            self._reject(
                f"El volumen del lote es mayor que la capacidad disponible. "
                f"Disponible: {section.volume - used_volume}, Solicitado: {volume_to_store}"
            )
    
    def _reject(self, message: str):
        logger.warning(f"Orden de entrada rechazada: {message}")
        raise BusinessRuleException(message)
    
    # ==================== HELPERS ====================
    
    def _find_warehouse(self, warehouse_id: int) -> Warehouse:
        warehouse = self.warehouse_repository.get_warehouse_by_id(warehouse_id)
        if not warehouse:
            raise NotFoundException("Almacén no encontrado.")
        return warehouse
    
    def _find_section(self, section_id: int) -> Section:
        section = self.warehouse_repository.get_section_by_id(section_id, for_update=True)
        if not section:
            raise NotFoundException("Sección no encontrada.")
        return section
    
    def _find_operator(self, operator_id: int) -> WarehouseOperator:
        operator = self.warehouse_repository.get_operator_by_id(operator_id)
        if not operator:
            raise NotFoundException("Operador no encontrado.")
        return operator
    
    def _find_product(self, product_id: int) -> Product:
        product = self.catalog_repository.get_product_by_id(product_id)
        if not product:
            raise NotFoundException("Producto no encontrado.")
        return product
    
    def _find_sellers(self, products: List[Product]) -> List[Seller]:
        sellers = []
        for product in products:
            seller = self.catalog_repository.get_seller_by_product_id(product.id)
            if not seller:
                raise NotFoundException("Vendedor no encontrado.")
            sellers.append(seller)
        return sellers
