# app/modules/catalog/service.py
import logging
from typing import Optional
from sqlalchemy.orm import Session

from app.config.settings import settings
from app.core.exceptions import NotFoundException, BusinessRuleException
from app.shared.database.models import Seller, Product, StorageCategory
from app.shared.schemas.pagination import PageableResponse
from .repository import CatalogRepository
from .schemas import (
    SellerCreate, SellerResponse, ProductCreate, ProductResponse,
    ProductLocationResponse, SectionLocation, BatchLocation, PriceOrder
)

logger = logging.getLogger(__name__)


class CatalogService:
    """
    Servicio de vendedores y productos
    """
    
    def __init__(self, db: Session):
        self.db = db
        self.repository = CatalogRepository(db)
    
    # ==================== VENDEDORES ====================
    
    def create_seller(self, seller_data: SellerCreate) -> SellerResponse:
        if self.repository.get_seller_by_email(seller_data.email):
            raise BusinessRuleException("Ya existe un vendedor con este email.")
        
        seller = self.repository.create_seller(seller_data.model_dump())
        logger.info(f"Vendedor {seller.id} creado")
        return SellerResponse.model_validate(seller)
    
    def get_seller(self, seller_id: int) -> SellerResponse:
        return SellerResponse.model_validate(self._find_seller(seller_id))
    
    def update_seller_status(self, seller_id: int, active: bool) -> SellerResponse:
        seller = self._find_seller(seller_id)
        seller = self.repository.update_seller_active(seller, active)
        logger.info(f"Vendedor {seller_id} {'activado' if active else 'desactivado'}")
        return SellerResponse.model_validate(seller)
    
    # ==================== PRODUCTOS ====================
    
    def create_product(self, product_data: ProductCreate) -> ProductResponse:
        self._find_seller(product_data.seller_id)
        product = self.repository.create_product(product_data.model_dump())
        return ProductResponse.model_validate(product)
    
    def get_product(self, product_id: int) -> ProductResponse:
        return ProductResponse.model_validate(self._find_product(product_id))
    
    def list_products(
        self,
        page: int = 0,
        size: Optional[int] = None,
        category: Optional[StorageCategory] = None
    ) -> PageableResponse:
        """Listado paginado de productos"""
        size = self._page_size(size)
        products, total = self.repository.get_products_page(page, size, category)
        content = [ProductResponse.model_validate(p) for p in products]
        return PageableResponse.from_page(content, page, size, total)

    def list_seller_products(
        self,
        seller_id: int,
        order: PriceOrder = PriceOrder.ASC,
        page: int = 0,
        size: Optional[int] = None
    ) -> PageableResponse:
        """Productos de un vendedor ordenados por precio"""
        self._find_seller(seller_id)
        size = self._page_size(size)
        products, total = self.repository.get_products_by_seller(seller_id, page, size, order)
        content = [ProductResponse.model_validate(p) for p in products]
        return PageableResponse.from_page(content, page, size, total)

    def get_product_location(
        self,
        product_id: int,
        order: Optional[str] = None
    ) -> ProductLocationResponse:
        """
        Sección y lotes de un producto.
        
        La sección informada es la del primer lote según el orden pedido.
        """
        self._find_product(product_id, "Producto con ese id no registrado.")
        
        batches = self.repository.get_batches_by_product(product_id, order)
        if not batches:
            raise NotFoundException("Lotes para este producto no encontrados.")
        
        inbound_order = batches[0].inbound_order
        return ProductLocationResponse(
            section=SectionLocation(
                section_id=inbound_order.section_id,
                warehouse_id=inbound_order.warehouse_id
            ),
            product_id=product_id,
            batch_stock=[
                BatchLocation(
                    batch_id=batch.id,
                    product_quantity=batch.product_quantity,
                    due_date=batch.due_date
                )
                for batch in batches
            ]
        )
    
    # ==================== HELPERS ====================

    def _page_size(self, size: Optional[int]) -> int:
        return min(size or settings.default_page_size, settings.max_page_size)

    def _find_seller(self, seller_id: int) -> Seller:
        seller = self.repository.get_seller_by_id(seller_id)
        if not seller:
            raise NotFoundException("Vendedor no encontrado.")
        return seller
    
    def _find_product(self, product_id: int, message: str = "Producto no encontrado.") -> Product:
        product = self.repository.get_product_by_id(product_id)
        if not product:
            raise NotFoundException(message)
        return product
