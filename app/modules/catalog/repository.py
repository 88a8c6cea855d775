# app/modules/catalog/repository.py
from typing import List, Optional, Tuple
from sqlalchemy.orm import Session
from sqlalchemy import asc, desc
from sqlalchemy.exc import SQLAlchemyError

from app.shared.database.models import Seller, Product, ItemBatch, StorageCategory
from .schemas import BatchOrder, PriceOrder

class CatalogRepository:
    """
    Repositorio de vendedores, productos y sus lotes
    """
    
    def __init__(self, db: Session):
        self.db = db
    
    # ==================== VENDEDORES ====================
    
    def create_seller(self, seller_data: dict) -> Seller:
        """Crear vendedor"""
        try:
            seller = Seller(**seller_data, active=True)
            self.db.add(seller)
            self.db.commit()
            self.db.refresh(seller)
            return seller
        except SQLAlchemyError as e:
            self.db.rollback()
            raise e
    
    def get_seller_by_id(self, seller_id: int) -> Optional[Seller]:
        return self.db.query(Seller).filter(Seller.id == seller_id).first()
    
    def get_seller_by_email(self, email: str) -> Optional[Seller]:
        return self.db.query(Seller).filter(Seller.email == email).first()
    
    def update_seller_active(self, seller: Seller, active: bool) -> Seller:
        try:
            seller.active = active
            self.db.commit()
            self.db.refresh(seller)
            return seller
        except SQLAlchemyError as e:
            self.db.rollback()
            raise e
    
    def get_seller_by_product_id(self, product_id: int) -> Optional[Seller]:
        """Vendedor dueño del producto (consulta aparte, Product no lo carga)"""
        return self.db.query(Seller)\
            .join(Product, Product.seller_id == Seller.id)\
            .filter(Product.id == product_id)\
            .first()
    
    # ==================== PRODUCTOS ====================
    
    def create_product(self, product_data: dict) -> Product:
        """Crear producto"""
        try:
            product = Product(**product_data)
            self.db.add(product)
            self.db.commit()
            self.db.refresh(product)
            return product
        except SQLAlchemyError as e:
            self.db.rollback()
            raise e
    
    def get_product_by_id(self, product_id: int) -> Optional[Product]:
        return self.db.query(Product).filter(Product.id == product_id).first()
    
    def get_products_page(
        self,
        page: int,
        size: int,
        category: Optional[StorageCategory] = None
    ) -> Tuple[List[Product], int]:
        """Página de productos, opcionalmente filtrada por categoría"""
        query = self.db.query(Product)
        if category is not None:
            query = query.filter(Product.category == category)
        
        total = query.count()
        products = query.order_by(asc(Product.id))\
            .offset(page * size)\
            .limit(size)\
            .all()
        return products, total

    def get_products_by_seller(
        self,
        seller_id: int,
        page: int,
        size: int,
        order: PriceOrder = PriceOrder.ASC
    ) -> Tuple[List[Product], int]:
        """Página de productos de un vendedor ordenados por precio"""
        query = self.db.query(Product).filter(Product.seller_id == seller_id)
        direction = desc if order == PriceOrder.DESC else asc

        total = query.count()
        products = query.order_by(direction(Product.price), asc(Product.id))\
            .offset(page * size)\
            .limit(size)\
            .all()
        return products, total

    # ==================== LOTES ====================
    
    def get_batches_by_product(self, product_id: int, order: Optional[str] = None) -> List[ItemBatch]:
        """
        Lotes de un producto.
        
        order: L = por lote, Q = por cantidad, V = por vencimiento.
        Cualquier otro valor devuelve los lotes sin orden.
        """
        query = self.db.query(ItemBatch).filter(ItemBatch.product_id == product_id)
        
        if order == BatchOrder.LOTE.value:
            query = query.order_by(asc(ItemBatch.id))
        elif order == BatchOrder.CANTIDAD.value:
            query = query.order_by(asc(ItemBatch.product_quantity), asc(ItemBatch.id))
        elif order == BatchOrder.VENCIMIENTO.value:
            query = query.order_by(asc(ItemBatch.due_date), asc(ItemBatch.id))
        
        return query.all()
