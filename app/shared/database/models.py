import enum

from sqlalchemy import Column, Integer, String, Boolean, Date, DateTime, ForeignKey, Numeric, Enum
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.config.database import Base

class TimestampMixin:
    """Mixin para timestamps automáticos"""
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)


class StorageCategory(str, enum.Enum):
    """Tipo de almacenamiento de productos y secciones"""
    FRESCO = "FRESCO"
    SECO = "SECO"
    REFRIGERADO = "REFRIGERADO"
    CONGELADO = "CONGELADO"

# ===== CATÁLOGO =====

class Seller(Base, TimestampMixin):
    """Vendedor dueño de productos"""
    __tablename__ = "sellers"
    
    id = Column(Integer, primary_key=True, index=True)
    first_name = Column(String(255), nullable=False)
    last_name = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, nullable=False)
    address = Column(String(255), nullable=False)
    house_number = Column(Integer, nullable=False)
    zip_code = Column(String(8), nullable=False)
    active = Column(Boolean, default=True, nullable=False)

class Product(Base, TimestampMixin):
    """Producto publicado por un vendedor"""
    __tablename__ = "products"
    
    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    price = Column(Numeric(10, 2), nullable=False)
    category = Column(Enum(StorageCategory), nullable=False, index=True)
    seller_id = Column(Integer, ForeignKey("sellers.id"), nullable=False, index=True)

# ===== TOPOLOGÍA DEL ALMACÉN =====

class WarehouseOperator(Base):
    """Representante/operador de almacén"""
    __tablename__ = "warehouse_operators"
    
    id = Column(Integer, primary_key=True, index=True)
    first_name = Column(String(255), nullable=False)
    last_name = Column(String(255), nullable=False)
    created_at = Column(DateTime, server_default=func.current_timestamp())

class Warehouse(Base):
    """Almacén con un operador a cargo"""
    __tablename__ = "warehouses"
    
    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    warehouse_operator_id = Column(Integer, ForeignKey("warehouse_operators.id"), nullable=False)
    created_at = Column(DateTime, server_default=func.current_timestamp())

class Section(Base):
    """Sector del almacén con capacidad en volumen y categoría"""
    __tablename__ = "sections"
    
    id = Column(Integer, primary_key=True, index=True)
    warehouse_id = Column(Integer, ForeignKey("warehouses.id"), nullable=False, index=True)
    category = Column(Enum(StorageCategory), nullable=False)
    volume = Column(Integer, nullable=False)

# ===== ÓRDENES DE ENTRADA =====

class InboundOrder(Base):
    """Orden de entrada de lotes a una sección"""
    __tablename__ = "inbound_orders"
    
    id = Column(Integer, primary_key=True, index=True)
    order_date = Column(Date, nullable=False)
    warehouse_id = Column(Integer, ForeignKey("warehouses.id"), nullable=False)
    section_id = Column(Integer, ForeignKey("sections.id"), nullable=False, index=True)
    warehouse_operator_id = Column(Integer, ForeignKey("warehouse_operators.id"), nullable=False)
    
    # Relationships
    section = relationship("Section")
    item_batches = relationship(
        "ItemBatch",
        back_populates="inbound_order",
        cascade="all, delete-orphan",
        order_by="ItemBatch.id"
    )

class ItemBatch(Base):
    """Lote de un producto almacenado"""
    __tablename__ = "item_batches"
    
    id = Column(Integer, primary_key=True, index=True)
    inbound_order_id = Column(Integer, ForeignKey("inbound_orders.id"), nullable=False, index=True)
    product_id = Column(Integer, ForeignKey("products.id"), nullable=False, index=True)
    product_quantity = Column(Integer, nullable=False)
    volume = Column(Integer, nullable=False)
    due_date = Column(Date, nullable=False, index=True)
    manufacturing_date = Column(Date)
    
    # Relationships
    inbound_order = relationship("InboundOrder", back_populates="item_batches")

# ===== ÓRDENES DE SALIDA =====

class OutboundOrder(Base):
    """Orden de salida que retira cantidades de lotes existentes"""
    __tablename__ = "outbound_orders"
    
    id = Column(Integer, primary_key=True, index=True)
    order_date = Column(Date, nullable=False)
    warehouse_id = Column(Integer, ForeignKey("warehouses.id"), nullable=False)
    warehouse_operator_id = Column(Integer, ForeignKey("warehouse_operators.id"), nullable=False)
    
    # Relationships
    item_batches = relationship(
        "OutboundItemBatch",
        back_populates="outbound_order",
        cascade="all, delete-orphan",
        order_by="OutboundItemBatch.id"
    )

class OutboundItemBatch(Base):
    """Cantidad retirada de un lote por una orden de salida"""
    __tablename__ = "outbound_item_batches"
    
    id = Column(Integer, primary_key=True, index=True)
    outbound_order_id = Column(Integer, ForeignKey("outbound_orders.id"), nullable=False, index=True)
    item_batch_id = Column(Integer, ForeignKey("item_batches.id"), nullable=False)
    product_id = Column(Integer, ForeignKey("products.id"), nullable=False)
    quantity = Column(Integer, nullable=False)
    
    # Relationships
    outbound_order = relationship("OutboundOrder", back_populates="item_batches")
    item_batch = relationship("ItemBatch")
