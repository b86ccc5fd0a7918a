"""Product and product option models."""
from sqlalchemy import Column, String, Boolean, DateTime, Enum, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from commerce.database import Base, BigIntId
import enum


class DisplayStatus(enum.Enum):
    """Catalog display status."""
    DISPLAY = "DISPLAY"
    OUT_OF_STOCK = "OUT_OF_STOCK"
    HIDDEN = "HIDDEN"


class Product(Base):
    """Product (catalog entry grouping one or more sellable items)."""

    __tablename__ = 'product'

    id = Column(BigIntId, primary_key=True, autoincrement=True)
    name = Column(String(200), nullable=False)
    description = Column(String(1000), nullable=True)
    status = Column(Enum(DisplayStatus, name='display_status'), nullable=False, default=DisplayStatus.DISPLAY)
    activated = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    # Relationships
    items = relationship('Item', back_populates='product')
    options = relationship('ProductOption', back_populates='product', cascade='all, delete-orphan')

    def __repr__(self):
        return f"<Product(id={self.id}, name='{self.name}', status={self.status.value if self.status else None})>"


class ProductOption(Base):
    """Selectable option shown on the product detail page."""

    __tablename__ = 'product_option'

    id = Column(BigIntId, primary_key=True, autoincrement=True)
    product_id = Column(BigIntId, ForeignKey('product.id'), nullable=False, index=True)
    name = Column(String(100), nullable=False)
    value = Column(String(100), nullable=True)
    activated = Column(Boolean, nullable=False, default=True)

    product = relationship('Product', back_populates='options')

    def __repr__(self):
        return f"<ProductOption(id={self.id}, product_id={self.product_id}, name='{self.name}')>"
