"""Item model - the stock keeping unit the inventory ledger operates on."""
from sqlalchemy import Column, Integer, Boolean, Numeric, DateTime, ForeignKey, CheckConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from commerce.database import Base, BigIntId


class Item(Base):
    """
    Item (sellable unit of a product).

    stock_quantity is only mutated through commerce.services.inventory_service.
    """

    __tablename__ = 'item'
    __table_args__ = (
        CheckConstraint('stock_quantity >= 0', name='ck_item_stock_non_negative'),
    )

    id = Column(BigIntId, primary_key=True, autoincrement=True)
    product_id = Column(BigIntId, ForeignKey('product.id'), nullable=False, index=True)
    stock_quantity = Column(Integer, nullable=False, default=0)
    sale_price = Column(Numeric(10, 2), nullable=False)
    supply_price = Column(Numeric(10, 2), nullable=False, default=0)
    activated = Column(Boolean, nullable=False, default=True)
    updated_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())

    # Relationships
    product = relationship('Product', back_populates='items')

    def __repr__(self):
        return f"<Item(id={self.id}, product_id={self.product_id}, stock_quantity={self.stock_quantity})>"
