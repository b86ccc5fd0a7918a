"""Cart line model."""
from sqlalchemy import Column, Integer, Boolean, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from commerce.database import Base, BigIntId


class Cart(Base):
    """
    Cart line - one item and quantity in a member's cart.

    A line is consumed by at most one order; placing the order sets
    activated to False.
    """

    __tablename__ = 'cart'

    id = Column(BigIntId, primary_key=True, autoincrement=True)
    member_id = Column(BigIntId, ForeignKey('member.id'), nullable=False, index=True)
    product_id = Column(BigIntId, ForeignKey('product.id'), nullable=False)
    item_id = Column(BigIntId, ForeignKey('item.id'), nullable=False)
    item_used_quantity = Column(Integer, nullable=False)
    user_purchase_quantity = Column(Integer, nullable=False)
    activated = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    # Relationships
    member = relationship('Member', back_populates='carts')
    product = relationship('Product')
    item = relationship('Item')

    def __repr__(self):
        return f"<Cart(id={self.id}, member_id={self.member_id}, item_id={self.item_id}, activated={self.activated})>"
