"""Order line model."""
from sqlalchemy import Column, Integer, Boolean, Numeric, ForeignKey
from sqlalchemy.orm import relationship
from commerce.database import Base, BigIntId


class OrderItem(Base):
    """Order line - snapshot of a cart line's item, prices and quantities."""

    __tablename__ = 'order_item'

    id = Column(BigIntId, primary_key=True, autoincrement=True)
    order_id = Column(BigIntId, ForeignKey('orders.id', ondelete='CASCADE'), nullable=False, index=True)
    item_id = Column(BigIntId, ForeignKey('item.id'), nullable=False)
    price = Column(Numeric(10, 2), nullable=False)
    supply_price = Column(Numeric(10, 2), nullable=False)
    user_purchase_quantity = Column(Integer, nullable=False)
    item_used_quantity = Column(Integer, nullable=False)
    # Cleared once the line's stock has been restored by a cancellation
    activated = Column(Boolean, nullable=False, default=True)

    # Relationships
    order = relationship('Order', back_populates='lines')
    item = relationship('Item')

    @classmethod
    def from_cart(cls, order_id, cart):
        """Snapshot a resolved cart line for the given order."""
        return cls(
            order_id=order_id,
            item_id=cart.item.id,
            price=cart.item.sale_price,
            supply_price=cart.item.supply_price,
            user_purchase_quantity=cart.user_purchase_quantity,
            item_used_quantity=cart.item_used_quantity,
            activated=True
        )

    def to_dict(self):
        return {
            'id': self.id,
            'item_id': self.item_id,
            'price': str(self.price),
            'supply_price': str(self.supply_price),
            'user_purchase_quantity': self.user_purchase_quantity,
            'item_used_quantity': self.item_used_quantity,
        }

    def __repr__(self):
        return f"<OrderItem(id={self.id}, order_id={self.order_id}, item_id={self.item_id}, qty={self.item_used_quantity})>"
