"""Order model."""
from decimal import Decimal
from sqlalchemy import Column, String, Numeric, DateTime, Enum, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from commerce.database import Base, BigIntId
from commerce.exceptions import AlreadyCanceledError
import enum


class OrderStatus(enum.Enum):
    """Order status enum. CANCELED is terminal."""
    PLACED = "PLACED"
    CANCELED = "CANCELED"


def build_order_name(carts) -> str:
    """First product name, with " 외 N건" appended for every extra line."""
    name = carts[0].product.name
    if len(carts) > 1:
        name += f" 외 {len(carts) - 1}건"
    return name


def calculate_total_price(carts) -> Decimal:
    """Sum of each line's unit sale price (quantity is not applied)."""
    return sum((cart.item.sale_price for cart in carts), Decimal('0'))


class Order(Base):
    """Order (one purchase by one member)."""

    __tablename__ = 'orders'

    id = Column(BigIntId, primary_key=True, autoincrement=True)
    member_id = Column(BigIntId, ForeignKey('member.id'), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    total_price = Column(Numeric(12, 2), nullable=False)
    status = Column(Enum(OrderStatus, name='order_status'), nullable=False, default=OrderStatus.PLACED)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())

    # Relationships
    member = relationship('Member', back_populates='orders')
    lines = relationship('OrderItem', back_populates='order', cascade='all, delete-orphan')
    delivery = relationship('Delivery', back_populates='order', uselist=False)

    @classmethod
    def place(cls, member, carts):
        """Build a new PLACED order for the given member and resolved cart lines."""
        return cls(
            member_id=member.id,
            name=build_order_name(carts),
            total_price=calculate_total_price(carts),
            status=OrderStatus.PLACED
        )

    @property
    def is_canceled(self):
        return self.status == OrderStatus.CANCELED

    def cancel(self):
        """PLACED -> CANCELED."""
        if self.is_canceled:
            raise AlreadyCanceledError(self.id)
        self.status = OrderStatus.CANCELED

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'total_price': str(self.total_price),
            'status': self.status.value,
            'created_at': self.created_at.isoformat() if self.created_at else None,
            'lines': [line.to_dict() for line in self.lines],
            'delivery': self.delivery.to_dict() if self.delivery else None,
        }

    def __repr__(self):
        return f"<Order(id={self.id}, total_price={self.total_price}, status={self.status.value if self.status else None})>"
