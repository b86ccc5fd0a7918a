"""Delivery model."""
from sqlalchemy import Column, String, DateTime, Enum, ForeignKey
from sqlalchemy.orm import relationship, composite
from sqlalchemy.sql import func
from commerce.database import Base, BigIntId
from commerce.models.member import Address
import enum


class DeliveryStatus(enum.Enum):
    """Delivery status enum. Only STAND_BY is created by the order workflow."""
    STAND_BY = "STAND_BY"
    PREPARING = "PREPARING"
    SHIPPING = "SHIPPING"
    COMPLETED = "COMPLETED"


CANCELABLE_DELIVERY_STATUSES = frozenset({DeliveryStatus.STAND_BY})


class Delivery(Base):
    """Delivery (shipping record created alongside an order)."""

    __tablename__ = 'delivery'

    id = Column(BigIntId, primary_key=True, autoincrement=True)
    order_id = Column(BigIntId, ForeignKey('orders.id'), nullable=False, unique=True)
    member_id = Column(BigIntId, ForeignKey('member.id'), nullable=False, index=True)

    address_line = Column(String(100), nullable=True)
    address_detail = Column(String(100), nullable=True)
    zip_code = Column(String(5), nullable=True)
    address = composite(Address, address_line, address_detail, zip_code)

    status = Column(Enum(DeliveryStatus, name='delivery_status'), nullable=False, default=DeliveryStatus.STAND_BY)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())

    # Relationships
    order = relationship('Order', back_populates='delivery')
    member = relationship('Member')

    def is_cancelable(self):
        """Whether the order this delivery belongs to may still be canceled."""
        return self.status in CANCELABLE_DELIVERY_STATUSES

    def to_dict(self):
        return {
            'id': self.id,
            'status': self.status.value,
            'address': self.address.to_dict() if self.address else None,
        }

    def __repr__(self):
        return f"<Delivery(id={self.id}, order_id={self.order_id}, status={self.status.value if self.status else None})>"
