"""Member model - buyers identified by an external user id."""
from sqlalchemy import Column, String, Boolean, DateTime
from sqlalchemy.orm import relationship, composite
from sqlalchemy.sql import func
from werkzeug.security import generate_password_hash, check_password_hash
from commerce.database import Base, BigIntId


class Address:
    """Shipping address value object, embedded in Member and Delivery rows."""

    def __init__(self, address, address_detail, zip_code):
        self.address = address
        self.address_detail = address_detail
        self.zip_code = zip_code

    def __composite_values__(self):
        return self.address, self.address_detail, self.zip_code

    def __eq__(self, other):
        return isinstance(other, Address) and self.__composite_values__() == other.__composite_values__()

    def __ne__(self, other):
        return not self.__eq__(other)

    def to_dict(self):
        return {
            'address': self.address,
            'address_detail': self.address_detail,
            'zip_code': self.zip_code,
        }

    def __repr__(self):
        return f"<Address(zip_code='{self.zip_code}', address='{self.address}')>"


class Member(Base):
    """Member model."""

    __tablename__ = 'member'

    id = Column(BigIntId, primary_key=True, autoincrement=True)
    user_id = Column(String(50), nullable=False, index=True)
    password_hash = Column(String(255), nullable=True)
    username = Column(String(50), nullable=False)
    email = Column(String(255), nullable=True)
    phone_number = Column(String(20), nullable=True)
    activated = Column(Boolean, nullable=False, default=True)

    address_line = Column(String(100), nullable=True)
    address_detail = Column(String(100), nullable=True)
    zip_code = Column(String(5), nullable=True)
    address = composite(Address, address_line, address_detail, zip_code)

    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())

    # Relationships
    carts = relationship('Cart', back_populates='member')
    orders = relationship('Order', back_populates='member')

    def set_password(self, password):
        """Set password hash."""
        self.password_hash = generate_password_hash(password, method='scrypt')

    def check_password(self, password):
        """Check password against hash."""
        if not self.password_hash:
            return False
        return check_password_hash(self.password_hash, password)

    def __repr__(self):
        return f"<Member(id={self.id}, user_id='{self.user_id}', activated={self.activated})>"
