"""Models package - exports all SQLAlchemy models."""
from commerce.models.member import Member, Address
from commerce.models.product import Product, ProductOption, DisplayStatus
from commerce.models.item import Item
from commerce.models.cart import Cart
from commerce.models.order import Order, OrderStatus
from commerce.models.order_item import OrderItem
from commerce.models.delivery import Delivery, DeliveryStatus

__all__ = [
    'Member', 'Address',
    'Product', 'ProductOption', 'DisplayStatus',
    'Item',
    'Cart',
    'Order', 'OrderStatus', 'OrderItem',
    'Delivery', 'DeliveryStatus',
]
