"""Product browsing (read-only)."""
from typing import List, Dict, Any
from sqlalchemy.orm import selectinload
from commerce.models import Product, ProductOption, Item, DisplayStatus
from commerce.exceptions import NotFoundError

LISTED_STATUSES = (DisplayStatus.DISPLAY, DisplayStatus.OUT_OF_STOCK)


def _item_to_dict(item: Item) -> Dict[str, Any]:
    return {
        'id': item.id,
        'sale_price': str(item.sale_price),
        'stock_quantity': item.stock_quantity,
    }


def _product_to_dict(product: Product) -> Dict[str, Any]:
    return {
        'id': product.id,
        'name': product.name,
        'status': product.status.value,
        'items': [_item_to_dict(item) for item in product.items if item.activated],
    }


def find_products(session, limit: int, offset: int) -> List[Dict[str, Any]]:
    """List activated products that are displayed or out of stock."""
    products = session.query(Product).options(
        selectinload(Product.items)
    ).filter(
        Product.activated.is_(True),
        Product.status.in_(LISTED_STATUSES)
    ).order_by(Product.id).limit(limit).offset(offset).all()
    return [_product_to_dict(product) for product in products]


def find_product(session, product_id: int) -> Dict[str, Any]:
    """Product detail with its activated options."""
    product = session.query(Product).options(
        selectinload(Product.items)
    ).filter(Product.id == product_id).first()
    if not product:
        raise NotFoundError('해당 상품이 없습니다.')

    options = session.query(ProductOption).filter(
        ProductOption.product_id == product_id,
        ProductOption.activated.is_(True)
    ).order_by(ProductOption.id).all()

    detail = _product_to_dict(product)
    detail['description'] = product.description
    detail['options'] = [
        {'id': option.id, 'name': option.name, 'value': option.value}
        for option in options
    ]
    return detail
