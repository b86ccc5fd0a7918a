"""
Inventory ledger - the only path that mutates Item.stock_quantity.

Rows are read FOR UPDATE so concurrent check-then-subtract sequences on the
same item serialize at the database. The enclosing transaction (owned by
the caller) is responsible for commit/rollback.
"""
import logging
from typing import Iterable, List
from commerce.models import Item
from commerce.exceptions import NotFoundError, InsufficientStockError, InvalidReferenceError

logger = logging.getLogger(__name__)

NO_STOCK_ITEMS_MESSAGE = '재고 상품이 존재하지 않습니다.'


def _validate_quantity(quantity) -> int:
    if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity <= 0:
        raise InvalidReferenceError(f'수량은 1 이상의 정수여야 합니다. (quantity={quantity})')
    return quantity


def item_for_update_query(session, item_id: int, active_only: bool = True):
    """Single item row, read FOR UPDATE."""
    query = session.query(Item).filter(Item.id == item_id)
    if active_only:
        query = query.filter(Item.activated.is_(True))
    return query.with_for_update().populate_existing()


def lock_items_query(session, item_ids: Iterable[int]):
    """Item rows FOR UPDATE in ascending id order."""
    # Fixed lock order keeps concurrent placements from deadlocking
    return session.query(Item).filter(
        Item.id.in_(sorted(set(item_ids)))
    ).order_by(Item.id).with_for_update().populate_existing()


def _get_item_for_update(session, item_id: int, active_only: bool = True):
    return item_for_update_query(session, item_id, active_only).first()


def lock_items(session, item_ids: Iterable[int]) -> List[Item]:
    """Lock item rows FOR UPDATE in id order and return them."""
    ids = list(item_ids)
    if not ids:
        return []
    return lock_items_query(session, ids).all()


def ensure_active_items(session, item_ids: Iterable[int]) -> List[Item]:
    """
    Pre-flight guard: at least one of the given items must exist and be active.

    Raises:
        NotFoundError: if the resolved active-item set is empty
    """
    ids = list(set(item_ids))
    items = []
    if ids:
        items = session.query(Item).filter(
            Item.id.in_(ids),
            Item.activated.is_(True)
        ).all()
    if not items:
        raise NotFoundError(NO_STOCK_ITEMS_MESSAGE)
    return items


def check_and_subtract(session, item_id: int, quantity: int) -> int:
    """
    Subtract quantity from an active item's stock.

    Returns:
        The remaining stock quantity.

    Raises:
        NotFoundError: item absent or deactivated
        InsufficientStockError: stock_quantity < quantity (nothing is mutated)
    """
    _validate_quantity(quantity)
    item = _get_item_for_update(session, item_id)
    if not item:
        raise NotFoundError(NO_STOCK_ITEMS_MESSAGE)

    if item.stock_quantity < quantity:
        logger.info(f"Insufficient stock: item={item_id}, requested={quantity}, available={item.stock_quantity}")
        raise InsufficientStockError(item_id, quantity, item.stock_quantity)

    old_stock = item.stock_quantity
    item.stock_quantity = old_stock - quantity
    session.flush()
    logger.debug(f"Stock subtracted: item={item_id}, {old_stock} -> {item.stock_quantity}")
    return item.stock_quantity


def add_stock(session, item_id: int, quantity: int) -> int:
    """
    Restore quantity to an item's stock (cancellation path).

    Raises:
        NotFoundError: item absent
    """
    _validate_quantity(quantity)
    item = _get_item_for_update(session, item_id, active_only=False)
    if not item:
        raise NotFoundError(NO_STOCK_ITEMS_MESSAGE)

    old_stock = item.stock_quantity
    item.stock_quantity = old_stock + quantity
    session.flush()
    logger.debug(f"Stock restored: item={item_id}, {old_stock} -> {item.stock_quantity}")
    return item.stock_quantity
