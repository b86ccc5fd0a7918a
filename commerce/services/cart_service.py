"""Cart snapshot resolver."""
from typing import List, Sequence
from sqlalchemy.orm import selectinload
from commerce.models import Cart
from commerce.exceptions import InvalidReferenceError


def active_cart_lines_query(session, cart_ids: Sequence[int], member_id: int):
    """The member's active cart lines among cart_ids, read FOR UPDATE."""
    return session.query(Cart).options(
        selectinload(Cart.item),
        selectinload(Cart.product)
    ).filter(
        Cart.id.in_(cart_ids),
        Cart.member_id == member_id,
        Cart.activated.is_(True)
    ).with_for_update().populate_existing()


def resolve_cart_lines(session, cart_ids: Sequence[int], member_id: int) -> List[Cart]:
    """
    Load the member's active cart lines for the requested ids.

    Lines are locked FOR UPDATE so two placements cannot consume the same
    line. The result follows the order of cart_ids, with item and product
    loaded.

    Raises:
        InvalidReferenceError: empty/duplicated ids, or any id that is stale,
            foreign or already consumed
    """
    if not cart_ids or len(set(cart_ids)) != len(cart_ids):
        raise InvalidReferenceError()

    carts = active_cart_lines_query(session, cart_ids, member_id).all()

    if len(carts) != len(cart_ids):
        raise InvalidReferenceError()

    carts_by_id = {cart.id: cart for cart in carts}
    return [carts_by_id[cart_id] for cart_id in cart_ids]
