"""
Order service with transactional logic.
Handles order placement from cart lines and order cancellation with stock restore.

Each public operation is one unit of work: it commits on success and rolls
the whole session back on any failure, so no partial stock decrement, order,
delivery or cart deactivation survives an error.
"""
import logging
from typing import List, Dict, Any, Sequence
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import selectinload
from commerce.models import Order, OrderItem
from commerce.exceptions import CommerceError, NotFoundError, CancelNotAllowedError
from commerce.services import inventory_service
from commerce.services.cart_service import resolve_cart_lines
from commerce.services.delivery_service import create_delivery
from commerce.services.member_service import get_active_member

logger = logging.getLogger(__name__)


def order_for_cancel_query(session, order_id: int):
    """Order row with its delivery, read FOR UPDATE."""
    return session.query(Order).options(
        selectinload(Order.delivery)
    ).filter(Order.id == order_id).with_for_update().populate_existing()


def place_order(session, user_id: str, cart_ids: Sequence[int]) -> int:
    """
    Place an order from the member's selected cart lines.

    Steps:
    1. Resolve the active member behind user_id
    2. Resolve and lock the requested cart lines
    3. Guard that the referenced items exist and are active
    4. Check and subtract stock for every line
    5. Create the order
    6. Snapshot one order line per cart line and deactivate the cart lines
    7. Create the STAND_BY delivery
    8. Commit

    Returns:
        The new order id.

    Raises:
        NotFoundError, ForbiddenError, InvalidReferenceError, InsufficientStockError
    """
    try:
        # 1. Member
        member = get_active_member(session, user_id)

        # 2. Cart lines
        carts = resolve_cart_lines(session, cart_ids, member.id)

        # 3. Items
        item_ids = list(dict.fromkeys(cart.item_id for cart in carts))
        inventory_service.ensure_active_items(session, item_ids)

        # 4. Stock
        inventory_service.lock_items(session, item_ids)
        for cart in carts:
            inventory_service.check_and_subtract(session, cart.item_id, cart.item_used_quantity)

        # 5. Order
        order = Order.place(member, carts)
        session.add(order)
        session.flush()

        # 6. Order lines
        for cart in carts:
            session.add(OrderItem.from_cart(order.id, cart))
            cart.activated = False
        session.flush()

        # 7. Delivery
        create_delivery(session, member, order)

        session.commit()
        logger.info(f"Order {order.id} placed by member {member.id} ({len(carts)} lines, total={order.total_price})")
        return order.id

    except CommerceError:
        session.rollback()
        raise
    except SQLAlchemyError as e:
        session.rollback()
        logger.error(f"Storage error while placing order for user {user_id}: {e}")
        raise CommerceError('주문 처리 중 오류가 발생했습니다.')
    except Exception:
        session.rollback()
        raise


def cancel_order(session, order_id: int, member_id: int = None) -> None:
    """
    Cancel an order and restore the stock of its lines.

    When member_id is given the order must belong to that member.

    Steps:
    1. Load and lock the order with its delivery
    2. Reject an already canceled order
    3. Reject when the delivery is past the cancellable stage
    4. Transition the order to CANCELED
    5. Guard that the lines' items exist and are active
    6. Restore stock per active line and mark the line inactive
    7. Commit

    Raises:
        NotFoundError, AlreadyCanceledError, CancelNotAllowedError
    """
    try:
        # 1. Order
        order = order_for_cancel_query(session, order_id).first()

        if not order or (member_id is not None and order.member_id != member_id):
            raise NotFoundError(f'주문 #{order_id}을(를) 찾을 수 없습니다.')

        # 2-4. Status transition (Order.cancel rejects a canceled order)
        if not order.is_canceled and order.delivery is not None and not order.delivery.is_cancelable():
            raise CancelNotAllowedError(order_id, order.delivery.status.value)
        order.cancel()

        # 5. Items
        order_items = session.query(OrderItem).filter(
            OrderItem.order_id == order_id,
            OrderItem.activated.is_(True)
        ).order_by(OrderItem.id).all()
        item_ids = list(dict.fromkeys(line.item_id for line in order_items))
        inventory_service.ensure_active_items(session, item_ids)

        # 6. Stock restore
        inventory_service.lock_items(session, item_ids)
        for line in order_items:
            inventory_service.add_stock(session, line.item_id, line.item_used_quantity)
            line.activated = False

        session.commit()
        logger.info(f"Order {order_id} canceled, {len(order_items)} lines restored")

    except CommerceError:
        session.rollback()
        raise
    except SQLAlchemyError as e:
        session.rollback()
        logger.error(f"Storage error while canceling order {order_id}: {e}")
        raise CommerceError('주문 취소 중 오류가 발생했습니다.')
    except Exception:
        session.rollback()
        raise


def find_orders(session, member_id: int, limit: int, offset: int) -> List[Dict[str, Any]]:
    """List a member's orders (newest first) with their lines and delivery."""
    orders = session.query(Order).options(
        selectinload(Order.lines),
        selectinload(Order.delivery)
    ).filter(
        Order.member_id == member_id
    ).order_by(Order.id.desc()).limit(limit).offset(offset).all()
    return [order.to_dict() for order in orders]
