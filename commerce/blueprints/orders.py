"""Orders blueprint - place, cancel and list orders."""
from flask import Blueprint, request, jsonify, g
from commerce.database import get_session
from commerce.exceptions import InvalidReferenceError
from commerce.middleware import require_login
from commerce.services import order_service
from commerce.services.member_service import get_active_member
from commerce.utils.paging import get_paging

orders_bp = Blueprint('orders', __name__, url_prefix='/v1')


def _parse_cart_ids(payload) -> list:
    cart_ids = (payload or {}).get('cartIds')
    if not isinstance(cart_ids, list) or not cart_ids:
        raise InvalidReferenceError()
    if not all(isinstance(cart_id, int) and not isinstance(cart_id, bool) for cart_id in cart_ids):
        raise InvalidReferenceError()
    return cart_ids


@orders_bp.route('/orders', methods=['GET'])
@require_login
def list_orders():
    """List the caller's orders with limit/offset paging."""
    limit, offset = get_paging('ORDER_LIST_DEFAULT_LIMIT')
    db_session = get_session()
    member = get_active_member(db_session, g.user_id)
    orders = order_service.find_orders(db_session, member.id, limit, offset)
    return jsonify({'status': 'success', 'data': orders})


@orders_bp.route('/order', methods=['POST'])
@require_login
def add_order():
    """Place an order from the caller's cart lines."""
    cart_ids = _parse_cart_ids(request.get_json(silent=True))
    order_service.place_order(get_session(), g.user_id, cart_ids)
    return jsonify({'status': 'success'}), 201


@orders_bp.route('/order/<int:order_id>', methods=['PUT', 'PATCH'])
@require_login
def cancel_order(order_id):
    """Cancel one of the caller's orders."""
    db_session = get_session()
    member = get_active_member(db_session, g.user_id)
    order_service.cancel_order(db_session, order_id, member_id=member.id)
    return jsonify({'status': 'success'})
