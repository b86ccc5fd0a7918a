"""Delivery initiator."""
import logging
from commerce.models import Delivery, DeliveryStatus, Address

logger = logging.getLogger(__name__)


def create_delivery(session, member, order) -> Delivery:
    """Create the STAND_BY delivery for a new order, copying the member's current address."""
    member_address = member.address
    if member_address is not None:
        address = Address(*member_address.__composite_values__())
    else:
        address = Address(None, None, None)

    delivery = Delivery(
        order_id=order.id,
        member_id=member.id,
        address=address,
        status=DeliveryStatus.STAND_BY
    )
    session.add(delivery)
    session.flush()
    logger.debug(f"Delivery {delivery.id} created for order {order.id}")
    return delivery
