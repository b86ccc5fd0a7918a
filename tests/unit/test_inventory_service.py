"""
Tests for the inventory ledger and the cart snapshot resolver.
"""

import pytest
from commerce.models import Item
from commerce.services import inventory_service
from commerce.services.cart_service import resolve_cart_lines
from commerce.exceptions import NotFoundError, InsufficientStockError, InvalidReferenceError


class TestCheckAndSubtract:
    """Tests for stock subtraction."""

    def test_subtracts_stock(self, session, item):
        remaining = inventory_service.check_and_subtract(session, item.id, 3)
        session.commit()

        assert remaining == 7
        assert session.get(Item, item.id).stock_quantity == 7

    def test_subtract_entire_stock(self, session, item):
        assert inventory_service.check_and_subtract(session, item.id, 10) == 0

    def test_insufficient_stock_does_not_mutate(self, session, item):
        with pytest.raises(InsufficientStockError) as exc_info:
            inventory_service.check_and_subtract(session, item.id, 11)

        assert exc_info.value.required == 11
        assert exc_info.value.available == 10
        assert exc_info.value.status_code == 409
        session.rollback()
        assert session.get(Item, item.id).stock_quantity == 10

    def test_missing_item(self, session):
        with pytest.raises(NotFoundError):
            inventory_service.check_and_subtract(session, 999, 1)

    def test_deactivated_item(self, session, item):
        item.activated = False
        session.commit()

        with pytest.raises(NotFoundError):
            inventory_service.check_and_subtract(session, item.id, 1)

    @pytest.mark.parametrize('quantity', [0, -1, 1.5, True])
    def test_rejects_non_positive_or_non_integer_quantity(self, session, item, quantity):
        with pytest.raises(InvalidReferenceError):
            inventory_service.check_and_subtract(session, item.id, quantity)
        assert session.get(Item, item.id).stock_quantity == 10


class TestAddStock:
    """Tests for stock restoration."""

    def test_adds_stock(self, session, item):
        assert inventory_service.add_stock(session, item.id, 4) == 14

    def test_restores_deactivated_item(self, session, item):
        item.activated = False
        session.commit()

        assert inventory_service.add_stock(session, item.id, 2) == 12

    def test_missing_item(self, session):
        with pytest.raises(NotFoundError):
            inventory_service.add_stock(session, 999, 1)


class TestEnsureActiveItems:
    """Tests for the pre-flight item guard."""

    def test_returns_active_items(self, session, item, item2):
        items = inventory_service.ensure_active_items(session, [item.id, item2.id, item.id])
        assert sorted(i.id for i in items) == sorted([item.id, item2.id])

    def test_passes_when_at_least_one_is_active(self, session, item, item2):
        item2.activated = False
        session.commit()

        items = inventory_service.ensure_active_items(session, [item.id, item2.id])
        assert [i.id for i in items] == [item.id]

    def test_empty_set_raises(self, session):
        with pytest.raises(NotFoundError, match='재고 상품이 존재하지 않습니다.'):
            inventory_service.ensure_active_items(session, [])

    def test_all_inactive_raises(self, session, item):
        item.activated = False
        session.commit()

        with pytest.raises(NotFoundError):
            inventory_service.ensure_active_items(session, [item.id])

    def test_lock_items_orders_by_id(self, session, item, item2):
        locked = inventory_service.lock_items(session, [item2.id, item.id])
        assert [i.id for i in locked] == sorted([item.id, item2.id])


class TestResolveCartLines:
    """Tests for cart snapshot resolution."""

    def test_returns_lines_in_requested_order(self, session, member, cart, cart2):
        carts = resolve_cart_lines(session, [cart2.id, cart.id], member.id)

        assert [c.id for c in carts] == [cart2.id, cart.id]
        assert carts[0].item.id == cart2.item_id
        assert carts[0].product.name == '충전 케이블'

    def test_foreign_cart_line(self, session, other_member, cart):
        with pytest.raises(InvalidReferenceError):
            resolve_cart_lines(session, [cart.id], other_member.id)

    def test_consumed_cart_line(self, session, member, cart):
        cart.activated = False
        session.commit()

        with pytest.raises(InvalidReferenceError):
            resolve_cart_lines(session, [cart.id], member.id)

    def test_partial_match(self, session, member, cart):
        with pytest.raises(InvalidReferenceError):
            resolve_cart_lines(session, [cart.id, 999], member.id)

    @pytest.mark.parametrize('cart_ids', [[], None])
    def test_empty_request(self, session, member, cart_ids):
        with pytest.raises(InvalidReferenceError):
            resolve_cart_lines(session, cart_ids, member.id)

    def test_duplicated_ids(self, session, member, cart):
        with pytest.raises(InvalidReferenceError):
            resolve_cart_lines(session, [cart.id, cart.id], member.id)
