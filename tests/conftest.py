import pytest
from decimal import Decimal

from commerce import create_app
from commerce.database import get_session, create_schema, drop_schema
from commerce.models import Member, Address, Product, ProductOption, Item, Cart, DisplayStatus
from commerce.services.token_service import issue_token


@pytest.fixture(scope='session')
def app():
    """Create application instance for testing."""
    app = create_app('config.TestConfig')
    return app


@pytest.fixture(scope='function')
def client(app):
    """Create test client."""
    return app.test_client()


@pytest.fixture(scope='function')
def session(app):
    """Fresh schema and database session for each test."""
    with app.app_context():
        create_schema()
        session = get_session()
        yield session
        session.rollback()
        session.remove()
        drop_schema()


def make_member(session, user_id, activated=True):
    member = Member(
        user_id=user_id,
        username='홍길동',
        email=f'{user_id}@test.com',
        phone_number='01012345678',
        activated=activated,
        address=Address('서울시 강남구 테헤란로 427', '아이파크몰 test 호', '12345')
    )
    member.set_password('1234')
    session.add(member)
    session.commit()
    return member


def make_item(session, name, stock, sale_price, supply_price):
    product = Product(name=name, status=DisplayStatus.DISPLAY, activated=True)
    session.add(product)
    session.flush()
    item = Item(
        product_id=product.id,
        stock_quantity=stock,
        sale_price=Decimal(sale_price),
        supply_price=Decimal(supply_price),
        activated=True
    )
    session.add(item)
    session.commit()
    return item


def make_cart(session, member, item, used_qty, purchase_qty=None):
    cart = Cart(
        member_id=member.id,
        product_id=item.product_id,
        item_id=item.id,
        item_used_quantity=used_qty,
        user_purchase_quantity=purchase_qty if purchase_qty is not None else used_qty,
        activated=True
    )
    session.add(cart)
    session.commit()
    return cart


@pytest.fixture(scope='function')
def member(session):
    """Activated member with an address."""
    return make_member(session, 'testId')


@pytest.fixture(scope='function')
def other_member(session):
    """A second activated member."""
    return make_member(session, 'otherId')


@pytest.fixture(scope='function')
def item(session):
    """Item with 10 units in stock."""
    return make_item(session, '무선 이어폰', 10, '15000.00', '10000.00')


@pytest.fixture(scope='function')
def item2(session):
    """Second item with 5 units in stock."""
    item = make_item(session, '충전 케이블', 5, '8000.00', '3000.00')
    session.add(ProductOption(product_id=item.product_id, name='색상', value='블랙', activated=True))
    session.add(ProductOption(product_id=item.product_id, name='색상', value='화이트', activated=False))
    session.commit()
    return item


@pytest.fixture(scope='function')
def cart(session, member, item):
    """Member's cart line for 3 units of item."""
    return make_cart(session, member, item, 3)


@pytest.fixture(scope='function')
def cart2(session, member, item2):
    """Member's cart line for 2 units of item2."""
    return make_cart(session, member, item2, 2)


@pytest.fixture(scope='function')
def auth_headers(session, member):
    """Bearer token headers for member."""
    return {'Authorization': f'Bearer {issue_token(member.user_id)}'}


@pytest.fixture(scope='function')
def new_member(session):
    """Factory: new_member(user_id, activated=True)."""
    return lambda user_id, activated=True: make_member(session, user_id, activated)


@pytest.fixture(scope='function')
def new_cart(session):
    """Factory: new_cart(member, item, used_qty, purchase_qty=None)."""
    return lambda member, item, used_qty, purchase_qty=None: make_cart(
        session, member, item, used_qty, purchase_qty
    )
