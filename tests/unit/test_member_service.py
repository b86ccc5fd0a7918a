"""
Tests for member lookup and registration.
"""

import pytest
from commerce.models import Member, Address
from commerce.services.member_service import get_active_member, join_member
from commerce.exceptions import NotFoundError, ForbiddenError, BusinessLogicError


class TestGetActiveMember:
    """Tests for resolving the caller's member."""

    def test_active_member(self, session, member):
        assert get_active_member(session, 'testId').id == member.id

    def test_unknown_user(self, session):
        with pytest.raises(NotFoundError):
            get_active_member(session, 'nobody')

    def test_deactivated_member(self, session, new_member):
        new_member('leftId', activated=False)

        with pytest.raises(ForbiddenError) as exc_info:
            get_active_member(session, 'leftId')
        assert exc_info.value.status_code == 403

    def test_rejoined_member_wins_over_deactivated_row(self, session, new_member):
        new_member('backId', activated=False)
        active = new_member('backId')

        assert get_active_member(session, 'backId').id == active.id


class TestJoinMember:
    """Tests for member registration."""

    def test_join(self, session):
        address = Address('서울시 강남구 테헤란로 427', '아이파크몰 test 호', '12345')
        member_id = join_member(session, 'newId', '1234', '홍길동', email='test01@test.com',
                                phone_number='01012345678', address=address)

        member = session.get(Member, member_id)
        assert member.user_id == 'newId'
        assert member.activated is True
        assert member.address == address
        assert member.password_hash != '1234'
        assert member.check_password('1234') is True
        assert member.check_password('wrong') is False

    def test_duplicate_member(self, session, member):
        with pytest.raises(BusinessLogicError) as exc_info:
            join_member(session, member.user_id, '1234', '홍길동')
        assert exc_info.value.status_code == 409

    def test_required_fields(self, session):
        with pytest.raises(BusinessLogicError):
            join_member(session, '', '1234', '홍길동')
