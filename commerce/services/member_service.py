"""Member lookup and registration."""
import logging
from sqlalchemy.exc import IntegrityError
from commerce.models import Member, Address
from commerce.exceptions import BusinessLogicError, NotFoundError, ForbiddenError

logger = logging.getLogger(__name__)


def get_active_member(session, user_id: str) -> Member:
    """
    Resolve the member behind an external user id.

    Raises:
        NotFoundError: no member with that user id
        ForbiddenError: the member exists but is deactivated
    """
    members = session.query(Member).filter(Member.user_id == user_id).all()
    if not members:
        raise NotFoundError('회원 정보가 존재하지 않습니다.')

    for member in members:
        if member.activated:
            return member

    logger.warning(f"Deactivated member attempted an order action: user_id={user_id}")
    raise ForbiddenError('비활성화된 회원입니다.')


def validate_duplicate_member(session, user_id: str):
    """Raise if an activated member already uses this user id."""
    existing = session.query(Member).filter(
        Member.user_id == user_id,
        Member.activated.is_(True)
    ).first()
    if existing:
        raise BusinessLogicError('이미 존재하는 회원입니다.', status_code=409)


def join_member(session, user_id: str, password: str, username: str,
                email: str = None, phone_number: str = None, address: Address = None) -> int:
    """Register a new member and return its id."""
    if not user_id or not password or not username:
        raise BusinessLogicError('아이디, 비밀번호, 이름은 필수입니다.')

    try:
        validate_duplicate_member(session, user_id)

        member = Member(
            user_id=user_id,
            username=username,
            email=email,
            phone_number=phone_number,
            activated=True
        )
        if address is not None:
            member.address = address
        member.set_password(password)

        session.add(member)
        session.commit()
        logger.info(f"Member joined: user_id={user_id}, id={member.id}")
        return member.id

    except BusinessLogicError:
        session.rollback()
        raise
    except IntegrityError as e:
        session.rollback()
        logger.error(f"Error creating member {user_id} (IntegrityError): {str(e)}")
        raise BusinessLogicError('이미 존재하는 회원입니다.', status_code=409)
