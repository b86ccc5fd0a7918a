"""
Identity tokens.

The auth collaborator issues HS256 JWTs whose `sub` claim is the member's
external user id; this module verifies them and returns that id.
"""
import logging
from datetime import datetime, timedelta, timezone
import jwt
from flask import current_app
from commerce.exceptions import UnauthorizedError

logger = logging.getLogger(__name__)


def issue_token(user_id: str, expires_minutes: int = None) -> str:
    """Issue a signed token for the given external user id."""
    if expires_minutes is None:
        expires_minutes = current_app.config.get('JWT_EXPIRES_MINUTES', 60)
    payload = {
        'sub': str(user_id),
        'iat': datetime.now(timezone.utc),
        'exp': datetime.now(timezone.utc) + timedelta(minutes=expires_minutes),
    }
    return jwt.encode(
        payload,
        current_app.config['SECRET_KEY'],
        algorithm=current_app.config.get('JWT_ALGORITHM', 'HS256')
    )


def get_user_id_by_token(token: str) -> str:
    """
    Return the external user id carried by a token.

    Raises:
        UnauthorizedError: token missing, expired or invalid
    """
    if not token:
        raise UnauthorizedError('인증 토큰이 없습니다.')

    try:
        payload = jwt.decode(
            token,
            current_app.config['SECRET_KEY'],
            algorithms=[current_app.config.get('JWT_ALGORITHM', 'HS256')]
        )
    except jwt.ExpiredSignatureError:
        raise UnauthorizedError('인증 토큰이 만료되었습니다.')
    except jwt.InvalidTokenError as e:
        logger.warning(f"Invalid token received: {e}")
        raise UnauthorizedError('유효하지 않은 인증 토큰입니다.')

    user_id = payload.get('sub')
    if not user_id:
        raise UnauthorizedError('유효하지 않은 인증 토큰입니다.')
    return user_id
