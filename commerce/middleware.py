"""Middleware for caller identity."""
from functools import wraps
from flask import g, request, current_app
from commerce.exceptions import CommerceError, UnauthorizedError
from commerce.services.token_service import get_user_id_by_token


def _bearer_token():
    header = request.headers.get('Authorization', '')
    scheme, _, token = header.partition(' ')
    if scheme.lower() != 'bearer':
        return None
    return token.strip() or None


def load_identity():
    """
    Load the caller's external user id into g.

    Called before each request. Sets g.user_id when a valid bearer token is
    present; otherwise g.user_id stays None and g.auth_error holds the reason.
    """
    g.user_id = None
    g.auth_error = None

    token = _bearer_token()
    if not token:
        return

    try:
        g.user_id = get_user_id_by_token(token)
    except CommerceError as e:
        current_app.logger.info(f"Rejected credential: {e.message}")
        g.auth_error = e


def require_login(f):
    """
    Decorator: Require an authenticated caller.

    Raises UnauthorizedError (rendered as a 401 JSON failure) when no valid
    identity was loaded for this request.
    """
    @wraps(f)
    def decorated_function(*args, **kwargs):
        if g.get('user_id') is None:
            raise g.get('auth_error') or UnauthorizedError('인증이 필요합니다.')
        return f(*args, **kwargs)
    return decorated_function
