"""Shared limit/offset parsing for list endpoints."""
from flask import request, current_app
from commerce.exceptions import BusinessLogicError


def get_paging(default_limit_key: str):
    """Read limit/offset query args, clamped to LIST_MAX_LIMIT."""
    try:
        limit = int(request.args.get('limit', current_app.config[default_limit_key]))
        offset = int(request.args.get('offset', 0))
    except (TypeError, ValueError):
        raise BusinessLogicError('limit과 offset은 정수여야 합니다.')

    if limit <= 0 or offset < 0:
        raise BusinessLogicError('limit은 1 이상, offset은 0 이상이어야 합니다.')
    return min(limit, current_app.config['LIST_MAX_LIMIT']), offset
