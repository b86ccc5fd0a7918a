"""Custom exceptions for the order management application."""
import enum


class ErrorKind(str, enum.Enum):
    """Failure kinds surfaced to the request-handling layer."""
    NOT_FOUND = 'NotFound'
    INVALID_REFERENCE = 'InvalidReference'
    INSUFFICIENT_STOCK = 'InsufficientStock'
    ALREADY_CANCELED = 'AlreadyCanceled'
    CANCEL_NOT_ALLOWED = 'CancelNotAllowed'
    UNAUTHORIZED = 'Unauthorized'
    FORBIDDEN = 'Forbidden'
    BUSINESS_RULE = 'BusinessRule'
    METHOD_NOT_ALLOWED = 'MethodNotAllowed'
    INTERNAL = 'Internal'


class CommerceError(Exception):
    """Base exception for all application errors."""
    kind = ErrorKind.INTERNAL

    def __init__(self, message="An internal error occurred", status_code=500, payload=None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.payload = payload

    def to_dict(self):
        rv = dict(self.payload or ())
        rv['message'] = self.message
        rv['kind'] = self.kind.value
        rv['status'] = 'error'
        return rv


class BusinessLogicError(CommerceError):
    """Exception raised for business logic violations."""
    kind = ErrorKind.BUSINESS_RULE

    def __init__(self, message, status_code=400, payload=None):
        super().__init__(message, status_code, payload)


class NotFoundError(CommerceError):
    """Referenced member, item, order or order-line set is missing or inactive."""
    kind = ErrorKind.NOT_FOUND

    def __init__(self, message="Resource not found", payload=None):
        super().__init__(message, 404, payload)


class InvalidReferenceError(BusinessLogicError):
    """Requested cart ids do not match the caller's active cart lines."""
    kind = ErrorKind.INVALID_REFERENCE

    def __init__(self, message="잘못된 장바구니 아이디입니다.", payload=None):
        super().__init__(message, 400, payload)


class InsufficientStockError(BusinessLogicError):
    """Raised when an operation fails due to lack of stock."""
    kind = ErrorKind.INSUFFICIENT_STOCK

    def __init__(self, item_id, required, available):
        message = f"재고가 부족합니다. (item={item_id}, requested={required}, available={available})"
        super().__init__(message, status_code=409, payload={
            'item_id': item_id, 'required': required, 'available': available
        })
        self.item_id = item_id
        self.required = required
        self.available = available


class AlreadyCanceledError(BusinessLogicError):
    """Order is already in its terminal state."""
    kind = ErrorKind.ALREADY_CANCELED

    def __init__(self, order_id):
        super().__init__(f"이미 취소된 주문입니다. (order={order_id})", status_code=409)


class CancelNotAllowedError(BusinessLogicError):
    """Delivery has progressed past the cancellable stage."""
    kind = ErrorKind.CANCEL_NOT_ALLOWED

    def __init__(self, order_id, delivery_status):
        super().__init__(
            f"배송이 진행되어 주문을 취소할 수 없습니다. (order={order_id}, delivery={delivery_status})",
            status_code=409
        )


class UnauthorizedError(CommerceError):
    """Raised when the caller credential is missing or invalid."""
    kind = ErrorKind.UNAUTHORIZED

    def __init__(self, message="Unauthorized access"):
        super().__init__(message, 401)


class ForbiddenError(CommerceError):
    """Raised when the caller is known but not allowed to act (e.g. deactivated member)."""
    kind = ErrorKind.FORBIDDEN

    def __init__(self, message="Forbidden"):
        super().__init__(message, 403)
