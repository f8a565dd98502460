"""
Domain exceptions for payments app.
"""
from rest_framework.exceptions import APIException


class PaymentServiceError(Exception):
    """Base exception for payment service errors."""
    pass


class NoTicketsSelectedError(PaymentServiceError):
    """Raised when mark-paid is called with an empty ticket list."""
    pass


class UnknownTicketsError(PaymentServiceError):
    """Raised when some ticket ids do not exist."""

    def __init__(self, missing):
        self.missing = missing
        super().__init__(f"Unknown ticket ids: {', '.join(missing)}")


class PaymentNotFoundError(APIException):
    status_code = 404
    default_detail = 'Payment not found'
    default_code = 'payment_not_found'
