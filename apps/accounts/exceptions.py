"""
Domain exceptions for accounts app.
"""
from rest_framework.exceptions import APIException


class AccountsServiceError(Exception):
    """Base exception for accounts service errors."""
    pass


class InvalidCredentialsError(AccountsServiceError):
    """Raised when the username or password does not match."""
    pass


class InactiveAccountError(AccountsServiceError):
    """Raised when a deactivated user tries to log in."""
    pass


class UserNotFoundError(APIException):
    status_code = 404
    default_detail = 'User not found'
    default_code = 'user_not_found'
