"""
Domain exceptions for tickets app.
"""
from rest_framework.exceptions import APIException


class TicketServiceError(Exception):
    """Base exception for ticket service errors."""
    pass


class InvalidDateRangeError(TicketServiceError):
    """Raised when date_from is after date_to."""
    pass


class TicketNotFoundError(APIException):
    status_code = 404
    default_detail = 'Ticket not found'
    default_code = 'ticket_not_found'
