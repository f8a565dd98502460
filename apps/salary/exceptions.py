"""
Domain exceptions for salary app.
"""
from rest_framework.exceptions import APIException


class SalaryServiceError(Exception):
    """Base exception for salary service errors."""
    pass


class DuplicateYearError(SalaryServiceError):
    """Raised when a record for the year already exists."""
    pass


class MissingPreviousSalaryError(SalaryServiceError):
    """Raised when no previous salary is given and no earlier year exists."""
    pass


class SalaryRecordNotFoundError(APIException):
    status_code = 404
    default_detail = 'Salary record not found'
    default_code = 'salary_record_not_found'
