"""Domain-specific exceptions for fleet services."""

from rest_framework.exceptions import APIException


class FleetServiceError(Exception):
    """Base exception for fleet services."""
    pass


class InvalidMonthYearError(FleetServiceError):
    """Raised when a month-year string is neither MM-YYYY nor YYYY-MM."""
    pass


class VehicleNotFoundError(APIException):
    status_code = 404
    default_detail = 'Vehicle not found'
    default_code = 'vehicle_not_found'


class FuelEntryNotFoundError(APIException):
    status_code = 404
    default_detail = 'Fuel entry not found'
    default_code = 'fuel_entry_not_found'
