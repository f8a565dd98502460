"""Services for fleet business logic."""

from .exceptions import (
    FleetServiceError,
    InvalidMonthYearError,
    VehicleNotFoundError,
    FuelEntryNotFoundError,
)
from .mileage import derive_mileage, MileageReading
from .summary import fuel_summary, aggregate_range, period_bounds
from .vehicles import parse_month_year, entries_for_vehicle, retire_vehicle
from .stats import vehicle_stats, service_overview, km_since_service

__all__ = [
    # Exceptions
    'FleetServiceError',
    'InvalidMonthYearError',
    'VehicleNotFoundError',
    'FuelEntryNotFoundError',
    # Mileage
    'derive_mileage',
    'MileageReading',
    # Summary
    'fuel_summary',
    'aggregate_range',
    'period_bounds',
    # Vehicles
    'parse_month_year',
    'entries_for_vehicle',
    'retire_vehicle',
    # Stats
    'vehicle_stats',
    'service_overview',
    'km_since_service',
]
