"""Vehicle lifecycle services."""

import logging
import re
from datetime import date

from django.db import transaction
from django.db.models import Q

from ..models import Vehicle, FuelEntry
from .exceptions import InvalidMonthYearError

logger = logging.getLogger(__name__)

MM_YYYY = re.compile(r'(\d{2})[-/](\d{4})')
YYYY_MM = re.compile(r'(\d{4})[-/](\d{2})')


def parse_month_year(value):
    """
    Normalise a month-year value to the first day of that month.

    Accepts ``MM-YYYY``, ``YYYY-MM`` (either with ``/``), full ISO dates
    and ``date`` objects. Empty values give ``None``.

    Raises:
        InvalidMonthYearError: If the value matches neither layout or
            names a month outside 1-12
    """
    if value in (None, ''):
        return None
    if isinstance(value, date):
        return value.replace(day=1)

    text = str(value).strip()
    match = MM_YYYY.search(text)
    if match:
        month, year = match.groups()
    else:
        match = YYYY_MM.search(text)
        if not match:
            raise InvalidMonthYearError(f"Expected MM-YYYY or YYYY-MM, got '{text}'")
        year, month = match.groups()

    month = int(month)
    if not 1 <= month <= 12:
        raise InvalidMonthYearError(f"Month out of range in '{text}'")
    return date(int(year), month, 1)


def entries_for_vehicle(vehicle: Vehicle):
    """
    Fuel entries logged against a vehicle.

    Includes unlinked entries recorded under the same type and name.
    """
    return FuelEntry.objects.filter(
        Q(vehicle_id=vehicle.id)
        | Q(vehicle_id__isnull=True, vehicle_type=vehicle.type, vehicle_name__iexact=vehicle.name)
    )


@transaction.atomic
def retire_vehicle(*, vehicle: Vehicle, hard: bool = False) -> bool:
    """
    Deactivate or delete a vehicle. Its fuel entries are left as they are.

    Args:
        vehicle: Vehicle to retire
        hard: Delete the row instead of flagging it inactive

    Returns:
        True when the row was deleted, False when it was deactivated
    """
    if hard:
        logger.info(f"Vehicle {vehicle.name} ({vehicle.id}) deleted")
        vehicle.delete()
        return True

    vehicle.active = False
    vehicle.save(update_fields=['active', 'updated_at'])
    logger.info(f"Vehicle {vehicle.name} ({vehicle.id}) deactivated")
    return False
