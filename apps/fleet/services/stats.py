"""Per-vehicle dashboards and the last-service overview."""

from datetime import date
from decimal import Decimal, ROUND_HALF_UP

from django.utils import timezone

from ..models import Vehicle, EntryType
from .vehicles import entries_for_vehicle

ZERO = Decimal('0')
TWO_PLACES = Decimal('0.01')


def _round2(value):
    return Decimal(value).quantize(TWO_PLACES, rounding=ROUND_HALF_UP)


def _pct(part, whole):
    return _round2(part / whole * 100) if whole else ZERO


def vehicle_stats(vehicle: Vehicle, *, today: date = None) -> dict:
    """
    Spend and distance dashboard for one vehicle.

    Distance adds up every positive odometer step across all entries in
    date order. ``range_days`` counts calendar days from the first to the
    last entry inclusive.

    Returns:
        dict with ``total``, ``refuel``, ``service``, ``distance``,
        ``entries_count``, ``first_date``, ``last_date``, ``range_days``,
        ``by_day``, ``by_km``, ``refuel_pct``, ``service_pct``,
        ``last_service`` (FuelEntry or None) and ``days_since_service``.
    """
    today = today or timezone.localdate()
    entries = list(entries_for_vehicle(vehicle).order_by('date', 'created_at'))

    total = refuel = service = distance = ZERO
    previous_odometer = None
    last_service = None

    for entry in entries:
        amount = entry.total or ZERO
        total += amount
        if entry.entry_type == EntryType.REFUELING:
            refuel += amount
        else:
            service += amount
            last_service = entry

        if entry.odometer is not None:
            if previous_odometer is not None and entry.odometer > previous_odometer:
                distance += entry.odometer - previous_odometer
            previous_odometer = entry.odometer

    first_date = entries[0].date if entries else None
    last_date = entries[-1].date if entries else None
    range_days = (last_date - first_date).days + 1 if entries else 0

    return {
        'total': total,
        'refuel': refuel,
        'service': service,
        'distance': distance,
        'entries_count': len(entries),
        'first_date': first_date,
        'last_date': last_date,
        'range_days': range_days,
        'by_day': _round2(total / range_days) if range_days else ZERO,
        'by_km': _round2(total / distance) if distance else ZERO,
        'refuel_pct': _pct(refuel, total),
        'service_pct': _pct(service, total),
        'last_service': last_service,
        'days_since_service': (today - last_service.date).days if last_service else None,
    }


def km_since_service(service, refuels):
    """
    Kilometres driven since a service entry.

    Uses the latest refuel dated on or after the service. A refuel flagged
    ``missed_previous_refuel`` resets the starting point to its own
    odometer and hides earlier refuels.

    Args:
        service: The service FuelEntry
        refuels: The vehicle's refuels, ordered oldest first

    Returns:
        Non-negative distance, 0 when nothing was refuelled since, or
        None when the service has no odometer reading.
    """
    if service.odometer is None:
        return None

    baseline = None
    latest = None
    for entry in refuels:
        if entry.date < service.date or entry.odometer is None:
            continue
        if entry.missed_previous_refuel:
            baseline = entry
            latest = entry
            continue
        if baseline is not None and entry.date < baseline.date:
            continue
        if latest is None or entry.date >= latest.date:
            latest = entry

    if latest is None:
        return ZERO

    start = baseline.odometer if baseline is not None else service.odometer
    return max(ZERO, latest.odometer - start)


def service_overview() -> list:
    """
    Last ``service`` entry per active vehicle, repairs excluded.

    Returns:
        list of dicts with ``vehicle``, ``last_service`` and
        ``km_since_service``, sorted by vehicle name.
    """
    vehicles = sorted(Vehicle.objects.filter(active=True), key=lambda v: v.name.lower())

    cards = []
    for vehicle in vehicles:
        entries = list(entries_for_vehicle(vehicle).order_by('date', 'created_at'))
        services = [e for e in entries if e.entry_type == EntryType.SERVICE]
        last = services[-1] if services else None

        km = None
        if last is not None:
            refuels = [e for e in entries if e.entry_type == EntryType.REFUELING]
            km = km_since_service(last, refuels)

        cards.append({'vehicle': vehicle, 'last_service': last, 'km_since_service': km})
    return cards
