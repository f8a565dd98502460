"""Distance and mileage derivation between refuels."""

from collections import defaultdict, namedtuple
from decimal import Decimal, ROUND_HALF_UP

from ..models import EntryType

MileageReading = namedtuple('MileageReading', ['distance', 'mileage'])

EMPTY_READING = MileageReading(None, None)

TWO_PLACES = Decimal('0.01')


def vehicle_key(entry):
    """
    Identify the vehicle an entry belongs to.

    Linked entries group by ``vehicle_id``. Older unlinked entries fall back
    to vehicle type plus case-insensitive vehicle name.
    """
    if entry.vehicle_id:
        return ('id', str(entry.vehicle_id))
    return ('name', entry.vehicle_type, (entry.vehicle_name or '').strip().lower())


def derive_mileage(entries):
    """
    Compute distance and mileage for every refuel in ``entries``.

    Refuels are walked per vehicle in date order (ties keep the input
    order, so pass entries ordered by creation time). For each refuel with
    liters > 0 that is not flagged ``missed_previous_refuel``, the nearest
    earlier refuel with an odometer reading is the reference point:
    ``distance = odometer - previous`` when positive, and
    ``mileage = distance / liters`` rounded to 2 places.

    A flagged refuel gets no reading of its own but its odometer becomes
    the reference for the next refuel.

    Args:
        entries: Iterable of FuelEntry-like objects

    Returns:
        dict mapping entry id to MileageReading. Entries that are not
        refuels are absent.
    """
    by_vehicle = defaultdict(list)
    for entry in entries:
        if entry.entry_type == EntryType.REFUELING:
            by_vehicle[vehicle_key(entry)].append(entry)

    readings = {}
    for refuels in by_vehicle.values():
        refuels.sort(key=lambda e: e.date)
        previous_odometer = None

        for entry in refuels:
            reading = EMPTY_READING
            if entry.odometer is not None:
                if (
                    not entry.missed_previous_refuel
                    and previous_odometer is not None
                    and entry.liters
                    and entry.liters > 0
                ):
                    distance = Decimal(entry.odometer) - Decimal(previous_odometer)
                    if distance > 0:
                        mileage = (distance / Decimal(entry.liters)).quantize(TWO_PLACES, rounding=ROUND_HALF_UP)
                        reading = MileageReading(distance, mileage)
                previous_odometer = entry.odometer
            readings[entry.id] = reading

    return readings
