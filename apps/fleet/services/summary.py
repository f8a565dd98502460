"""Fuel and service spend rollups by period and vehicle type."""

import logging
from datetime import date
from decimal import Decimal

from django.db.models import Sum, Case, When, Value, F, DecimalField, ExpressionWrapper
from django.db.models.functions import Coalesce
from django.utils import timezone

from ..models import FuelEntry, EntryType, VehicleType

logger = logging.getLogger(__name__)

ZERO = Decimal('0')
TWO_PLACES = Decimal('0.01')
MONEY = DecimalField(max_digits=14, decimal_places=2)


def _month_start(year, month):
    """First day of a month, carrying month overflow into the year."""
    year += (month - 1) // 12
    month = (month - 1) % 12 + 1
    return date(year, month, 1)


def period_bounds(today: date):
    """
    Half-open date ranges for the summary periods.

    Returns:
        dict of period name to ``(start, end)`` with ``end`` exclusive.
    """
    current = _month_start(today.year, today.month)
    next_month = _month_start(today.year, today.month + 1)
    last = _month_start(today.year, today.month - 1)
    return {
        'current_month': (current, next_month),
        'last_month': (last, current),
        'year_to_date': (date(today.year, 1, 1), next_month),
    }


def _spend_expressions():
    computed_total = ExpressionWrapper(F('liters') * F('price_per_liter'), output_field=MONEY)
    return {
        'liters': Coalesce(
            Sum(Case(
                When(entry_type=EntryType.REFUELING, then=Coalesce(F('liters'), Value(ZERO), output_field=MONEY)),
                default=Value(ZERO),
                output_field=MONEY,
            )),
            Value(ZERO),
            output_field=MONEY,
        ),
        'fuel_spend': Coalesce(
            Sum(Case(
                When(
                    entry_type=EntryType.REFUELING,
                    then=Coalesce(F('total'), computed_total, Value(ZERO), output_field=MONEY),
                ),
                default=Value(ZERO),
                output_field=MONEY,
            )),
            Value(ZERO),
            output_field=MONEY,
        ),
        'service_spend': Coalesce(
            Sum(Case(
                When(
                    entry_type__in=[EntryType.SERVICE, EntryType.REPAIR],
                    then=Coalesce(F('total'), Value(ZERO), output_field=MONEY),
                ),
                default=Value(ZERO),
                output_field=MONEY,
            )),
            Value(ZERO),
            output_field=MONEY,
        ),
    }


def _empty_bucket():
    return {'liters': ZERO, 'fuel_spend': ZERO, 'service_spend': ZERO}


def aggregate_range(start: date, end: date, queryset=None):
    """
    Sum liters, fuel spend and service spend per vehicle type.

    Fuel spend counts refuels, using ``total`` or ``liters x price`` when
    the total is missing. Service spend counts service and repair totals.

    Args:
        start: Inclusive lower date bound
        end: Exclusive upper date bound
        queryset: Optional FuelEntry queryset to restrict the rows

    Returns:
        dict with ``car`` and ``bike`` buckets, zero-filled.
    """
    if queryset is None:
        queryset = FuelEntry.objects.all()

    rows = (
        queryset.filter(date__gte=start, date__lt=end)
        .order_by()
        .values('vehicle_type')
        .annotate(**_spend_expressions())
    )

    result = {choice: _empty_bucket() for choice in VehicleType.values}
    for row in rows:
        key = VehicleType.BIKE if row['vehicle_type'] == VehicleType.BIKE else VehicleType.CAR
        bucket = result[key]
        for field in ('liters', 'fuel_spend', 'service_spend'):
            bucket[field] += Decimal(row[field]).quantize(TWO_PLACES)
    return result


def fuel_summary(*, today: date = None) -> dict:
    """
    Current month, last month and year-to-date spend per vehicle type.

    Args:
        today: Reference day, defaults to the local date

    Returns:
        dict with ``current_month``, ``last_month`` and ``year_to_date``
        keys, each as returned by ``aggregate_range``.
    """
    today = today or timezone.localdate()
    return {
        name: aggregate_range(start, end)
        for name, (start, end) in period_bounds(today).items()
    }
