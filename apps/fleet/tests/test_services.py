import pytest
from datetime import date
from decimal import Decimal
from apps.fleet.models import FuelEntry, Vehicle
from apps.fleet.services import (
    derive_mileage,
    fuel_summary,
    aggregate_range,
    period_bounds,
    parse_month_year,
    retire_vehicle,
    vehicle_stats,
    service_overview,
    InvalidMonthYearError,
)


# =============================================================================
# Mileage derivation
# =============================================================================

@pytest.mark.django_db
class TestDeriveMileage:

    def test_distances_and_mileages(self, car, make_fuel):
        first = make_fuel(car, date=date(2025, 1, 1), odometer=1000, liters=8)
        second = make_fuel(car, date=date(2025, 1, 10), odometer=1200, liters=10)
        third = make_fuel(car, date=date(2025, 1, 20), odometer=1450, liters=12)

        readings = derive_mileage(FuelEntry.objects.order_by('created_at'))

        assert readings[first.id].distance is None
        assert readings[second.id].distance == Decimal('200')
        assert readings[third.id].distance == Decimal('250')
        assert readings[second.id].mileage == Decimal('20.00')
        assert readings[third.id].mileage == Decimal('20.83')

    def test_flagged_refuel_is_new_baseline(self, car, make_fuel):
        make_fuel(car, date=date(2025, 1, 1), odometer=1000, liters=10)
        flagged = make_fuel(car, date=date(2025, 1, 15), odometer=1600, liters=10, missed_previous_refuel=True)
        after = make_fuel(car, date=date(2025, 1, 25), odometer=1800, liters=10)

        readings = derive_mileage(FuelEntry.objects.order_by('created_at'))

        assert readings[flagged.id].distance is None
        assert readings[flagged.id].mileage is None
        assert readings[after.id].distance == Decimal('200')
        assert readings[after.id].mileage == Decimal('20.00')

    def test_skips_refuels_without_odometer(self, car, make_fuel):
        make_fuel(car, date=date(2025, 1, 1), odometer=500, liters=5)
        blank = make_fuel(car, date=date(2025, 1, 5), liters=5)
        later = make_fuel(car, date=date(2025, 1, 9), odometer=700, liters=4)

        readings = derive_mileage(FuelEntry.objects.order_by('created_at'))

        assert readings[blank.id].distance is None
        assert readings[later.id].distance == Decimal('200')
        assert readings[later.id].mileage == Decimal('50.00')

    def test_no_reading_for_zero_liters_or_backwards_odometer(self, car, make_fuel):
        make_fuel(car, date=date(2025, 1, 1), odometer=1000, liters=10)
        empty = make_fuel(car, date=date(2025, 1, 2), odometer=1100, liters=0)
        backwards = make_fuel(car, date=date(2025, 1, 3), odometer=900, liters=10)

        readings = derive_mileage(FuelEntry.objects.order_by('created_at'))

        assert readings[empty.id].mileage is None
        assert readings[backwards.id].distance is None

    def test_vehicles_are_independent(self, car, bike, make_fuel):
        make_fuel(car, date=date(2025, 1, 1), odometer=1000, liters=10)
        make_fuel(bike, date=date(2025, 1, 2), odometer=20000, liters=5)
        car_second = make_fuel(car, date=date(2025, 1, 3), odometer=1300, liters=15)

        readings = derive_mileage(FuelEntry.objects.order_by('created_at'))

        assert readings[car_second.id].distance == Decimal('300')

    def test_services_are_not_part_of_the_chain(self, car, make_fuel):
        make_fuel(car, date=date(2025, 1, 1), odometer=1000, liters=10)
        service = make_fuel(car, date=date(2025, 1, 2), odometer=1100, entry_type='service', total=2500)
        refuel = make_fuel(car, date=date(2025, 1, 3), odometer=1300, liters=10)

        readings = derive_mileage(FuelEntry.objects.order_by('created_at'))

        assert service.id not in readings
        assert readings[refuel.id].distance == Decimal('300')


# =============================================================================
# Fuel summary
# =============================================================================

@pytest.mark.django_db
class TestFuelSummary:

    def test_period_bounds_wrap_year(self):
        bounds = period_bounds(date(2025, 1, 20))

        assert bounds['current_month'] == (date(2025, 1, 1), date(2025, 2, 1))
        assert bounds['last_month'] == (date(2024, 12, 1), date(2025, 1, 1))
        assert bounds['year_to_date'] == (date(2025, 1, 1), date(2025, 2, 1))

    def test_period_bounds_december(self):
        bounds = period_bounds(date(2025, 12, 5))

        assert bounds['current_month'] == (date(2025, 12, 1), date(2026, 1, 1))

    def test_splits_fuel_and_service_spend(self, make_fuel):
        make_fuel(date=date(2025, 3, 2), liters=20, total=2000)
        make_fuel(date=date(2025, 3, 5), entry_type='service', total=3500)
        make_fuel(date=date(2025, 3, 8), entry_type='repair', total=1200)
        make_fuel(date=date(2025, 3, 9), vehicle_type='bike', liters=5, total=520)

        result = fuel_summary(today=date(2025, 3, 15))

        car = result['current_month']['car']
        assert car['liters'] == Decimal('20')
        assert car['fuel_spend'] == Decimal('2000')
        assert car['service_spend'] == Decimal('4700')
        assert result['current_month']['bike']['fuel_spend'] == Decimal('520')
        assert result['last_month']['car']['fuel_spend'] == 0

    def test_missing_total_falls_back_to_liters_times_price(self, make_fuel):
        make_fuel(date=date(2025, 3, 2), liters=10, price_per_liter='102.50')

        result = aggregate_range(date(2025, 3, 1), date(2025, 4, 1))

        assert result['car']['fuel_spend'] == Decimal('1025.00')

    def test_spend_split_adds_up_to_totals(self, make_fuel):
        totals = {'car': Decimal('0'), 'bike': Decimal('0')}
        rows = [
            ('car', 'refueling', '1500.25'),
            ('car', 'service', '4000'),
            ('car', 'repair', '750.75'),
            ('bike', 'refueling', '300.10'),
            ('bike', 'service', '899.90'),
        ]
        for kind, entry_type, total in rows:
            make_fuel(date=date(2025, 2, 10), vehicle_type=kind, entry_type=entry_type, total=total, liters=1)
            totals[kind] += Decimal(total)

        result = aggregate_range(date(2025, 1, 1), date(2026, 1, 1))

        for kind in ('car', 'bike'):
            assert result[kind]['fuel_spend'] + result[kind]['service_spend'] == totals[kind]

    def test_year_to_date_spans_months(self, make_fuel):
        make_fuel(date=date(2025, 1, 5), total=100, liters=1)
        make_fuel(date=date(2025, 2, 5), total=200, liters=2)
        make_fuel(date=date(2024, 12, 31), total=999, liters=9)

        result = fuel_summary(today=date(2025, 2, 20))

        assert result['year_to_date']['car']['fuel_spend'] == Decimal('300')
        assert result['year_to_date']['car']['liters'] == Decimal('3')
        assert result['last_month']['car']['fuel_spend'] == Decimal('100')


# =============================================================================
# Vehicles
# =============================================================================

class TestParseMonthYear:

    @pytest.mark.parametrize('value, expected', [
        ('03-2019', date(2019, 3, 1)),
        ('2019-03', date(2019, 3, 1)),
        ('11/2020', date(2020, 11, 1)),
        ('2021-07-19', date(2021, 7, 1)),
        (date(2022, 5, 17), date(2022, 5, 1)),
        ('', None),
        (None, None),
    ])
    def test_parses(self, value, expected):
        assert parse_month_year(value) == expected

    @pytest.mark.parametrize('value', ['March 2019', '13-2019', '2019'])
    def test_rejects(self, value):
        with pytest.raises(InvalidMonthYearError):
            parse_month_year(value)


@pytest.mark.django_db
class TestRetireVehicle:

    def test_soft_keeps_row_and_entries(self, car, make_fuel):
        make_fuel(car, odometer=100, liters=5)

        deleted = retire_vehicle(vehicle=car)

        car.refresh_from_db()
        assert deleted is False
        assert car.active is False
        assert FuelEntry.objects.filter(vehicle_id=car.id).count() == 1

    def test_hard_delete_leaves_fuel_entries(self, car, make_fuel):
        make_fuel(car, odometer=100, liters=5)
        make_fuel(car, entry_type='service', total=1500)

        deleted = retire_vehicle(vehicle=car, hard=True)

        assert deleted is True
        assert not Vehicle.objects.filter(id=car.id).exists()
        assert FuelEntry.objects.filter(vehicle_id=car.id).count() == 2


# =============================================================================
# Stats and service overview
# =============================================================================

@pytest.mark.django_db
class TestVehicleStats:

    def test_dashboard(self, car, make_fuel):
        make_fuel(car, date=date(2025, 1, 1), odometer=1000, liters=10, total=1000)
        make_fuel(car, date=date(2025, 1, 5), odometer=1200, entry_type='service', total=3000)
        make_fuel(car, date=date(2025, 1, 10), odometer=1500, liters=20, total=2000)

        stats = vehicle_stats(car, today=date(2025, 1, 15))

        assert stats['total'] == Decimal('6000')
        assert stats['refuel'] == Decimal('3000')
        assert stats['service'] == Decimal('3000')
        assert stats['distance'] == Decimal('500')
        assert stats['range_days'] == 10
        assert stats['by_day'] == Decimal('600.00')
        assert stats['by_km'] == Decimal('12.00')
        assert stats['refuel_pct'] == Decimal('50.00')
        assert stats['last_service'].total == Decimal('3000')
        assert stats['days_since_service'] == 10

    def test_includes_unlinked_entries_by_name(self, car, make_fuel):
        make_fuel(vehicle_type='car', vehicle_name='breeza', total=400, liters=4)

        assert vehicle_stats(car)['total'] == Decimal('400')

    def test_empty(self, car):
        stats = vehicle_stats(car)

        assert stats['total'] == 0
        assert stats['range_days'] == 0
        assert stats['last_service'] is None
        assert stats['days_since_service'] is None


@pytest.mark.django_db
class TestServiceOverview:

    def test_km_since_latest_service(self, car, make_fuel):
        make_fuel(car, date=date(2025, 1, 1), odometer=9000, entry_type='service', total=2000)
        make_fuel(car, date=date(2025, 2, 1), odometer=10000, entry_type='service', total=2500)
        make_fuel(car, date=date(2025, 1, 20), odometer=9500, liters=10)
        make_fuel(car, date=date(2025, 2, 10), odometer=10400, liters=10)
        make_fuel(car, date=date(2025, 2, 20), odometer=10900, liters=10)

        card = service_overview()[0]

        assert card['last_service'].odometer == Decimal('10000')
        assert card['km_since_service'] == Decimal('900')

    def test_repairs_are_ignored(self, car, make_fuel):
        make_fuel(car, date=date(2025, 1, 1), odometer=9000, entry_type='repair', total=2000)

        card = service_overview()[0]

        assert card['last_service'] is None
        assert card['km_since_service'] is None

    def test_flagged_refuel_resets_baseline(self, car, make_fuel):
        make_fuel(car, date=date(2025, 1, 1), odometer=5000, entry_type='service', total=2000)
        make_fuel(car, date=date(2025, 1, 10), odometer=5400, liters=10)
        make_fuel(car, date=date(2025, 1, 20), odometer=8000, liters=10, missed_previous_refuel=True)
        make_fuel(car, date=date(2025, 1, 30), odometer=8300, liters=10)

        assert service_overview()[0]['km_since_service'] == Decimal('300')

    def test_zero_without_refuel_after_service(self, car, make_fuel):
        make_fuel(car, date=date(2025, 1, 1), odometer=4000, liters=10)
        make_fuel(car, date=date(2025, 1, 5), odometer=4100, entry_type='service', total=900)

        assert service_overview()[0]['km_since_service'] == 0

    def test_never_negative(self, car, make_fuel):
        make_fuel(car, date=date(2025, 1, 1), odometer=4000, entry_type='service', total=900)
        make_fuel(car, date=date(2025, 1, 9), odometer=100, liters=10)

        assert service_overview()[0]['km_since_service'] == 0

    def test_only_active_vehicles_sorted_by_name(self, make_vehicle):
        make_vehicle(name='zen')
        make_vehicle(name='Alto')
        make_vehicle(name='Old', active=False)

        names = [card['vehicle'].name for card in service_overview()]

        assert names == ['Alto', 'zen']
