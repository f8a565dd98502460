import pytest
from datetime import date
from decimal import Decimal
from apps.fleet.models import Vehicle, FuelEntry


@pytest.fixture
def make_vehicle(db):
    def _make(**overrides):
        data = {
            'name': 'Breeza',
            'type': 'car',
            'model': 'ZDi',
            'license_plate': 'KA01AB1234',
        }
        data.update(overrides)
        return Vehicle.objects.create(**data)

    return _make


@pytest.fixture
def car(make_vehicle):
    return make_vehicle()


@pytest.fixture
def bike(make_vehicle):
    return make_vehicle(name='FZs', type='bike', model='FZ-S V3', license_plate='KA02CD5678')


@pytest.fixture
def make_fuel(db):
    """Factory for fuel entries; pass ``vehicle`` to link a Vehicle."""

    def _make(vehicle=None, **overrides):
        data = {
            'date': date(2025, 1, 1),
            'vehicle_type': 'car',
            'entry_type': 'refueling',
        }
        if vehicle is not None:
            data.update(vehicle_type=vehicle.type, vehicle_id=vehicle.id, vehicle_name=vehicle.name)
        data.update(overrides)
        for field in ('odometer', 'liters', 'price_per_liter', 'total'):
            if data.get(field) is not None:
                data[field] = Decimal(str(data[field]))
        return FuelEntry.objects.create(**data)

    return _make
