import pytest
from datetime import date
from decimal import Decimal
from apps.tenancy.models import Flat
from apps.tenancy.services import move_in_tenant


@pytest.fixture
def flat(db):
    return Flat.objects.create(number='A-101', notes='Corner flat')


@pytest.fixture
def empty_flat(db):
    return Flat.objects.create(number='B-202')


@pytest.fixture
def tenant(flat):
    return move_in_tenant(
        flat_id=flat.id,
        name='Suresh Patil',
        phone='9876543210',
        start_date=date(2024, 6, 1),
        rent_amount=Decimal('15000'),
        deposit=Decimal('30000'),
    )
