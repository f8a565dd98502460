import pytest
from datetime import date
from decimal import Decimal
from apps.payments.models import Payment
from apps.tickets.models import Ticket


@pytest.fixture
def make_ticket(db):
    counter = {'n': 0}

    def _make(**overrides):
        counter['n'] += 1
        data = {
            'amount': Decimal('1000'),
            'profit': Decimal('100'),
            'fare': Decimal('900'),
            'type': 'bus',
            'service': 'KSRTC',
            'account': 'Nair Agencies',
            'booking_date': date(2025, 1, 10),
            'passenger_name': 'Meera Nair',
            'place': 'Kochi - Bengaluru',
            'pnr': f'BUS{counter["n"]:04d}',
        }
        data.update(overrides)
        return Ticket.objects.create(**data)

    return _make


@pytest.fixture
def make_payment(db):
    def _make(**overrides):
        data = {
            'date': date(2025, 1, 31),
            'amount': Decimal('500'),
            'period': 'January',
            'account': 'Nair Agencies',
        }
        data.update(overrides)
        return Payment.objects.create(**data)

    return _make
