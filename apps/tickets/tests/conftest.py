import pytest
from datetime import date
from decimal import Decimal
from apps.tickets.models import Ticket


@pytest.fixture
def make_ticket(db):
    """Factory fixture creating tickets with sensible defaults."""
    counter = {'n': 0}

    def _make(**overrides):
        counter['n'] += 1
        data = {
            'amount': Decimal('1000'),
            'profit': Decimal('100'),
            'fare': Decimal('900'),
            'type': 'train',
            'service': 'IRCTC',
            'account': 'Sharma Travels',
            'booking_date': date(2025, 1, 10),
            'passenger_name': 'Ravi Kumar',
            'place': 'Delhi - Mumbai',
            'pnr': f'PNR{counter["n"]:04d}',
        }
        data.update(overrides)
        return Ticket.objects.create(**data)

    return _make


@pytest.fixture
def ticket(make_ticket):
    return make_ticket(pnr='4521367890')


@pytest.fixture
def ticket_payload():
    return {
        'amount': 2500,
        'profit': 250,
        'fare': 2250,
        'type': 'flight',
        'service': 'IndiGo',
        'account': 'Gupta & Sons',
        'booking_date': '2025-02-01',
        'passenger_name': 'Asha Verma',
        'place': 'BLR - DEL',
        'pnr': 'X7Y8Z9',
    }
