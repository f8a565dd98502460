import pytest
from apps.customers.models import Customer


@pytest.fixture
def customer(db):
    return Customer.objects.create(name='Meena Iyer', age=42, account='Sharma Travels', aadhar_number='1234 5678 9012')
