import pytest
from decimal import Decimal
from apps.salary.services import create_salary_record


@pytest.fixture
def salary_2023(db):
    return create_salary_record(
        year=2023,
        previous_salary=Decimal('100000'),
        hike_percentage=Decimal('10'),
        revision_percentage=Decimal('5'),
    )
