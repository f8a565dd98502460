import uuid

import pytest
from datetime import date
from decimal import Decimal
from django.utils import timezone
from apps.tenancy.models import RentRecord
from apps.tenancy.services import (
    move_in_tenant,
    ensure_monthly_rents,
    upsert_rent_record,
    toggle_rent_paid,
)
from apps.tenancy.exceptions import FlatNotFoundError, TenantNotFoundError


# =============================================================================
# move_in_tenant
# =============================================================================

@pytest.mark.django_db
class TestMoveInTenant:

    def test_first_tenant_becomes_current(self, flat, tenant):
        flat.refresh_from_db()

        assert flat.current_tenant_id == tenant.id
        assert tenant.active is True
        assert tenant.end_date is None

    def test_new_tenant_closes_previous(self, flat, tenant):
        newcomer = move_in_tenant(
            flat_id=flat.id,
            name='Lakshmi Rao',
            start_date=date(2025, 2, 1),
            rent_amount=Decimal('16000'),
        )

        tenant.refresh_from_db()
        flat.refresh_from_db()
        assert tenant.active is False
        assert tenant.end_date == date(2025, 2, 1)
        assert flat.current_tenant_id == newcomer.id
        assert newcomer.active is True

    def test_unknown_flat(self, db):
        with pytest.raises(FlatNotFoundError):
            move_in_tenant(flat_id=uuid.uuid4(), name='X', start_date=date(2025, 1, 1), rent_amount=Decimal('1'))


# =============================================================================
# Rent records
# =============================================================================

@pytest.mark.django_db
class TestMonthlyRents:

    def test_creates_unpaid_record_for_occupied_flats(self, tenant, empty_flat):
        created = ensure_monthly_rents(month='2025-03')

        assert created == 1
        record = RentRecord.objects.get(month='2025-03')
        assert record.tenant_id == tenant.id
        assert record.amount == Decimal('15000')
        assert record.paid is False

    def test_never_overwrites_existing(self, flat, tenant):
        RentRecord.objects.create(
            flat=flat, tenant=tenant, month='2025-03',
            amount=Decimal('14000'), paid=True, paid_date=date(2025, 3, 2),
        )

        created = ensure_monthly_rents(month='2025-03')

        assert created == 0
        record = RentRecord.objects.get(month='2025-03')
        assert record.paid is True
        assert record.amount == Decimal('14000')

    def test_is_idempotent(self, tenant):
        ensure_monthly_rents(month='2025-04')
        ensure_monthly_rents(month='2025-04')

        assert RentRecord.objects.filter(month='2025-04').count() == 1

    def test_upsert_creates_then_overwrites(self, flat, tenant):
        first = upsert_rent_record(
            flat_id=flat.id, tenant_id=tenant.id, month='2025-05',
            amount=Decimal('15000'), maintenance=Decimal('500'),
        )
        second = upsert_rent_record(
            flat_id=flat.id, tenant_id=tenant.id, month='2025-05',
            amount=Decimal('15500'), paid=True, paid_date=date(2025, 5, 3),
        )

        assert first.id == second.id
        second.refresh_from_db()
        assert second.amount == Decimal('15500')
        assert second.paid is True

    def test_upsert_unknown_refs(self, flat, tenant):
        with pytest.raises(FlatNotFoundError):
            upsert_rent_record(flat_id=uuid.uuid4(), tenant_id=tenant.id, month='2025-05', amount=Decimal('1'))
        with pytest.raises(TenantNotFoundError):
            upsert_rent_record(flat_id=flat.id, tenant_id=uuid.uuid4(), month='2025-05', amount=Decimal('1'))

    def test_toggle(self, flat, tenant):
        record = RentRecord.objects.create(flat=flat, tenant=tenant, month='2025-06', amount=Decimal('15000'))

        toggle_rent_paid(record=record)
        record.refresh_from_db()
        assert record.paid is True
        assert record.paid_date == timezone.localdate()

        toggle_rent_paid(record=record)
        record.refresh_from_db()
        assert record.paid is False
        assert record.paid_date is None
