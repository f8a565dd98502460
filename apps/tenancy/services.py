"""
Tenancy services.

Functions:
    move_in_tenant: Start a tenancy, closing the flat's current one.
    ensure_monthly_rents: Create missing unpaid rent records for a month.
    upsert_rent_record: Create or overwrite one month's rent record.
    toggle_rent_paid: Flip the paid state of a rent record.
"""

import logging
from uuid import UUID

from django.db import transaction
from django.utils import timezone

from .exceptions import FlatNotFoundError, TenantNotFoundError
from .models import Flat, Tenant, RentRecord

logger = logging.getLogger(__name__)


@transaction.atomic
def move_in_tenant(*, flat_id: UUID, **tenant_data) -> Tenant:
    """
    Create a tenant and make them the flat's current occupant.

    The previous current tenant, if any, becomes inactive with
    ``end_date`` set to the new tenant's ``start_date``.

    Args:
        flat_id: Flat being let
        **tenant_data: Tenant fields (name, start_date, rent_amount, ...)

    Returns:
        The new Tenant

    Raises:
        FlatNotFoundError: If the flat does not exist
    """
    try:
        flat = Flat.objects.select_for_update().get(id=flat_id)
    except Flat.DoesNotExist:
        raise FlatNotFoundError()

    if flat.current_tenant_id:
        closed = Tenant.objects.filter(id=flat.current_tenant_id).update(
            active=False,
            end_date=tenant_data['start_date'],
        )
        if closed:
            logger.info(f"Tenant {flat.current_tenant_id} moved out of flat {flat.number}")

    tenant = Tenant.objects.create(flat=flat, active=True, **tenant_data)
    flat.current_tenant = tenant
    flat.save(update_fields=['current_tenant', 'updated_at'])

    logger.info(f"Tenant {tenant.name} moved into flat {flat.number}")
    return tenant


@transaction.atomic
def ensure_monthly_rents(*, month: str) -> int:
    """
    Make sure every occupied flat has a rent record for ``month``.

    Existing records are never touched, paid or not.

    Returns:
        Number of records created
    """
    created_count = 0
    flats = Flat.objects.filter(current_tenant__isnull=False).select_related('current_tenant')
    for flat in flats:
        tenant = flat.current_tenant
        if tenant is None:
            continue
        _, created = RentRecord.objects.get_or_create(
            flat=flat,
            tenant=tenant,
            month=month,
            defaults={'amount': tenant.rent_amount},
        )
        created_count += int(created)

    if created_count:
        logger.info(f"Created {created_count} rent record(s) for {month}")
    return created_count


@transaction.atomic
def upsert_rent_record(*, flat_id: UUID, tenant_id: UUID, month: str, **values) -> RentRecord:
    """
    Create or replace the rent record for a flat, tenant and month.

    Args:
        flat_id: Flat the rent is for
        tenant_id: Tenant paying
        month: ``YYYY-MM``
        **values: amount, maintenance, paid, paid_date, notes

    Raises:
        FlatNotFoundError: If the flat does not exist
        TenantNotFoundError: If the tenant does not exist
    """
    if not Flat.objects.filter(id=flat_id).exists():
        raise FlatNotFoundError()
    if not Tenant.objects.filter(id=tenant_id).exists():
        raise TenantNotFoundError()

    record, created = RentRecord.objects.update_or_create(
        flat_id=flat_id,
        tenant_id=tenant_id,
        month=month,
        defaults=values,
    )
    logger.info(f"Rent record {month} for tenant {tenant_id} {'created' if created else 'updated'}")
    return record


@transaction.atomic
def toggle_rent_paid(*, record: RentRecord) -> RentRecord:
    """Flip ``paid``; paying stamps today's date, unpaying clears it."""
    record.paid = not record.paid
    record.paid_date = timezone.localdate() if record.paid else None
    record.save(update_fields=['paid', 'paid_date', 'updated_at'])
    return record
