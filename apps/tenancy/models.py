from django.db import models
from decimal import Decimal
import uuid


class Flat(models.Model):
    """A rentable apartment."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    number = models.CharField(max_length=50, unique=True)
    notes = models.TextField(blank=True, default='')
    current_tenant = models.ForeignKey(
        'tenancy.Tenant',
        on_delete=models.DO_NOTHING,
        db_constraint=False,
        null=True,
        blank=True,
        related_name='+'
    )

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'flats'
        ordering = ['number']

    def __str__(self):
        return f"Flat {self.number}"


class Tenant(models.Model):
    """Occupancy of a flat; older tenancies stay as inactive history."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=200)
    phone = models.CharField(max_length=20, blank=True, default='')
    aadhar_number = models.CharField(max_length=20, blank=True, default='')
    start_date = models.DateField()
    end_date = models.DateField(null=True, blank=True)
    rent_amount = models.DecimalField(max_digits=10, decimal_places=2)
    deposit = models.DecimalField(max_digits=10, decimal_places=2, default=Decimal('0'))
    flat = models.ForeignKey(
        Flat,
        on_delete=models.DO_NOTHING,
        db_constraint=False,
        related_name='tenants'
    )
    active = models.BooleanField(default=True)

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'tenants'
        ordering = ['-start_date', '-created_at']

    def __str__(self):
        return f"{self.name} ({self.flat_id})"


class RentRecord(models.Model):
    """Rent due from one tenant of one flat for one month."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    flat = models.ForeignKey(
        Flat,
        on_delete=models.DO_NOTHING,
        db_constraint=False,
        related_name='rent_records'
    )
    tenant = models.ForeignKey(
        Tenant,
        on_delete=models.DO_NOTHING,
        db_constraint=False,
        related_name='rent_records'
    )
    month = models.CharField(max_length=7, db_index=True)  # YYYY-MM
    amount = models.DecimalField(max_digits=10, decimal_places=2)
    maintenance = models.DecimalField(max_digits=10, decimal_places=2, default=Decimal('0'))
    paid = models.BooleanField(default=False)
    paid_date = models.DateField(null=True, blank=True)
    notes = models.TextField(blank=True, default='')

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'rent_records'
        ordering = ['month', 'created_at']
        constraints = [
            models.UniqueConstraint(
                fields=['flat', 'tenant', 'month'],
                name='unique_rent_per_flat_tenant_month'
            )
        ]

    def __str__(self):
        return f"{self.month} {self.tenant_id} {'paid' if self.paid else 'due'}"
