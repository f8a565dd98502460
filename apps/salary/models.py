from django.db import models
from decimal import Decimal
import uuid


class SalaryRecord(models.Model):
    """
    One year of salary history.

    Amounts are whole currency units; ``components`` holds the annual and
    monthly split of ``final_salary`` keyed by component name.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    year = models.PositiveIntegerField(unique=True)

    previous_salary = models.DecimalField(max_digits=12, decimal_places=2)
    hike_percentage = models.DecimalField(max_digits=6, decimal_places=2, default=Decimal('0'))
    revision_percentage = models.DecimalField(max_digits=6, decimal_places=2, default=Decimal('0'))
    revision_amount = models.DecimalField(max_digits=12, decimal_places=2, default=Decimal('0'))
    total_percentage = models.DecimalField(max_digits=6, decimal_places=2, default=Decimal('0'))
    final_salary = models.DecimalField(max_digits=12, decimal_places=2)
    bonus_percentage = models.DecimalField(max_digits=6, decimal_places=2, default=Decimal('0'))
    bonus_amount = models.DecimalField(max_digits=12, decimal_places=2, default=Decimal('0'))

    components = models.JSONField(default=dict, blank=True)
    notes = models.TextField(blank=True, default='')
    effective_date = models.DateField(null=True, blank=True)

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'salary_records'
        ordering = ['-year']

    def __str__(self):
        return f"{self.year}: {self.final_salary}"
