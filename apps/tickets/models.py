from django.db import models
from decimal import Decimal
import uuid


class TicketType(models.TextChoices):
    TRAIN = 'train', 'Train'
    BUS = 'bus', 'Bus'
    FLIGHT = 'flight', 'Flight'


class Ticket(models.Model):
    """Travel booking made on behalf of an account."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    # Money
    amount = models.DecimalField(max_digits=12, decimal_places=2)
    profit = models.DecimalField(max_digits=12, decimal_places=2)
    fare = models.DecimalField(max_digits=12, decimal_places=2)
    refund = models.DecimalField(max_digits=12, decimal_places=2, default=Decimal('0'))

    # Booking details
    type = models.CharField(max_length=10, choices=TicketType.choices)
    service = models.CharField(max_length=200)
    account = models.CharField(max_length=200, db_index=True)
    booking_date = models.DateField(db_index=True)
    passenger_name = models.CharField(max_length=200)
    place = models.CharField(max_length=200)
    pnr = models.CharField(max_length=50)
    remarks = models.TextField(blank=True, default='')

    # Refund processing
    refund_amount = models.DecimalField(max_digits=12, decimal_places=2, default=Decimal('0'))
    refund_date = models.DateField(null=True, blank=True)
    refund_reason = models.CharField(max_length=500, blank=True, default='')

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'tickets'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['account', 'booking_date'], name='tickets_account_date_idx'),
            models.Index(fields=['type'], name='tickets_type_idx'),
        ]

    def __str__(self):
        return f"{self.pnr} - {self.passenger_name} ({self.type})"
