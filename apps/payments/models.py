from django.db import models
import uuid


class Payment(models.Model):
    """
    Money received from an account.

    ``tickets`` holds the ids of the tickets this payment settles. The ids
    are not enforced against the tickets table; deleting a ticket leaves
    the payment untouched. Partial payments usually carry no tickets and
    only reduce the account's outstanding due.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    date = models.DateField(db_index=True)
    amount = models.DecimalField(max_digits=12, decimal_places=2)
    is_partial = models.BooleanField(default=False)
    period = models.CharField(max_length=200)
    account = models.CharField(max_length=200, blank=True, default='', db_index=True)
    tickets = models.JSONField(default=list, blank=True)

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'payments'
        ordering = ['-date', '-created_at']

    def __str__(self):
        return f"{self.date} {self.amount} ({self.period})"
