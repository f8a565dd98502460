from django.db import models
from django.conf import settings
import uuid


class NoteFormat(models.TextChoices):
    TEXT = 'text', 'Text'
    TABLE = 'table', 'Table'


class Note(models.Model):
    """
    Free-form note owned by one user.

    Table notes keep their grid in ``table_data`` as
    ``{"headers": [...], "rows": [[...], ...]}`` and may leave ``content`` empty.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    title = models.CharField(max_length=200, blank=True, default='')
    content = models.TextField(blank=True, default='')
    format = models.CharField(max_length=10, choices=NoteFormat.choices, default=NoteFormat.TEXT)
    table_data = models.JSONField(null=True, blank=True)
    color = models.CharField(max_length=20, blank=True, default='')
    labels = models.JSONField(default=list, blank=True)
    pinned = models.BooleanField(default=False, db_index=True)

    owner = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        related_name='notes'
    )

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'notes'
        ordering = ['-pinned', '-created_at']

    def __str__(self):
        return self.title or self.content[:40]
