import pytest
from apps.notes.models import Note


@pytest.fixture
def make_note(user):
    """Factory fixture creating notes owned by ``user`` unless told otherwise."""

    def _make(**overrides):
        data = {
            'title': 'Reminder',
            'content': 'Call the bus operator',
            'owner': user,
        }
        data.update(overrides)
        return Note.objects.create(**data)

    return _make
