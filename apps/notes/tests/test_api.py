import uuid

import pytest
from datetime import timedelta
from django.utils import timezone
from django.urls import reverse
from rest_framework import status
from apps.notes.models import Note


@pytest.mark.django_db
class TestNoteList:

    def test_pinned_first_then_newest(self, authenticated_client, make_note):
        older = make_note(title='older')
        make_note(title='pinned', pinned=True)
        make_note(title='newer')
        Note.objects.filter(id=older.id).update(created_at=timezone.now() - timedelta(days=1))

        response = authenticated_client.get(reverse('notes:note-list'))

        assert response.status_code == status.HTTP_200_OK
        assert [n['title'] for n in response.data] == ['pinned', 'newer', 'older']

    def test_pinned_filter(self, authenticated_client, make_note):
        make_note(title='loose')
        make_note(title='pinned', pinned=True)

        response = authenticated_client.get(reverse('notes:note-list'), {'pinned': 'true'})

        assert [n['title'] for n in response.data] == ['pinned']

    def test_only_own_notes(self, authenticated_client, make_note, other_user):
        make_note(title='mine')
        make_note(title='theirs', owner=other_user)

        response = authenticated_client.get(reverse('notes:note-list'))

        assert [n['title'] for n in response.data] == ['mine']

    def test_requires_authentication(self, api_client):
        response = api_client.get(reverse('notes:note-list'))

        assert response.status_code == status.HTTP_401_UNAUTHORIZED


@pytest.mark.django_db
class TestNoteWrites:

    def test_create_text_note(self, authenticated_client, user):
        response = authenticated_client.post(reverse('notes:note-list'), {
            'title': 'Visa',
            'content': 'Collect passport copies',
            'labels': ['docs', 'docs', ' urgent '],
            'color': '#fde68a',
        }, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['labels'] == ['docs', 'urgent']
        assert Note.objects.get(id=response.data['id']).owner == user

    def test_text_note_needs_content(self, authenticated_client):
        response = authenticated_client.post(reverse('notes:note-list'), {'title': 'Empty'}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['message'].startswith('content')

    def test_table_note_without_content(self, authenticated_client):
        response = authenticated_client.post(reverse('notes:note-list'), {
            'title': 'Rates',
            'format': 'table',
            'table_data': {'headers': ['Route', 'Fare'], 'rows': [['DEL-BOM', '4500']]},
        }, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['table_data']['rows'] == [['DEL-BOM', '4500']]

    def test_table_note_needs_table(self, authenticated_client):
        response = authenticated_client.post(reverse('notes:note-list'), {
            'title': 'Rates', 'format': 'table',
        }, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_table_rows_wider_than_headers(self, authenticated_client):
        response = authenticated_client.post(reverse('notes:note-list'), {
            'format': 'table',
            'table_data': {'headers': ['Route'], 'rows': [['DEL-BOM', '4500']]},
        }, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_pin_via_patch(self, authenticated_client, make_note):
        note = make_note()
        url = reverse('notes:note-detail', kwargs={'pk': note.id})

        response = authenticated_client.patch(url, {'pinned': True}, format='json')

        assert response.status_code == status.HTTP_200_OK
        note.refresh_from_db()
        assert note.pinned is True

    def test_cannot_touch_other_users_note(self, authenticated_client, make_note, other_user):
        note = make_note(owner=other_user)
        url = reverse('notes:note-detail', kwargs={'pk': note.id})

        response = authenticated_client.patch(url, {'pinned': True}, format='json')

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data['message'] == 'Note not found'

    def test_delete(self, authenticated_client, make_note):
        note = make_note()
        url = reverse('notes:note-detail', kwargs={'pk': note.id})

        response = authenticated_client.delete(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['message'] == 'Note deleted successfully'
        assert not Note.objects.exists()

    def test_delete_missing(self, authenticated_client):
        url = reverse('notes:note-detail', kwargs={'pk': uuid.uuid4()})

        response = authenticated_client.delete(url)

        assert response.status_code == status.HTTP_404_NOT_FOUND
