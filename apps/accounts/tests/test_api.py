import uuid

import pytest
from django.urls import reverse
from rest_framework import status
from apps.accounts.models import User


# =============================================================================
# Login Tests
# =============================================================================

@pytest.mark.django_db
class TestLogin:
    """Tests for POST /api/auth/login/ and /api/auth/token/"""

    def test_login_success(self, api_client, user):
        url = reverse('accounts:login')
        response = api_client.post(url, {'username': 'clerk', 'password': 'clerkpass'})

        assert response.status_code == status.HTTP_200_OK
        assert 'access' in response.data['tokens']
        assert response.data['user']['username'] == 'clerk'

    def test_login_wrong_password(self, api_client, user):
        url = reverse('accounts:login')
        response = api_client.post(url, {'username': 'clerk', 'password': 'nope'})

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.data['message'] == 'Invalid username or password'

    def test_login_inactive(self, api_client, user_inactive):
        url = reverse('accounts:login')
        response = api_client.post(url, {'username': 'former', 'password': 'formerpass'})

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_login_missing_fields(self, api_client):
        url = reverse('accounts:login')
        response = api_client.post(url, {'username': 'clerk'})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'message' in response.data

    def test_token_obtain(self, api_client, user):
        url = reverse('accounts:token-obtain')
        response = api_client.post(url, {'username': 'clerk', 'password': 'clerkpass'})

        assert response.status_code == status.HTTP_200_OK
        assert 'access' in response.data
        assert 'refresh' in response.data


# =============================================================================
# Current User Tests
# =============================================================================

@pytest.mark.django_db
class TestCurrentUser:

    def test_me(self, authenticated_client, user):
        response = authenticated_client.get(reverse('accounts:current-user'))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['username'] == user.username
        assert 'password' not in response.data

    def test_me_unauthenticated(self, api_client):
        response = api_client.get(reverse('accounts:current-user'))

        assert response.status_code == status.HTTP_401_UNAUTHORIZED


# =============================================================================
# User Administration Tests
# =============================================================================

@pytest.mark.django_db
class TestUserAdministration:
    """Tests for /api/users/ endpoints."""

    def test_list_users_admin(self, admin_client, user, admin_user):
        response = admin_client.get(reverse('accounts:user-list'))

        assert response.status_code == status.HTTP_200_OK
        usernames = [u['username'] for u in response.data]
        assert set(usernames) == {'clerk', 'boss'}
        assert all('password' not in u for u in response.data)

    def test_list_users_forbidden_for_regular_user(self, authenticated_client):
        response = authenticated_client.get(reverse('accounts:user-list'))

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_reset_password(self, admin_client, user):
        url = reverse('accounts:reset-password', kwargs={'pk': user.id})
        response = admin_client.post(url, {'new_password': 'freshpass', 'password_hint': 'fresh'})

        assert response.status_code == status.HTTP_200_OK
        user.refresh_from_db()
        assert user.check_password('freshpass')
        assert user.password_hint == 'fresh'

    def test_reset_password_too_short(self, admin_client, user):
        url = reverse('accounts:reset-password', kwargs={'pk': user.id})
        response = admin_client.post(url, {'new_password': '12345'})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        user.refresh_from_db()
        assert user.check_password('clerkpass')

    def test_reset_password_unknown_user(self, admin_client):
        url = reverse('accounts:reset-password', kwargs={'pk': uuid.uuid4()})
        response = admin_client.post(url, {'new_password': 'freshpass'})

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data['message'] == 'User not found'

    def test_reset_password_forbidden_for_regular_user(self, authenticated_client, admin_user):
        url = reverse('accounts:reset-password', kwargs={'pk': admin_user.id})
        response = authenticated_client.post(url, {'new_password': 'hijacked'})

        assert response.status_code == status.HTTP_403_FORBIDDEN
        admin_user.refresh_from_db()
        assert admin_user.check_password('bosspass')


@pytest.mark.django_db
class TestUserManager:

    def test_create_superuser_gets_admin_role(self):
        admin = User.objects.create_superuser(username='root', password='rootpass')

        assert admin.role == 'admin'
        assert admin.is_admin
        assert admin.is_staff
