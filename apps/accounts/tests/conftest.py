import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User, UserRole


@pytest.fixture
def user(db):
    """Regular clerk with a stored password hint."""
    return User.objects.create_user(
        username='clerk',
        password='clerkpass',
        password_hint='usual one',
    )


@pytest.fixture
def admin_user(db):
    return User.objects.create_user(
        username='boss',
        password='bosspass',
        role=UserRole.ADMIN,
    )


@pytest.fixture
def user_inactive(db):
    return User.objects.create_user(
        username='former',
        password='formerpass',
        is_active=False,
    )


@pytest.fixture
def admin_client(admin_user):
    """API client authenticated as the admin via JWT."""
    client = APIClient()
    refresh = RefreshToken.for_user(admin_user)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client
