import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def user(db):
    return User.objects.create_user(username='clerk', password='clerkpass')


@pytest.fixture
def other_user(db):
    return User.objects.create_user(username='colleague', password='colleaguepass')


@pytest.fixture
def authenticated_client(api_client, user):
    """Return an API client authenticated as ``user`` via JWT."""
    refresh = RefreshToken.for_user(user)
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return api_client
