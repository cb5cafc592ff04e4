import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User, UserRole


def _client_for(user):
    client = APIClient()
    refresh = RefreshToken.for_user(user)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def regular_user(db):
    """Create and return a user with the regular role."""
    return User.objects.create_user(
        username='alice',
        password='TestPass123!',
        email='alice@example.com',
    )


@pytest.fixture
def other_user(db):
    """Create and return a second regular user."""
    return User.objects.create_user(
        username='bob',
        password='TestPass123!',
    )


@pytest.fixture
def admin_user(db):
    """Create and return a user with the admin role."""
    return User.objects.create_user(
        username='admin',
        password='AdminPass123!',
        role=UserRole.ADMIN,
    )


@pytest.fixture
def user_client(regular_user):
    """Return API client authenticated as the regular user."""
    return _client_for(regular_user)


@pytest.fixture
def other_client(other_user):
    """Return API client authenticated as the second user."""
    return _client_for(other_user)


@pytest.fixture
def admin_client(admin_user):
    """Return API client authenticated as the admin."""
    return _client_for(admin_user)


@pytest.fixture
def dealer(db):
    """Create and return a dealer with no batches yet."""
    from apps.dealers.models import Dealer
    return Dealer.objects.create(name='Metro Mobiles', phone='9876543210')
