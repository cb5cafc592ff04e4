import pytest
from decimal import Decimal
from django.urls import reverse
from rest_framework import status
from apps.accounts.models import User, UserRole
from apps.bookings.models import Booking


# =============================================================================
# Registration Tests
# =============================================================================

@pytest.mark.django_db
class TestRegistration:
    """Tests for POST /api/auth/register/"""

    def test_register_success(self, api_client):
        """Successfully register a new user."""
        url = reverse('users:register')
        data = {
            'username': 'newuser',
            'email': 'newuser@example.com',
            'password': 'SecurePass123!',
            'password_confirm': 'SecurePass123!',
        }
        response = api_client.post(url, data)

        assert response.status_code == status.HTTP_201_CREATED
        assert 'access' in response.data['tokens']
        assert 'refresh' in response.data['tokens']
        assert response.data['user']['role'] == UserRole.USER
        assert User.objects.filter(username='newuser').exists()

    def test_register_without_email(self, api_client):
        """Email is optional."""
        url = reverse('users:register')
        data = {
            'username': 'minimal',
            'password': 'SecurePass123!',
            'password_confirm': 'SecurePass123!',
        }
        response = api_client.post(url, data)

        assert response.status_code == status.HTTP_201_CREATED

    def test_register_duplicate_username(self, api_client, regular_user):
        """Cannot register with an existing username."""
        url = reverse('users:register')
        data = {
            'username': regular_user.username,
            'password': 'SecurePass123!',
            'password_confirm': 'SecurePass123!',
        }
        response = api_client.post(url, data)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'username' in response.data['error']

    def test_register_password_mismatch(self, api_client):
        """Registration fails when passwords don't match."""
        url = reverse('users:register')
        data = {
            'username': 'mismatch',
            'password': 'SecurePass123!',
            'password_confirm': 'DifferentPass123!',
        }
        response = api_client.post(url, data)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'message' in response.data
        assert 'password_confirm' in response.data['error']


# =============================================================================
# Login Tests
# =============================================================================

@pytest.mark.django_db
class TestLogin:
    """Tests for POST /api/auth/login/"""

    def test_login_success(self, api_client, regular_user):
        url = reverse('users:login')
        response = api_client.post(url, {'username': 'alice', 'password': 'TestPass123!'})

        assert response.status_code == status.HTTP_200_OK
        assert 'access' in response.data['tokens']
        assert response.data['user']['username'] == 'alice'

    def test_login_wrong_password(self, api_client, regular_user):
        url = reverse('users:login')
        response = api_client.post(url, {'username': 'alice', 'password': 'WrongPass123!'})

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.data['error'] == 'invalid_credentials'

    def test_login_inactive_account(self, api_client, inactive_user):
        url = reverse('users:login')
        response = api_client.post(url, {'username': 'inactive', 'password': 'TestPass123!'})

        assert response.status_code in (status.HTTP_401_UNAUTHORIZED, status.HTTP_403_FORBIDDEN)

    def test_token_refresh(self, api_client, regular_user):
        login = api_client.post(reverse('users:login'), {'username': 'alice', 'password': 'TestPass123!'})
        response = api_client.post(reverse('token_refresh'), {'refresh': login.data['tokens']['refresh']})

        assert response.status_code == status.HTTP_200_OK
        assert 'access' in response.data


@pytest.mark.django_db
class TestCurrentUser:
    """Tests for GET /api/auth/user/"""

    def test_get_current_user(self, user_client, regular_user):
        response = user_client.get(reverse('users:current-user'))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['id'] == str(regular_user.id)
        assert response.data['role'] == 'user'

    def test_unauthenticated(self, api_client):
        response = api_client.get(reverse('users:current-user'))

        assert response.status_code == status.HTTP_401_UNAUTHORIZED


# =============================================================================
# Admin User Management Tests
# =============================================================================

@pytest.mark.django_db
class TestUserAdmin:
    """Tests for /api/users/"""

    def test_list_requires_admin(self, user_client):
        response = user_client.get(reverse('user-admin:user-list'))

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_list_includes_booking_stats(self, admin_client, regular_user, user_bookings):
        response = admin_client.get(reverse('user-admin:user-list'))

        assert response.status_code == status.HTTP_200_OK
        row = next(u for u in response.data if u['id'] == str(regular_user.id))
        assert row['booking_count'] == 2
        assert Decimal(str(row['total_amount'])) == Decimal('250.00')

    def test_user_without_bookings_has_zero_total(self, admin_client, other_user):
        response = admin_client.get(reverse('user-admin:user-list'))

        row = next(u for u in response.data if u['id'] == str(other_user.id))
        assert row['booking_count'] == 0
        assert Decimal(str(row['total_amount'])) == Decimal('0')

    def test_retrieve_with_bookings(self, admin_client, regular_user, user_bookings):
        url = reverse('user-admin:user-detail', kwargs={'pk': regular_user.id})
        response = admin_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['user']['username'] == 'alice'
        assert len(response.data['bookings']) == 2

    def test_retrieve_unknown_user(self, admin_client):
        url = reverse('user-admin:user-detail', kwargs={'pk': '00000000-0000-0000-0000-000000000000'})
        response = admin_client.get(url)

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data['message'] == 'User not found'

    def test_promote_to_admin(self, admin_client, regular_user):
        url = reverse('user-admin:user-detail', kwargs={'pk': regular_user.id})
        response = admin_client.put(url, {'role': 'admin'}, format='json')

        assert response.status_code == status.HTTP_200_OK
        regular_user.refresh_from_db()
        assert regular_user.role == UserRole.ADMIN
        assert regular_user.is_admin

    def test_rename_to_taken_username(self, admin_client, regular_user, other_user):
        url = reverse('user-admin:user-detail', kwargs={'pk': regular_user.id})
        response = admin_client.patch(url, {'username': other_user.username}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_delete_cascades_bookings(self, admin_client, regular_user, user_bookings):
        url = reverse('user-admin:user-detail', kwargs={'pk': regular_user.id})
        response = admin_client.delete(url)

        assert response.status_code == status.HTTP_200_OK
        assert not User.objects.filter(id=regular_user.id).exists()
        assert not Booking.objects.filter(user_id=regular_user.id).exists()
