import pytest
from django.urls import reverse
from rest_framework import status
from apps.platforms.models import Platform


@pytest.fixture
def platform(regular_user):
    return Platform.objects.create(user=regular_user, name='Amazon', account_alias='alice.prime')


@pytest.mark.django_db
class TestPlatformCrud:
    """Tests for /api/platforms/"""

    def test_create(self, user_client, regular_user):
        response = user_client.post(
            reverse('platforms:platform-list'),
            {'name': 'Flipkart', 'account_alias': 'alice.plus'},
            format='json',
        )

        assert response.status_code == status.HTTP_201_CREATED
        assert Platform.objects.get(name='Flipkart').user == regular_user

    def test_name_required(self, user_client):
        response = user_client.post(
            reverse('platforms:platform-list'),
            {'account_alias': 'alice.plus'},
            format='json',
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'name' in response.data['error']

    def test_list_only_own(self, user_client, other_client, platform):
        assert len(user_client.get(reverse('platforms:platform-list')).data) == 1
        assert other_client.get(reverse('platforms:platform-list')).data == []

    def test_update(self, user_client, platform):
        url = reverse('platforms:platform-detail', kwargs={'pk': platform.id})
        response = user_client.put(url, {'name': 'Amazon', 'account_alias': 'alice.business'}, format='json')

        assert response.status_code == status.HTTP_200_OK
        platform.refresh_from_db()
        assert platform.account_alias == 'alice.business'

    def test_other_user_cannot_delete(self, other_client, platform):
        url = reverse('platforms:platform-detail', kwargs={'pk': platform.id})

        assert other_client.delete(url).status_code == status.HTTP_404_NOT_FOUND
        assert Platform.objects.filter(id=platform.id).exists()

    def test_delete(self, user_client, platform):
        url = reverse('platforms:platform-detail', kwargs={'pk': platform.id})
        response = user_client.delete(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['message'] == 'Platform deleted successfully'

    def test_unauthenticated(self, api_client):
        response = api_client.get(reverse('platforms:platform-list'))

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
