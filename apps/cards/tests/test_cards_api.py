import pytest
from decimal import Decimal
from django.urls import reverse
from rest_framework import status
from apps.cards.models import Card, CardType


@pytest.fixture
def card(regular_user):
    return Card.objects.create(
        user=regular_user,
        alias='HDFC Millennia',
        bank_name='HDFC',
        last_four='1234',
        card_type=CardType.CREDIT,
        limit=Decimal('1000.00'),
        available_limit=Decimal('400.00'),
    )


@pytest.fixture
def other_card(other_user):
    return Card.objects.create(
        user=other_user,
        alias='ICICI Amazon Pay',
        bank_name='ICICI',
        last_four='9876',
        card_type=CardType.CREDIT,
        limit=Decimal('500.00'),
        available_limit=Decimal('500.00'),
    )


@pytest.mark.django_db
class TestCardCrud:
    """Tests for /api/cards/"""

    def test_create_defaults_available_to_limit(self, user_client, regular_user):
        data = {
            'alias': 'SBI Cashback',
            'bank_name': 'SBI',
            'last_four': '4321',
            'card_type': 'credit',
            'limit': '2500.00',
        }
        response = user_client.post(reverse('cards:card-list'), data, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        card = Card.objects.get(alias='SBI Cashback')
        assert card.user == regular_user
        assert card.available_limit == Decimal('2500.00')

    def test_create_with_explicit_available(self, user_client):
        data = {
            'alias': 'SBI Cashback',
            'bank_name': 'SBI',
            'last_four': '4321',
            'card_type': 'credit',
            'limit': '2500.00',
            'available_limit': '1800.00',
        }
        user_client.post(reverse('cards:card-list'), data, format='json')

        assert Card.objects.get(alias='SBI Cashback').available_limit == Decimal('1800.00')

    def test_last_four_too_long(self, user_client):
        data = {
            'alias': 'Bad',
            'bank_name': 'SBI',
            'last_four': '12345',
            'card_type': 'debit',
        }
        response = user_client.post(reverse('cards:card-list'), data, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_list_only_own(self, user_client, card, other_card):
        response = user_client.get(reverse('cards:card-list'))

        assert [c['id'] for c in response.data] == [str(card.id)]

    def test_update_own(self, user_client, card):
        url = reverse('cards:card-detail', kwargs={'pk': card.id})
        response = user_client.patch(url, {'is_active': False}, format='json')

        assert response.status_code == status.HTTP_200_OK
        card.refresh_from_db()
        assert card.is_active is False

    def test_cannot_touch_someone_elses(self, user_client, other_card):
        url = reverse('cards:card-detail', kwargs={'pk': other_card.id})

        assert user_client.get(url).status_code == status.HTTP_404_NOT_FOUND
        assert user_client.delete(url).status_code == status.HTTP_404_NOT_FOUND
        assert Card.objects.filter(id=other_card.id).exists()

    def test_delete_own(self, user_client, card):
        url = reverse('cards:card-detail', kwargs={'pk': card.id})
        response = user_client.delete(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['message'] == 'Card deleted successfully'
        assert not Card.objects.filter(id=card.id).exists()


@pytest.mark.django_db
class TestAmountPay:
    """Tests for POST /api/cards/amountpay/"""

    def test_raises_available_limit(self, user_client, card):
        response = user_client.post(
            reverse('cards:card-amountpay'),
            {'id': str(card.id), 'amount': '250.00'},
            format='json',
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.data['available_limit'] == Decimal('650.00')
        card.refresh_from_db()
        assert card.available_limit == Decimal('650.00')

    def test_someone_elses_card(self, user_client, other_card):
        response = user_client.post(
            reverse('cards:card-amountpay'),
            {'id': str(other_card.id), 'amount': '10.00'},
            format='json',
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND
        other_card.refresh_from_db()
        assert other_card.available_limit == Decimal('500.00')

    def test_non_positive_amount(self, user_client, card):
        response = user_client.post(
            reverse('cards:card-amountpay'),
            {'id': str(card.id), 'amount': '0'},
            format='json',
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
