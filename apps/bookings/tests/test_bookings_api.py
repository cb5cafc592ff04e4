import csv
import io
import json
import pytest
from decimal import Decimal
from django.urls import reverse
from rest_framework import status
from apps.bookings.models import Booking, BookingStatus
from apps.wallet.models import TransactionType, WalletTransaction
from apps.wallet.services import get_admin_wallet


# =============================================================================
# List / Filter Tests
# =============================================================================

@pytest.mark.django_db
class TestBookingList:
    """Tests for GET /api/bookings/"""

    def test_user_sees_only_own_bookings(self, user_client, booking, other_booking):
        response = user_client.get(reverse('bookings:booking-list'))

        assert response.status_code == status.HTTP_200_OK
        ids = [b['id'] for b in response.data['results']]
        assert ids == [str(booking.id)]

    def test_admin_sees_all_bookings(self, admin_client, booking, other_booking):
        response = admin_client.get(reverse('bookings:booking-list'))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['count'] == 2

    def test_newest_first(self, user_client, booking, delivered_booking):
        response = user_client.get(reverse('bookings:booking-list'))

        ids = [b['id'] for b in response.data['results']]
        assert ids == [str(delivered_booking.id), str(booking.id)]

    def test_filter_by_status(self, user_client, booking, delivered_booking):
        response = user_client.get(reverse('bookings:booking-list'), {'status': 'delivered'})

        ids = [b['id'] for b in response.data['results']]
        assert ids == [str(delivered_booking.id)]

    def test_filter_by_model_substring(self, user_client, booking, delivered_booking):
        response = user_client.get(reverse('bookings:booking-list'), {'mobile_model': 'pixel'})

        ids = [b['id'] for b in response.data['results']]
        assert ids == [str(booking.id)]

    def test_filter_by_date_range(self, user_client, booking, delivered_booking):
        response = user_client.get(reverse('bookings:booking-list'), {
            'date_from': '2024-03-01',
            'date_to': '2024-03-31',
        })

        ids = [b['id'] for b in response.data['results']]
        assert ids == [str(booking.id)]

    def test_invalid_date_range(self, user_client):
        response = user_client.get(reverse('bookings:booking-list'), {
            'date_from': '2024-03-31',
            'date_to': '2024-03-01',
        })

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_user_filter_ignored_for_regular_user(self, user_client, booking, other_user):
        response = user_client.get(reverse('bookings:booking-list'), {'user': str(other_user.id)})

        ids = [b['id'] for b in response.data['results']]
        assert ids == [str(booking.id)]

    def test_admin_filter_by_user(self, admin_client, booking, other_booking, other_user):
        response = admin_client.get(reverse('bookings:booking-list'), {'user': str(other_user.id)})

        ids = [b['id'] for b in response.data['results']]
        assert ids == [str(other_booking.id)]

    def test_page_size(self, user_client, booking, delivered_booking):
        response = user_client.get(reverse('bookings:booking-list'), {'page_size': 1})

        assert response.data['count'] == 2
        assert len(response.data['results']) == 1
        assert response.data['next'] is not None

    def test_unauthenticated(self, api_client):
        response = api_client.get(reverse('bookings:booking-list'))

        assert response.status_code == status.HTTP_401_UNAUTHORIZED


# =============================================================================
# Create / Retrieve / Delete Tests
# =============================================================================

@pytest.mark.django_db
class TestBookingCreate:
    """Tests for POST /api/bookings/"""

    def test_create_booking(self, user_client, regular_user):
        data = {
            'booking_date': '2024-04-01',
            'mobile_model': 'OnePlus 12',
            'booking_price': '650.00',
            'platform': 'Amazon',
            'card': 'HDFC Millennia',
        }
        response = user_client.post(reverse('bookings:booking-list'), data, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['status'] == BookingStatus.PENDING
        assert response.data['user']['username'] == regular_user.username
        assert Booking.objects.filter(user=regular_user, mobile_model='OnePlus 12').exists()

    def test_create_reduces_matching_card_limit(self, user_client, user_card):
        data = {
            'booking_date': '2024-04-01',
            'mobile_model': 'OnePlus 12',
            'booking_price': '300.00',
            'platform': 'Amazon',
            'card': user_card.alias,
        }
        user_client.post(reverse('bookings:booking-list'), data, format='json')

        user_card.refresh_from_db()
        assert user_card.available_limit == Decimal('700.00')

    def test_create_with_unknown_card_alias_leaves_cards_alone(self, user_client, user_card):
        data = {
            'booking_date': '2024-04-01',
            'mobile_model': 'OnePlus 12',
            'booking_price': '300.00',
            'platform': 'Amazon',
            'card': 'Some other card',
        }
        response = user_client.post(reverse('bookings:booking-list'), data, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        user_card.refresh_from_db()
        assert user_card.available_limit == Decimal('1000.00')

    def test_missing_required_fields(self, user_client):
        response = user_client.post(
            reverse('bookings:booking-list'),
            {'mobile_model': 'OnePlus 12'},
            format='json',
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'booking_price' in response.data['error']
        assert 'message' in response.data


@pytest.mark.django_db
class TestBookingRetrieveDelete:

    def test_retrieve_own(self, user_client, booking):
        url = reverse('bookings:booking-detail', kwargs={'pk': booking.id})
        response = user_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['mobile_model'] == 'Pixel 8'

    def test_retrieve_someone_elses_is_not_found(self, user_client, other_booking):
        url = reverse('bookings:booking-detail', kwargs={'pk': other_booking.id})
        response = user_client.get(url)

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data['error'] == 'booking_not_found'

    def test_delete_own(self, user_client, booking):
        url = reverse('bookings:booking-detail', kwargs={'pk': booking.id})
        response = user_client.delete(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['message'] == 'Booking deleted successfully'
        assert not Booking.objects.filter(id=booking.id).exists()

    def test_delete_someone_elses(self, user_client, other_booking):
        url = reverse('bookings:booking-detail', kwargs={'pk': other_booking.id})
        response = user_client.delete(url)

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert Booking.objects.filter(id=other_booking.id).exists()

    def test_admin_deletes_any(self, admin_client, other_booking):
        url = reverse('bookings:booking-detail', kwargs={'pk': other_booking.id})
        response = admin_client.delete(url)

        assert response.status_code == status.HTTP_200_OK


# =============================================================================
# Update Tests
# =============================================================================

@pytest.mark.django_db
class TestBookingUpdate:
    """Tests for PUT /api/bookings/{id}/"""

    def test_user_updates_own_fields(self, user_client, booking):
        url = reverse('bookings:booking-detail', kwargs={'pk': booking.id})
        response = user_client.put(url, {'notes': 'Delivered late', 'selling_price': '550.00'}, format='json')

        assert response.status_code == status.HTTP_200_OK
        booking.refresh_from_db()
        assert booking.notes == 'Delivered late'
        assert booking.selling_price == Decimal('550.00')

    def test_user_cannot_change_restricted_fields(self, user_client, booking, dealer):
        url = reverse('bookings:booking-detail', kwargs={'pk': booking.id})
        data = {
            'notes': 'ok',
            'dealer': 'Sneaky Dealer',
            'booking_id': 'OD123',
            'assigned_to_dealer': str(dealer.id),
            'dealer_amount': '999.00',
            'status': 'payment_done',
        }
        response = user_client.put(url, data, format='json')

        assert response.status_code == status.HTTP_200_OK
        booking.refresh_from_db()
        assert booking.notes == 'ok'
        assert booking.dealer == ''
        assert booking.booking_id == ''
        assert booking.assigned_to_dealer is None
        assert booking.dealer_amount is None
        assert booking.status == BookingStatus.PENDING

    def test_user_invalid_restricted_value_is_dropped_not_rejected(self, user_client, booking):
        url = reverse('bookings:booking-detail', kwargs={'pk': booking.id})
        response = user_client.put(url, {'status': 'not-a-status'}, format='json')

        assert response.status_code == status.HTTP_200_OK

    def test_admin_changes_restricted_fields(self, admin_client, booking, dealer):
        url = reverse('bookings:booking-detail', kwargs={'pk': booking.id})
        data = {
            'dealer': dealer.name,
            'booking_id': 'OD123',
            'assigned_to_dealer': str(dealer.id),
            'dealer_amount': '520.00',
            'status': 'given_to_dealer',
        }
        response = admin_client.put(url, data, format='json')

        assert response.status_code == status.HTTP_200_OK
        booking.refresh_from_db()
        assert booking.booking_id == 'OD123'
        assert booking.assigned_to_dealer == dealer
        assert booking.dealer_amount == Decimal('520.00')
        assert booking.status == BookingStatus.GIVEN_TO_DEALER

    def test_update_someone_elses(self, user_client, other_booking):
        url = reverse('bookings:booking-detail', kwargs={'pk': other_booking.id})
        response = user_client.put(url, {'notes': 'mine now'}, format='json')

        assert response.status_code == status.HTTP_404_NOT_FOUND


# =============================================================================
# Status / Payout Tests
# =============================================================================

@pytest.mark.django_db
class TestBookingStatus:
    """Tests for PATCH /api/bookings/{id}/status/"""

    def test_given_to_admin_stamps_time(self, user_client, booking):
        url = reverse('bookings:booking-status', kwargs={'pk': booking.id})
        response = user_client.patch(url, {'status': 'given_to_admin'}, format='json')

        assert response.status_code == status.HTTP_200_OK
        booking.refresh_from_db()
        assert booking.status == BookingStatus.GIVEN_TO_ADMIN
        assert booking.given_to_admin_at is not None

    def test_any_transition_allowed(self, user_client, delivered_booking):
        url = reverse('bookings:booking-status', kwargs={'pk': delivered_booking.id})
        response = user_client.patch(url, {'status': 'pending'}, format='json')

        assert response.status_code == status.HTTP_200_OK
        delivered_booking.refresh_from_db()
        assert delivered_booking.status == BookingStatus.PENDING
        assert delivered_booking.given_to_admin_at is None

    def test_invalid_status(self, user_client, booking):
        url = reverse('bookings:booking-status', kwargs={'pk': booking.id})
        response = user_client.patch(url, {'status': 'lost'}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST


@pytest.mark.django_db
class TestMarkUserPaid:
    """Tests for PATCH /api/bookings/{id}/mark-user-paid/"""

    def test_requires_admin(self, user_client, booking):
        url = reverse('bookings:booking-mark-user-paid', kwargs={'pk': booking.id})
        response = user_client.patch(url, {}, format='json')

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_selling_price_override_debits_wallet(self, admin_client, booking):
        url = reverse('bookings:booking-mark-user-paid', kwargs={'pk': booking.id})
        response = admin_client.patch(url, {'selling_price': 600}, format='json')

        assert response.status_code == status.HTTP_200_OK
        booking.refresh_from_db()
        assert booking.selling_price == Decimal('600.00')
        assert booking.user_payment_given is True
        assert booking.user_payment_date is not None
        assert booking.status == BookingStatus.PAYMENT_DONE

        wallet = get_admin_wallet()
        assert wallet.balance == Decimal('-600.00')
        entry = WalletTransaction.objects.get(related_booking=booking)
        assert entry.type == TransactionType.DEBIT
        assert entry.amount == Decimal('600.00')

    def test_falls_back_to_booking_price(self, admin_client, booking):
        url = reverse('bookings:booking-mark-user-paid', kwargs={'pk': booking.id})
        admin_client.patch(url, {}, format='json')

        booking.refresh_from_db()
        assert booking.selling_price == booking.booking_price
        assert get_admin_wallet().balance == Decimal('-500.00')

    def test_negative_override_is_ignored(self, admin_client, booking):
        booking.selling_price = Decimal('450.00')
        booking.save()
        url = reverse('bookings:booking-mark-user-paid', kwargs={'pk': booking.id})
        admin_client.patch(url, {'selling_price': -10}, format='json')

        booking.refresh_from_db()
        assert booking.selling_price == Decimal('450.00')
        assert get_admin_wallet().balance == Decimal('-450.00')

    def test_zero_payout_rejected(self, admin_client, booking):
        booking.booking_price = Decimal('0.00')
        booking.save()
        url = reverse('bookings:booking-mark-user-paid', kwargs={'pk': booking.id})
        response = admin_client.patch(url, {}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        booking.refresh_from_db()
        assert booking.user_payment_given is False
        assert not WalletTransaction.objects.exists()

    def test_unknown_booking(self, admin_client):
        url = reverse('bookings:booking-mark-user-paid', kwargs={'pk': '00000000-0000-0000-0000-000000000000'})
        response = admin_client.patch(url, {}, format='json')

        assert response.status_code == status.HTTP_404_NOT_FOUND


# =============================================================================
# Export Tests
# =============================================================================

@pytest.mark.django_db
class TestBookingExport:
    """Tests for GET /api/bookings/export/"""

    def test_csv_export(self, user_client, booking, other_booking):
        response = user_client.get(reverse('bookings:booking-export'))

        assert response.status_code == status.HTTP_200_OK
        assert response['Content-Type'].startswith('text/csv')
        assert 'attachment' in response['Content-Disposition']
        content = response.content.decode('utf-8')
        assert content.startswith('\ufeff')
        rows = list(csv.reader(io.StringIO(content.lstrip('\ufeff'))))
        assert rows[0][0] == 'Booking Date'
        assert len(rows) == 2
        assert 'Pixel 8' in rows[1]

    def test_json_export_in_range(self, user_client, booking, delivered_booking):
        response = user_client.get(reverse('bookings:booking-export'), {
            'export_format': 'json',
            'date_from': '2024-03-01',
        })

        assert response.status_code == status.HTTP_200_OK
        data = json.loads(response.content)
        assert [row['mobile_model'] for row in data] == ['Pixel 8']

    def test_admin_export_includes_everyone(self, admin_client, booking, other_booking):
        response = admin_client.get(reverse('bookings:booking-export'), {'export_format': 'json'})

        data = json.loads(response.content)
        assert {row['user.username'] for row in data} == {'alice', 'bob'}

    def test_unknown_format(self, user_client):
        response = user_client.get(reverse('bookings:booking-export'), {'export_format': 'xml'})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
