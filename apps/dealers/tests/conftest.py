import pytest
from decimal import Decimal
from datetime import date
from apps.bookings.models import Booking, BookingStatus


def _booking(user, model, price):
    return Booking.objects.create(
        user=user,
        booking_date=date(2024, 3, 1),
        mobile_model=model,
        booking_price=Decimal(price),
        platform='Amazon',
        card='HDFC Millennia',
        status=BookingStatus.DELIVERED,
    )


@pytest.fixture
def delivered_pair(regular_user):
    """Two delivered bookings ready to hand to a dealer."""
    return [
        _booking(regular_user, 'Pixel 8', '90.00'),
        _booking(regular_user, 'Galaxy S24', '190.00'),
    ]


@pytest.fixture
def batch(dealer, delivered_pair):
    """A001: the delivered pair assigned for 100 + 200."""
    from apps.dealers.services import BatchSettlementService
    first, second = delivered_pair
    return BatchSettlementService.create_batch(
        dealer_id=dealer.id,
        booking_amounts={first.id: Decimal('100.00'), second.id: Decimal('200.00')},
    )


@pytest.fixture
def make_booking(regular_user):
    """Factory for extra delivered bookings."""
    def make(model, price):
        return _booking(regular_user, model, price)
    return make
