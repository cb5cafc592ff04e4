import pytest
from decimal import Decimal
from datetime import date
from apps.bookings.models import Booking, BookingStatus
from apps.cards.models import Card, CardType


@pytest.fixture
def user_card(regular_user):
    """Credit card with 1000 of available limit."""
    return Card.objects.create(
        user=regular_user,
        alias='HDFC Millennia',
        bank_name='HDFC',
        last_four='1234',
        card_type=CardType.CREDIT,
        limit=Decimal('1000.00'),
        available_limit=Decimal('1000.00'),
    )


@pytest.fixture
def booking(regular_user):
    """Pending booking owned by the regular user."""
    return Booking.objects.create(
        user=regular_user,
        booking_date=date(2024, 3, 1),
        mobile_model='Pixel 8',
        booking_price=Decimal('500.00'),
        platform='Amazon',
        card='HDFC Millennia',
    )


@pytest.fixture
def other_booking(other_user):
    """Booking owned by somebody else."""
    return Booking.objects.create(
        user=other_user,
        booking_date=date(2024, 3, 5),
        mobile_model='iPhone 15',
        booking_price=Decimal('800.00'),
        platform='Flipkart',
        card='ICICI Amazon Pay',
    )


@pytest.fixture
def delivered_booking(regular_user):
    return Booking.objects.create(
        user=regular_user,
        booking_date=date(2024, 2, 20),
        mobile_model='Galaxy S24',
        booking_price=Decimal('700.00'),
        platform='Flipkart',
        card='HDFC Millennia',
        status=BookingStatus.DELIVERED,
    )
