import pytest
from decimal import Decimal
from datetime import date
from apps.accounts.models import User
from apps.bookings.models import Booking


@pytest.fixture
def inactive_user(db):
    """Create and return a deactivated user."""
    return User.objects.create_user(
        username='inactive',
        password='TestPass123!',
        is_active=False,
    )


@pytest.fixture
def user_bookings(regular_user):
    """Two bookings owned by the regular user, 250 in total."""
    return [
        Booking.objects.create(
            user=regular_user,
            booking_date=date(2024, 1, 10),
            mobile_model='Pixel 8',
            booking_price=Decimal('100.00'),
            platform='Amazon',
            card='HDFC Millennia',
        ),
        Booking.objects.create(
            user=regular_user,
            booking_date=date(2024, 1, 12),
            mobile_model='iPhone 15',
            booking_price=Decimal('150.00'),
            platform='Flipkart',
            card='HDFC Millennia',
        ),
    ]
