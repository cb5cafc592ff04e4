"""
Field-level write policy for bookings.

Each role maps to the set of booking fields it may change through the
general update endpoint. Keys outside the caller's set are dropped from
the request rather than rejected.
"""

from apps.accounts.models import UserRole

OWNER_EDITABLE_FIELDS = frozenset({
    'booking_date',
    'mobile_model',
    'booking_price',
    'selling_price',
    'platform',
    'card',
    'notes',
})

ADMIN_ONLY_FIELDS = frozenset({
    'booking_account',
    'dealer',
    'booking_id',
    'assigned_to_dealer',
    'dealer_amount',
    'status',
})

BOOKING_FIELD_POLICY = {
    UserRole.USER: OWNER_EDITABLE_FIELDS,
    UserRole.ADMIN: OWNER_EDITABLE_FIELDS | ADMIN_ONLY_FIELDS,
}


def editable_fields_for(user):
    return BOOKING_FIELD_POLICY.get(user.role, OWNER_EDITABLE_FIELDS)


def filter_update_data(user, data):
    """Return only the entries of ``data`` that ``user`` may write."""
    allowed = editable_fields_for(user)
    return {key: value for key, value in data.items() if key in allowed}
