"""
Inventory Queries
=================

Read-only views over bookings for the inventory screens and dashboard
counters.

Classes:
    InventoryQueries: Static query methods, scoped by role.

Example::

    from apps.inventory.queries import InventoryQueries

    stats = InventoryQueries.stats_for(request.user)
    # admin: {'total_bookings': 12, 'mobiles_with_admin': 3, ...}
"""

from django.db.models import Count, Q

from apps.bookings.models import Booking, BookingStatus
from apps.dealers.models import BatchStatus, DealerBatch

# Dealer has paid for the phone, owner not yet paid out.
AWAITING_USER_PAYOUT = Q(dealer_payment_received=True, user_payment_given=False)


class InventoryQueries:
    """
    Booking inventory and counters.

    Methods:
        user_inventory: Caller's delivered phones.
        admin_inventory: Every phone handed to the admin.
        stats_for: Dashboard counters, admin or per-user.
    """

    @staticmethod
    def user_inventory(user):
        return Booking.objects.filter(
            user=user,
            status=BookingStatus.DELIVERED,
        ).order_by('-created_at')

    @staticmethod
    def admin_inventory():
        return Booking.objects.filter(
            status=BookingStatus.GIVEN_TO_ADMIN,
        ).select_related('user').order_by('-given_to_admin_at')

    @staticmethod
    def _status_counts(queryset):
        return queryset.aggregate(
            total_bookings=Count('id'),
            mobiles_delivered=Count('id', filter=Q(status=BookingStatus.DELIVERED)),
            given_to_admin=Count('id', filter=Q(status=BookingStatus.GIVEN_TO_ADMIN)),
            mobiles_assigned_to_dealers=Count('id', filter=Q(status=BookingStatus.GIVEN_TO_DEALER)),
            awaiting_payout=Count('id', filter=AWAITING_USER_PAYOUT),
        )

    @staticmethod
    def admin_stats():
        counts = InventoryQueries._status_counts(Booking.objects.all())
        return {
            'total_bookings': counts['total_bookings'],
            'mobiles_delivered': counts['mobiles_delivered'],
            'mobiles_with_admin': counts['given_to_admin'],
            'mobiles_assigned_to_dealers': counts['mobiles_assigned_to_dealers'],
            'dealer_payment_pending': DealerBatch.objects.exclude(
                status=BatchStatus.COMPLETED_PAYMENT
            ).count(),
            'user_payment_pending': counts['awaiting_payout'],
        }

    @staticmethod
    def user_stats(user):
        counts = InventoryQueries._status_counts(Booking.objects.filter(user=user))
        return {
            'total_bookings': counts['total_bookings'],
            'mobiles_delivered': counts['mobiles_delivered'],
            'mobiles_given_to_admin': counts['given_to_admin'],
            'mobiles_assigned_to_dealers': counts['mobiles_assigned_to_dealers'],
            'payment_pending': counts['awaiting_payout'],
        }

    @staticmethod
    def stats_for(user):
        if user.is_admin:
            return InventoryQueries.admin_stats()
        return InventoryQueries.user_stats(user)
