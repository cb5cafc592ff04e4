# ==========================================
# apps/bookings/admin.py
# ==========================================

from django.contrib import admin
from django.utils.html import format_html
from .models import Booking, BookingStatus


@admin.register(Booking)
class BookingAdmin(admin.ModelAdmin):
    """
    Admin interface for bookings.

    Settlement fields are read-only here; they are written by the batch
    and payout services together with the wallet.
    """

    list_display = [
        'mobile_model',
        'user',
        'booking_date',
        'booking_price',
        'selling_price',
        'platform',
        'status_badge',
        'dealer',
    ]
    list_filter = ['status', 'platform', 'dealer_payment_received', 'user_payment_given', 'booking_date']
    search_fields = ['mobile_model', 'booking_id', 'user__username', 'card', 'dealer']
    date_hierarchy = 'booking_date'
    raw_id_fields = ['user', 'assigned_to_dealer', 'dealer_batch']

    fieldsets = (
        ('Booking', {
            'fields': (
                'user', 'booking_date', 'mobile_model', 'booking_price', 'selling_price',
                'platform', 'booking_account', 'card', 'booking_id', 'notes', 'status',
            )
        }),
        ('Dealer', {
            'fields': ('dealer', 'assigned_to_dealer', 'dealer_batch', 'dealer_amount'),
        }),
        ('Settlement', {
            'fields': (
                'given_to_admin_at', 'assigned_to_dealer_at',
                'dealer_payment_received', 'dealer_payment_date',
                'user_payment_given', 'user_payment_date',
            ),
            'classes': ('collapse',),
        }),
    )
    readonly_fields = [
        'given_to_admin_at',
        'assigned_to_dealer_at',
        'dealer_payment_received',
        'dealer_payment_date',
        'user_payment_given',
        'user_payment_date',
    ]

    def status_badge(self, obj):
        colors = {
            BookingStatus.PENDING: ('#E5C49A', '#2C1810'),
            BookingStatus.DELIVERED: ('#C9A66B', 'white'),
            BookingStatus.GIVEN_TO_ADMIN: ('#A47449', 'white'),
            BookingStatus.GIVEN_TO_DEALER: ('#7A5C3E', 'white'),
            BookingStatus.PAYMENT_DONE: ('#6B8E5E', 'white'),
        }
        bg, fg = colors.get(obj.status, ('#ccc', '#666'))
        return format_html(
            '<span style="background: {}; color: {}; padding: 3px 8px; '
            'border-radius: 10px; font-size: 11px;">{}</span>',
            bg, fg, obj.get_status_display()
        )
    status_badge.short_description = 'Status'
    status_badge.admin_order_field = 'status'
