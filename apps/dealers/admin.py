# ==========================================
# apps/dealers/admin.py
# ==========================================

from django.contrib import admin
from django.utils.html import format_html
from .models import Dealer, DealerBatch, DealerBatchPayment, BatchSequence, BatchStatus


@admin.register(Dealer)
class DealerAdmin(admin.ModelAdmin):
    list_display = ['name', 'phone', 'email', 'total_mobiles', 'total_amount', 'paid_amount', 'created_at']
    search_fields = ['name', 'phone', 'email']
    readonly_fields = ['total_mobiles', 'total_amount', 'paid_amount', 'created_at', 'updated_at']


class DealerBatchPaymentInline(admin.TabularInline):
    """Payments are append-only; they are recorded by the settlement service."""
    model = DealerBatchPayment
    extra = 0
    fields = ['amount', 'notes', 'date']
    readonly_fields = fields

    def has_add_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False


@admin.register(DealerBatch)
class DealerBatchAdmin(admin.ModelAdmin):
    """
    Admin interface for dealer batches.

    Read-only: batches are created and settled through the API so that
    dealer totals and the wallet stay in step.
    """

    list_display = [
        'batch_id',
        'dealer',
        'total_amount',
        'paid_amount',
        'remaining_amount',
        'status_badge',
        'assigned_at',
    ]
    list_filter = ['status', 'assigned_at']
    search_fields = ['batch_id', 'dealer__name']
    date_hierarchy = 'assigned_at'
    readonly_fields = [
        'batch_id', 'dealer', 'total_amount', 'paid_amount',
        'remaining_amount', 'status', 'assigned_at', 'updated_at',
    ]
    inlines = [DealerBatchPaymentInline]

    def status_badge(self, obj):
        colors = {
            BatchStatus.PENDING_PAYMENT: ('#E5C49A', '#2C1810'),
            BatchStatus.PARTIALLY_PAID: ('#A47449', 'white'),
            BatchStatus.COMPLETED_PAYMENT: ('#6B8E5E', 'white'),
        }
        bg, fg = colors.get(obj.status, ('#ccc', '#666'))
        return format_html(
            '<span style="background: {}; color: {}; padding: 3px 8px; '
            'border-radius: 10px; font-size: 11px;">{}</span>',
            bg, fg, obj.get_status_display()
        )
    status_badge.short_description = 'Status'

    def has_add_permission(self, request):
        return False

    def has_delete_permission(self, request, obj=None):
        return False


@admin.register(BatchSequence)
class BatchSequenceAdmin(admin.ModelAdmin):
    list_display = ['name', 'last_value']
    readonly_fields = ['name']
