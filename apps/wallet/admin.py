# ==========================================
# apps/wallet/admin.py
# ==========================================

from django.contrib import admin
from django.utils.html import format_html
from .models import Wallet, WalletTransaction, INFLOW_TYPES


class WalletTransactionInline(admin.TabularInline):
    model = WalletTransaction
    extra = 0
    fields = ['date', 'type', 'amount', 'description', 'related_booking', 'related_batch']
    readonly_fields = fields
    ordering = ['-date']

    def has_add_permission(self, request, obj=None):
        """Entries are only written by the ledger service."""
        return False

    def has_delete_permission(self, request, obj=None):
        return False


@admin.register(Wallet)
class WalletAdmin(admin.ModelAdmin):
    list_display = ['name', 'balance', 'updated_at']
    readonly_fields = ['name', 'balance', 'created_at', 'updated_at']
    inlines = [WalletTransactionInline]

    def has_add_permission(self, request):
        return False

    def has_delete_permission(self, request, obj=None):
        return False


@admin.register(WalletTransaction)
class WalletTransactionAdmin(admin.ModelAdmin):
    list_display = ['date', 'type', 'signed_amount_display', 'description']
    list_filter = ['type', 'date']
    search_fields = ['description']
    date_hierarchy = 'date'
    readonly_fields = [
        'wallet', 'type', 'amount', 'description',
        'related_booking', 'related_batch', 'date',
    ]

    def signed_amount_display(self, obj):
        color = '#6B8E5E' if obj.type in INFLOW_TYPES else '#B85C5C'
        return format_html('<span style="color: {};">{}</span>', color, obj.signed_amount)
    signed_amount_display.short_description = 'Amount'

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False
