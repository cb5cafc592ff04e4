from django.contrib import admin
from .models import Card


@admin.register(Card)
class CardAdmin(admin.ModelAdmin):
    list_display = ['alias', 'user', 'bank_name', 'last_four', 'card_type', 'limit', 'available_limit', 'is_active']
    list_filter = ['card_type', 'is_active']
    search_fields = ['alias', 'bank_name', 'user__username']
