from django.contrib import admin
from .models import Platform


@admin.register(Platform)
class PlatformAdmin(admin.ModelAdmin):
    list_display = ['name', 'account_alias', 'user', 'created_at']
    search_fields = ['name', 'account_alias', 'user__username']
