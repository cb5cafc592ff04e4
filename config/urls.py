"""
URL configuration for the Mobile Booking Tracker project.

The `urlpatterns` list routes URLs to views. For more information please see:
    https://docs.djangoproject.com/en/4.2/topics/http/urls/
"""
from django.contrib import admin
from django.urls import path, include
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView
from rest_framework_simplejwt.views import TokenRefreshView

from config.views import health_check

urlpatterns = [
    # Health check (for Render)
    path('api/health/', health_check, name='health-check'),

    # Admin
    path('admin/', admin.site.urls),

    # API Documentation
    path('api/schema/', SpectacularAPIView.as_view(), name='api-schema'),
    path('api/docs/', SpectacularSwaggerView.as_view(url_name='api-schema'), name='api-docs'),

    # Authentication
    path('api/auth/', include('apps.accounts.urls')),
    path('api/auth/token/refresh/', TokenRefreshView.as_view(), name='token_refresh'),

    # API endpoints
    path('api/users/', include('apps.accounts.admin_urls')),
    path('api/bookings/', include('apps.bookings.urls')),
    path('api/cards/', include('apps.cards.urls')),
    path('api/platforms/', include('apps.platforms.urls')),
    path('api/dealers/', include('apps.dealers.urls')),
    path('api/dealer-batches/', include('apps.dealers.batch_urls')),
    path('api/inventory/', include('apps.inventory.urls')),
    path('api/wallet/', include('apps.wallet.urls')),
    path('api/similarity/', include('apps.similarity.urls')),
]


# Custom error handlers
handler404 = 'config.views.error_404'
handler500 = 'config.views.error_500'
