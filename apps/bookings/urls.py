from django.urls import path, include
from rest_framework.routers import SimpleRouter
from . import views

app_name = 'bookings'

router = SimpleRouter()
router.register(r'', views.BookingViewSet, basename='booking')

urlpatterns = [
    # GET    /api/bookings/                     - List bookings (paginated, filterable)
    # POST   /api/bookings/                     - Create booking
    # GET    /api/bookings/export/              - CSV / JSON export
    # GET    /api/bookings/{id}/                - Booking detail
    # PUT    /api/bookings/{id}/                - Update (role-dependent fields)
    # DELETE /api/bookings/{id}/                - Delete booking
    # PATCH  /api/bookings/{id}/status/         - Change status
    # PATCH  /api/bookings/{id}/mark-user-paid/ - Settle owner payout (admin)
    path('', include(router.urls)),
]
