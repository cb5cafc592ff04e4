from django.urls import path, include
from rest_framework.routers import SimpleRouter
from . import views

app_name = 'dealer-batches'

router = SimpleRouter()
router.register(r'', views.DealerBatchViewSet, basename='batch')

urlpatterns = [
    # GET   /api/dealer-batches/                    - List batches
    # GET   /api/dealer-batches/{id}/               - Batch with bookings and payments
    # GET   /api/dealer-batches/dealer/{dealer_id}/ - Batches of one dealer
    # PATCH /api/dealer-batches/{id}/add-payment/   - Record dealer payment
    path('', include(router.urls)),
]
