from django.urls import path, include
from rest_framework.routers import SimpleRouter
from . import views

app_name = 'dealers'

router = SimpleRouter()
router.register(r'', views.DealerViewSet, basename='dealer')

urlpatterns = [
    # GET    /api/dealers/        - List dealers
    # POST   /api/dealers/        - Create dealer
    # GET    /api/dealers/{id}/   - Dealer detail
    # PUT    /api/dealers/{id}/   - Update dealer
    # DELETE /api/dealers/{id}/   - Delete dealer (refused while it has batches)
    path('', include(router.urls)),
]
