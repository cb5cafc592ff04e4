from django.urls import path, include
from rest_framework.routers import SimpleRouter
from . import views

app_name = 'user-admin'

router = SimpleRouter()
router.register(r'', views.UserAdminViewSet, basename='user')

urlpatterns = [
    # GET    /api/users/           - List users with booking stats
    # GET    /api/users/{id}/      - User detail with bookings
    # PUT    /api/users/{id}/      - Update username / role
    # DELETE /api/users/{id}/      - Delete user and bookings
    path('', include(router.urls)),
]
