from django.urls import path, include
from rest_framework.routers import SimpleRouter
from . import views

app_name = 'platforms'

router = SimpleRouter()
router.register(r'', views.PlatformViewSet, basename='platform')

urlpatterns = [
    path('', include(router.urls)),
]
