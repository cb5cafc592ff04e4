from django.urls import path, include
from rest_framework.routers import SimpleRouter
from . import views

app_name = 'cards'

router = SimpleRouter()
router.register(r'', views.CardViewSet, basename='card')

urlpatterns = [
    # GET/POST          /api/cards/             - List / create own cards
    # GET/PUT/DELETE    /api/cards/{id}/        - Own card
    # POST              /api/cards/amountpay/   - Raise available limit
    path('', include(router.urls)),
]
