from django.urls import path
from . import views

app_name = 'inventory'

urlpatterns = [
    path('user/', views.user_inventory, name='user-inventory'),
    path('admin/', views.admin_inventory, name='admin-inventory'),
    path('assign-to-dealer/', views.assign_to_dealer, name='assign-to-dealer'),
    path('user-payment/<uuid:booking_id>/', views.user_payment, name='user-payment'),
    path('stats/', views.stats, name='stats'),
]
