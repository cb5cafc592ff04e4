from django.urls import path
from . import views

app_name = 'similarity'

urlpatterns = [
    path('group-items/', views.group_items_view, name='group-items'),
]
