from django.urls import path
from . import views

app_name = 'wallet'

urlpatterns = [
    # GET  /api/wallet/                 - Balance + transactions
    # POST /api/wallet/add-profit/      - Withdraw profit
    # POST /api/wallet/deposit-profit/  - Deposit profit
    path('', views.wallet_detail, name='wallet-detail'),
    path('add-profit/', views.withdraw_profit_view, name='withdraw-profit'),
    path('deposit-profit/', views.deposit_profit_view, name='deposit-profit'),
]
