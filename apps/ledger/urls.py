from django.urls import path
from . import views

app_name = 'ledger'

transaction_list = views.TransactionViewSet.as_view({
    'get': 'list',
    'post': 'create',
    'delete': 'settle_all',
})
user_transactions = views.TransactionViewSet.as_view({
    'get': 'list_for_user',
    'delete': 'settle_user',
})

urlpatterns = [
    # GET    /api/transactions             - All unsettled entries
    # POST   /api/transactions             - Record a purchase
    # DELETE /api/transactions             - Settle everyone (admin)
    # GET    /api/transactions/user/{id}   - One user's entries
    # DELETE /api/transactions/user/{id}   - Settle one user (admin)
    path('transactions', transaction_list, name='transaction-list'),
    path('transactions/user/<int:user_id>', user_transactions, name='user-transactions'),
]
