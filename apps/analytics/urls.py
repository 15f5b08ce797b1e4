from django.urls import path
from . import views

app_name = 'analytics'

urlpatterns = [
    # Balances
    path('users/<int:user_id>/balance', views.user_balance, name='user-balance'),

    # Reports on the current cycle
    path('reports/balances', views.balances, name='balances'),
    path('reports/ranking', views.ranking, name='ranking'),
    path('reports/categories', views.categories, name='categories'),
    path('reports/hourly', views.hourly, name='hourly'),
    path('reports/summary', views.summary, name='summary'),
    path('reports/dashboard', views.dashboard, name='dashboard'),

    # Purchase history
    path('history', views.history_list, name='history-list'),
    path('history/user/<int:user_id>', views.user_history, name='user-history'),
    path('history/months', views.available_months, name='history-months'),
    path('history/month/<str:month>', views.month_history, name='month-history'),
    path('history/month/<str:month>/summary', views.month_summary, name='month-summary'),
]
