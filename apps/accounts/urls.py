from django.urls import path, include
from rest_framework.routers import SimpleRouter
from . import views

app_name = 'accounts'

router = SimpleRouter(trailing_slash=False)
router.register(r'users', views.UserViewSet, basename='user')

urlpatterns = [
    # GET    /api/users                    - List users
    # POST   /api/users                    - Create user (admin)
    # GET    /api/users/{id}               - Get user
    # PATCH  /api/users/{id}               - Rename user (admin)
    # DELETE /api/users/{id}               - Delete user (admin)
    # POST   /api/users/login              - PIN login
    # POST   /api/users/{id}/reset-pin     - Set personal PIN
    # POST   /api/users/{id}/restore-pin   - Back to default PIN (admin)
    path('admin/login', views.admin_login, name='admin-login'),
    path('', include(router.urls)),
]
