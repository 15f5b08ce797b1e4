"""
Custom permission classes shared by the privileged endpoints.

The administrator logs in once (``POST /api/admin/login``) and receives a
signed access token with ``role=admin``. Privileged views require that token
on every request; it is verified by simplejwt's stateless authentication.

Usage:
    from apps.accounts.permissions import IsAdminSession

    class ProductViewSet(viewsets.ModelViewSet):
        def get_permissions(self):
            if self.action in ['create', 'destroy']:
                return [IsAdminSession()]
            return super().get_permissions()
"""
from rest_framework.permissions import BasePermission

from .services.admin_authentication import ADMIN_ROLE


class IsAdminSession(BasePermission):
    """
    Allows access only to requests carrying a valid admin token.

    An invalid or expired token is already rejected during authentication;
    a missing one ends up here and yields 401.
    """

    message = 'Administrator login required.'

    def has_permission(self, request, view):
        token = request.auth
        return token is not None and token.get('role') == ADMIN_ROLE
