"""Administrator login: password check and admin session token."""

import logging
import secrets

from django.conf import settings
from rest_framework_simplejwt.settings import api_settings
from rest_framework_simplejwt.tokens import AccessToken

from .exceptions import InvalidCredentialsError

logger = logging.getLogger(__name__)

ADMIN_ROLE = 'admin'


def issue_admin_token() -> str:
    """Return a signed, expiring access token carrying the admin role."""
    token = AccessToken()
    token[api_settings.USER_ID_CLAIM] = ADMIN_ROLE
    token['role'] = ADMIN_ROLE
    return str(token)


def authenticate_admin(*, password: str) -> str:
    """
    Check the administrator password and open an admin session.

    Returns:
        Admin access token to send as ``Authorization: Bearer <token>``

    Raises:
        InvalidCredentialsError: If the password is wrong
    """
    if not secrets.compare_digest(str(password or ''), str(settings.ADMIN_PASSWORD)):
        logger.warning("Failed admin login")
        raise InvalidCredentialsError('Invalid admin password.')

    logger.info("Admin session opened")
    return issue_admin_token()
