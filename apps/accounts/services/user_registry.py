"""User registry service: create, rename and delete office members."""

import logging

from django.db import transaction
from django.db.models import QuerySet

from apps.accounts.models import User, DEFAULT_PIN

from .exceptions import UserNotFoundError, InvalidUserNameError

logger = logging.getLogger(__name__)

MAX_NAME_LENGTH = 100


def _clean_name(name) -> str:
    cleaned = (name or '').strip()
    if not cleaned:
        raise InvalidUserNameError()
    if len(cleaned) > MAX_NAME_LENGTH:
        raise InvalidUserNameError(f"Name must be at most {MAX_NAME_LENGTH} characters.")
    return cleaned


def list_users() -> QuerySet:
    """Return all registered users in registration order."""
    return User.objects.order_by('id')


def get_user_by_id(user_id: int) -> User:
    """
    Fetch a user.

    Raises:
        UserNotFoundError: If no user has this id
    """
    try:
        return User.objects.get(id=user_id)
    except User.DoesNotExist:
        raise UserNotFoundError(f"User {user_id} not found.")


def create_user(*, name: str) -> User:
    """
    Register a new user on the shared default PIN.

    The user has to pick a personal PIN on first PIN login.

    Raises:
        InvalidUserNameError: If name is blank
    """
    user = User.objects.create(
        name=_clean_name(name),
        pin=DEFAULT_PIN,
        must_reset_pin=True,
    )
    logger.info("Created user %s (%s)", user.id, user.name)
    return user


@transaction.atomic
def rename_user(*, user_id: int, name: str) -> User:
    """
    Change a user's display name.

    Past history rows keep the name they were recorded with.

    Raises:
        UserNotFoundError: If user doesn't exist
        InvalidUserNameError: If name is blank
    """
    cleaned = _clean_name(name)
    try:
        user = User.objects.select_for_update().get(id=user_id)
    except User.DoesNotExist:
        raise UserNotFoundError(f"User {user_id} not found.")

    user.name = cleaned
    user.save(update_fields=['name'])
    return user


def delete_user(*, user_id: int) -> None:
    """
    Remove a user.

    Debt entries and purchase history of the user are left in place and keep
    referring to the old id.

    Raises:
        UserNotFoundError: If user doesn't exist
    """
    deleted, _ = User.objects.filter(id=user_id).delete()
    if not deleted:
        raise UserNotFoundError(f"User {user_id} not found.")
    logger.info("Deleted user %s", user_id)
