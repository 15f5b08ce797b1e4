"""PIN login and self-service PIN reset."""

import logging
import re

from django.db import transaction, IntegrityError

from apps.accounts.models import User, DEFAULT_PIN

from .exceptions import (
    UserNotFoundError,
    InvalidPinError,
    PinConfirmationError,
    PinConflictError,
    InvalidCredentialsError,
    AmbiguousPinError,
)

logger = logging.getLogger(__name__)

# ASCII digits only; \d would also accept other Unicode digits
PIN_PATTERN = re.compile(r'[0-9]{4}')


def authenticate_pin(*, user_id: int, pin: str) -> User:
    """
    Check a user's PIN.

    Unknown users get the same error as a wrong PIN.

    Raises:
        InvalidCredentialsError: If the user doesn't exist or the PIN differs
    """
    try:
        user = User.objects.get(id=user_id)
    except User.DoesNotExist:
        raise InvalidCredentialsError()

    if user.pin != pin:
        logger.warning("Failed PIN login for user %s", user_id)
        raise InvalidCredentialsError()
    return user


def login_with_pin(*, pin: str, user_id: int = None) -> User:
    """
    Log a user in from the PIN pad.

    With ``user_id`` this is a plain ``authenticate_pin``. Without it the PIN
    itself has to identify the user, which only works for customised PINs:
    several users may still be on the shared default.

    Returns:
        The authenticated User; callers check ``must_reset_pin``.

    Raises:
        InvalidCredentialsError: If no user matches
        AmbiguousPinError: If more than one user holds the PIN
    """
    if user_id is not None:
        return authenticate_pin(user_id=user_id, pin=pin)

    matches = list(User.objects.filter(pin=pin)[:2])
    if not matches:
        logger.warning("Failed PIN login (no matching user)")
        raise InvalidCredentialsError()
    if len(matches) > 1:
        raise AmbiguousPinError()
    return matches[0]


@transaction.atomic
def reset_pin(*, user_id: int, new_pin: str, confirm_pin: str = None) -> User:
    """
    Replace a user's PIN with a personal one and clear the forced-reset flag.

    Args:
        user_id: User whose PIN changes
        new_pin: Exactly four ASCII digits, not the default "0000"
        confirm_pin: Optional repeat of new_pin

    Raises:
        InvalidPinError: If the PIN is malformed or the default
        PinConfirmationError: If confirm_pin is given and differs
        UserNotFoundError: If user doesn't exist
        PinConflictError: If a different user already has this PIN
    """
    new_pin = new_pin or ''
    if not PIN_PATTERN.fullmatch(new_pin):
        raise InvalidPinError()
    if new_pin == DEFAULT_PIN:
        raise InvalidPinError('Choose a PIN other than the default 0000.')
    if confirm_pin is not None and confirm_pin != new_pin:
        raise PinConfirmationError()

    try:
        user = User.objects.select_for_update().get(id=user_id)
    except User.DoesNotExist:
        raise UserNotFoundError(f"User {user_id} not found.")

    if User.objects.filter(pin=new_pin).exclude(id=user.id).exists():
        raise PinConflictError()

    user.pin = new_pin
    user.must_reset_pin = False
    try:
        with transaction.atomic():
            user.save(update_fields=['pin', 'must_reset_pin'])
    except IntegrityError:
        # Unique index caught a concurrent reset to the same PIN
        raise PinConflictError()

    logger.info("User %s set a new PIN", user.id)
    return user


@transaction.atomic
def restore_default_pin(*, user_id: int) -> User:
    """
    Put a user back on the default PIN and force a reset on next login.

    Raises:
        UserNotFoundError: If user doesn't exist
    """
    try:
        user = User.objects.select_for_update().get(id=user_id)
    except User.DoesNotExist:
        raise UserNotFoundError(f"User {user_id} not found.")

    user.pin = DEFAULT_PIN
    user.must_reset_pin = True
    user.save(update_fields=['pin', 'must_reset_pin'])
    logger.info("Restored default PIN for user %s", user.id)
    return user
