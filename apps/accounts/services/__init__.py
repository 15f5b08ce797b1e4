"""Services for accounts business logic."""

from .exceptions import (
    UserNotFoundError,
    InvalidUserNameError,
    InvalidPinError,
    PinConfirmationError,
    PinConflictError,
    InvalidCredentialsError,
    AmbiguousPinError,
)
from .user_registry import (
    list_users,
    get_user_by_id,
    create_user,
    rename_user,
    delete_user,
)
from .pin_authentication import (
    authenticate_pin,
    login_with_pin,
    reset_pin,
    restore_default_pin,
)
from .admin_authentication import (
    ADMIN_ROLE,
    authenticate_admin,
    issue_admin_token,
)

__all__ = [
    # Exceptions
    'UserNotFoundError',
    'InvalidUserNameError',
    'InvalidPinError',
    'PinConfirmationError',
    'PinConflictError',
    'InvalidCredentialsError',
    'AmbiguousPinError',
    # Registry
    'list_users',
    'get_user_by_id',
    'create_user',
    'rename_user',
    'delete_user',
    # PIN
    'authenticate_pin',
    'login_with_pin',
    'reset_pin',
    'restore_default_pin',
    # Admin
    'ADMIN_ROLE',
    'authenticate_admin',
    'issue_admin_token',
]
