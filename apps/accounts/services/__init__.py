"""Services for accounts business logic."""

from .exceptions import (
    AccountsServiceError,
    UserRegistrationError,
    InvalidCredentialsError,
    InactiveAccountError,
    UserNotFoundError,
    DuplicateUsernameError,
)
from .user_registration import register_user
from .user_authentication import authenticate_user
from .user_management import (
    list_users_with_stats,
    get_user_by_id,
    get_user_with_bookings,
    update_user,
    delete_user,
)

__all__ = [
    # Exceptions
    'AccountsServiceError',
    'UserRegistrationError',
    'InvalidCredentialsError',
    'InactiveAccountError',
    'UserNotFoundError',
    'DuplicateUsernameError',
    # Services
    'register_user',
    'authenticate_user',
    'list_users_with_stats',
    'get_user_by_id',
    'get_user_with_bookings',
    'update_user',
    'delete_user',
]
