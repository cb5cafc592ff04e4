"""Username / password login."""

import logging

from django.contrib.auth import get_user_model
from django.contrib.auth.models import update_last_login

from .exceptions import InvalidCredentialsError, InactiveAccountError

User = get_user_model()
logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid username or password"


def authenticate_user(*, username: str, password: str) -> User:
    """
    Check a username / password pair and record the login.

    Inactive accounts are rejected only after the password matched, so the
    response never reveals whether an unknown username exists.

    Raises:
        InvalidCredentialsError: Unknown username or wrong password
        InactiveAccountError: Correct password, deactivated account
    """
    user = User.objects.filter(username=username).first()
    if user is None or not user.check_password(password):
        logger.info("Failed login for %r", username)
        raise InvalidCredentialsError(INVALID_CREDENTIALS)

    if not user.is_active:
        raise InactiveAccountError("Account is deactivated")

    update_last_login(None, user)
    return user
