"""Self-service sign-up."""

import logging

from django.contrib.auth import get_user_model
from django.db import IntegrityError, transaction

from .exceptions import DuplicateUsernameError

User = get_user_model()
logger = logging.getLogger(__name__)


def register_user(*, username: str, password: str, email: str = "") -> User:
    """
    Create a regular (non-admin) account.

    Admins are made by promoting an existing user through
    ``/api/users/{id}/``, never by registering.

    Raises:
        DuplicateUsernameError: The username is taken
    """
    if User.objects.filter(username=username).exists():
        raise DuplicateUsernameError("Username is already taken")

    try:
        with transaction.atomic():
            user = User.objects.create_user(username=username, password=password, email=email)
    except IntegrityError:
        # lost a race with a concurrent sign-up for the same name
        raise DuplicateUsernameError("Username is already taken")

    logger.info("Registered user %s", user.username)
    return user
