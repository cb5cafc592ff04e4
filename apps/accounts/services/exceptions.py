"""
Errors raised by the accounts services.

Views translate these into HTTP responses; the services never build
responses themselves.
"""


class AccountsServiceError(Exception):
    """Base class for every accounts service failure."""


class UserRegistrationError(AccountsServiceError):
    """A new account could not be created."""


class DuplicateUsernameError(UserRegistrationError):
    """Another account already uses the requested username."""


class InvalidCredentialsError(AccountsServiceError):
    """Unknown username or wrong password. Deliberately does not say which."""


class InactiveAccountError(AccountsServiceError):
    pass


class UserNotFoundError(AccountsServiceError):
    pass
