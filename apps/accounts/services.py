"""
Account services.

Functions:
    authenticate_user: Check a username/password pair and stamp last_login.
    issue_tokens: JWT pair for a user.
    reset_user_password: Admin sets another user's password.
"""

import logging
from uuid import UUID

from django.db import transaction
from django.utils import timezone
from rest_framework_simplejwt.tokens import RefreshToken

from .exceptions import InvalidCredentialsError, InactiveAccountError, UserNotFoundError
from .models import User

logger = logging.getLogger(__name__)


@transaction.atomic
def authenticate_user(*, username: str, password: str) -> User:
    """
    Authenticate a ledger user.

    Usernames match case-insensitively; unknown users and wrong passwords
    get the same error.

    Raises:
        InvalidCredentialsError: If credentials are invalid
        InactiveAccountError: If the account is deactivated
    """
    user = (
        User.objects
        .select_for_update()
        .filter(username__iexact=username.strip())
        .first()
    )
    if user is None or not user.check_password(password):
        logger.warning(f"Failed login for '{username}'")
        raise InvalidCredentialsError("Invalid username or password")

    if not user.is_active:
        logger.warning(f"Login refused for deactivated user '{user.username}'")
        raise InactiveAccountError("Account is deactivated")

    user.last_login = timezone.now()
    user.save(update_fields=['last_login'])
    return user


def issue_tokens(user: User) -> dict:
    refresh = RefreshToken.for_user(user)
    return {'refresh': str(refresh), 'access': str(refresh.access_token)}


@transaction.atomic
def reset_user_password(*, user_id: UUID, new_password: str, password_hint: str = None) -> User:
    """
    Set a new password for another user.

    Args:
        user_id: Target user's id
        new_password: Plain text password (length already validated)
        password_hint: Reminder shown to admins; unchanged when None

    Raises:
        UserNotFoundError: If the user does not exist
    """
    user = User.objects.select_for_update().filter(id=user_id).first()
    if user is None:
        raise UserNotFoundError()

    user.set_password(new_password)
    user.password_hint = user.password_hint if password_hint is None else password_hint.strip()
    user.save(update_fields=['password', 'password_hint', 'updated_at'])

    logger.info(f"Password reset for user {user.username}")
    return user
