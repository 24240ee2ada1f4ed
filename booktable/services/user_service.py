"""User directory - mock login and registration.

Passwords are accepted for interface compatibility but never checked.
"""

import logging
import uuid

from booktable.exceptions import AuthenticationError
from booktable.models import User, UserRole

logger = logging.getLogger(__name__)


class UserService:
    """In-memory user directory."""

    def __init__(self, users: list[User] | None = None) -> None:
        self._users: list[User] = list(users or [])

    def get_user(self, user_id: str) -> User | None:
        return next((u for u in self._users if u.id == user_id), None)

    async def login(self, email: str, role: UserRole, password: str | None = None) -> User:  # noqa: ARG002
        """Find the user with this email and role.

        Raises:
            AuthenticationError: If no such user exists
        """
        email = email.strip().lower()
        for user in self._users:
            if user.email.lower() == email and user.role == role:
                logger.info(f"User {user.id} logged in as {role.value}")
                return user

        logger.warning(f"Failed login for {email} as {role.value}")
        raise AuthenticationError("Invalid email or password")

    async def register(
        self,
        email: str,
        first_name: str,
        last_name: str,
        password: str | None = None,  # noqa: ARG002
    ) -> User:
        """Create a customer account.

        Raises:
            ValueError: If the email is already registered
        """
        email = email.strip().lower()
        if any(u.email.lower() == email for u in self._users):
            raise ValueError("Email already in use")

        user = User(
            id=f"user-{uuid.uuid4().hex[:8]}",
            email=email,
            first_name=first_name,
            last_name=last_name,
            role=UserRole.CUSTOMER,
        )
        self._users.append(user)

        logger.info(f"Registered customer {user.id}")
        return user
