import logging
from typing import Dict, Optional

from inventory_app.errors import AuthError, ConflictError, ValidationError
from inventory_app.ids import IdGenerator
from inventory_app.models.user import User

logger = logging.getLogger(__name__)


def normalize_email(email: str) -> str:
    return email.strip().lower()


class UserStore:
    """In-memory user accounts keyed by normalized email."""

    def __init__(self, id_generator: Optional[IdGenerator] = None):
        self._users: Dict[str, User] = {}
        self._new_id = id_generator or IdGenerator()

    def __len__(self) -> int:
        return len(self._users)

    def get(self, email: str) -> Optional[User]:
        """Get a user by email (case-insensitive, surrounding whitespace ignored)."""
        return self._users.get(normalize_email(email))

    def register(
        self,
        email: Optional[str],
        password: Optional[str],
        name: Optional[str] = None
    ) -> User:
        """Create a new account.

        The name falls back to the part of the email before ``@`` when it is
        missing or blank.
        """
        if not email or not email.strip() or not password:
            raise ValidationError("Email and password are required.")

        key = normalize_email(email)
        if key in self._users:
            raise ConflictError("User already exists.")

        display_name = (name or "").strip() or email.strip().split("@")[0]
        user = User(id=self._new_id(), email=key, password=password, name=display_name)
        self._users[key] = user
        logger.info("Registered user id=%s email=%s", user.id, user.email)
        return user

    def sign_in(self, email: Optional[str], password: Optional[str]) -> User:
        """Check credentials; unknown email and wrong password fail the same way."""
        if not email or not email.strip() or not password:
            raise ValidationError("Email and password are required.")

        user = self._users.get(normalize_email(email))
        if user is None or user.password != password:
            raise AuthError("Invalid email or password.")
        return user
