import logging
from functools import partial
from typing import Callable, Dict, Optional

from config import settings
from user import User
from utils.normalizer import canonicalize, generate_identifier
from utils.validators import PasswordValidator, TextValidator

logger = logging.getLogger(__name__)


class Directory:
    """Registered users keyed by their generated id."""

    def __init__(self, id_factory: Optional[Callable[[], str]] = None) -> None:
        self.users: Dict[str, User] = {}
        self._id_factory = id_factory or partial(generate_identifier, length=settings.user_id_length)

    def __contains__(self, user_id: object) -> bool:
        return user_id in self.users

    @property
    def user_count(self) -> int:
        return len(self.users)

    def register(self, name: Optional[str], password: Optional[str]) -> Optional[User]:
        """Create a user with a fresh id, or return None for bad credentials."""
        if TextValidator.is_null_or_empty(name) or not canonicalize(name):
            logger.warning("Invalid name when trying to create a new user.")
            return None
        if not PasswordValidator.is_valid_password(password):
            logger.warning(
                "Invalid password. Must be between %d - %d characters.",
                settings.password_min_length,
                settings.password_max_length,
            )
            return None

        user_id = self._id_factory()
        # ids are random, so keep drawing until an unused one comes up
        while user_id in self.users:
            logger.debug("User id collision on %s, generating a new one", user_id)
            user_id = self._id_factory()

        user = User(canonicalize(name), password, user_id=user_id)
        self.users[user_id] = user
        logger.info("Registered user %s", user_id)
        return user

    def authenticate(self, user_id: Optional[str], name: Optional[str], password: Optional[str]) -> bool:
        """True when the id exists and both name and password match exactly."""
        if user_id is None or name is None or password is None:
            return False
        user = self.users.get(user_id)
        if user is None:
            return False
        return user.name == name and user.is_correct_password(password)

    def user_by_id(self, user_id: Optional[str]) -> Optional[User]:
        if user_id is None:
            return None
        return self.users.get(user_id)
