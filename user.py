from __future__ import annotations

from typing import Optional, Set

from config import settings
from utils.normalizer import canonicalize, generate_identifier
from utils.validators import TextValidator

DEFAULT_CHECKOUT_LIMIT = settings.default_checkout_limit


class User:
    """A library member, identified by a random id."""

    def __init__(self, name: str, password: Optional[str] = None, user_id: Optional[str] = None,
                 checkout_limit: int = DEFAULT_CHECKOUT_LIMIT) -> None:
        self.id = user_id or generate_identifier(length=settings.user_id_length)
        self.name = name
        self.password = password
        self.checkout_limit = checkout_limit
        self.checked_out: Set[str] = set()

    @property
    def checked_out_count(self) -> int:
        return len(self.checked_out)

    def set_name(self, name: Optional[str]) -> None:
        """Rename the user if the new name is made of letters only."""
        if TextValidator.is_null_or_empty(name):
            return
        name = canonicalize(name)
        if TextValidator.is_alphabetic_with_spaces(name):
            self.name = name

    def set_checkout_limit(self, new_limit: int) -> bool:
        """The limit must stay positive and can't drop below the books already out."""
        if new_limit <= 0 or new_limit < self.checked_out_count:
            return False
        self.checkout_limit = new_limit
        return True

    def is_correct_password(self, password: Optional[str]) -> bool:
        return self.password is not None and self.password == password

    # ------------------------- Circulation ------------------------- #
    def can_check_out_more(self) -> bool:
        return self.checked_out_count < self.checkout_limit

    def has_checked_out(self, title: Optional[str]) -> bool:
        return canonicalize(title) in self.checked_out

    def check_out(self, title: Optional[str]) -> bool:
        """Record a checkout. Duplicates and checkouts over the limit are refused."""
        if TextValidator.is_null_or_empty(title):
            return False
        title = canonicalize(title)
        if title in self.checked_out or not self.can_check_out_more():
            return False
        self.checked_out.add(title)
        return True

    def return_title(self, title: Optional[str]) -> bool:
        if TextValidator.is_null_or_empty(title):
            return False
        title = canonicalize(title)
        if title not in self.checked_out:
            return False
        self.checked_out.remove(title)
        return True

    def checked_out_display(self) -> str:
        return "[" + ", ".join(sorted(self.checked_out)) + "]"

    def __str__(self) -> str:
        return (f"Id: {self.id}, Name: {self.name}, Checkout Limit: {self.checkout_limit}, "
                f"Books Checked Out: {self.checked_out_display()}")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "checkout_limit": self.checkout_limit,
            "checked_out": sorted(self.checked_out),
        }
