from __future__ import annotations

from typing import Optional, Set

from utils.normalizer import canonicalize
from utils.validators import TextValidator


class Author:
    """An author with an optional birth date and the titles they wrote.

    Names and titles are kept in canonical (title case) form. A birth date
    of None means the date is unknown.
    """

    def __init__(self, name: str, birth_date: Optional[str] = None) -> None:
        self.name = canonicalize(name)
        self.birth_date: Optional[str] = birth_date if TextValidator.is_valid_date_format(birth_date) else None
        self.books_written: Set[str] = set()

    def patch_birth_date(self, birth_date: Optional[str]) -> bool:
        """Fill in the birth date only while it is still unknown."""
        if self.birth_date is not None or not TextValidator.is_valid_date_format(birth_date):
            return False
        self.birth_date = birth_date
        return True

    @property
    def birth_date_display(self) -> str:
        return self.birth_date if self.birth_date is not None else "Unknown"

    @property
    def books_written_count(self) -> int:
        return len(self.books_written)

    def has_written(self, title: Optional[str]) -> bool:
        return canonicalize(title) in self.books_written

    def add_book_written(self, title: Optional[str]) -> None:
        if TextValidator.is_null_or_empty(title):
            return
        self.books_written.add(canonicalize(title))

    def remove_book_written(self, title: Optional[str]) -> None:
        if TextValidator.is_null_or_empty(title):
            return
        self.books_written.discard(canonicalize(title))

    def books_written_display(self) -> str:
        return "[" + ", ".join(sorted(self.books_written)) + "]"

    def __str__(self) -> str:
        return f"Name: {self.name}, Birth Date: {self.birth_date_display}, Books Written: {self.books_written_display()}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Author):
            return NotImplemented
        return self.name == other.name and self.birth_date == other.birth_date

    def __hash__(self) -> int:
        return hash(self.name)

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "birth_date": self.birth_date,
            "books_written": sorted(self.books_written),
        }
