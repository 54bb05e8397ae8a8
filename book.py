from __future__ import annotations

from typing import Optional, Set

from utils.normalizer import canonicalize, split_canonical
from utils.validators import TextValidator


class Book:
    """A single catalog title and its copy counts."""

    def __init__(self, title: str, authors: Optional[str] = None, genres: Optional[str] = None,
                 total_copies: int = 1) -> None:
        self.title = canonicalize(title)
        self.authors: Set[str] = set(split_canonical(authors))
        self.genres: Set[str] = set(split_canonical(genres))
        self.total_copies = max(total_copies, 0)
        self.available_copies = self.total_copies

    # ------------------------- Authors & genres ------------------------- #
    def add_author(self, author: Optional[str]) -> None:
        """Add a SINGLE author to the book."""
        if TextValidator.is_null_or_empty(author):
            return
        self.authors.add(canonicalize(author))

    def remove_author(self, author: Optional[str]) -> None:
        if TextValidator.is_null_or_empty(author):
            return
        self.authors.discard(canonicalize(author))

    def has_author(self, author: Optional[str]) -> bool:
        return canonicalize(author) in self.authors

    def add_genre(self, genre: Optional[str]) -> None:
        """Add a SINGLE genre to the book."""
        if TextValidator.is_null_or_empty(genre):
            return
        self.genres.add(canonicalize(genre))

    def has_genre(self, genre: Optional[str]) -> bool:
        return canonicalize(genre) in self.genres

    # ------------------------- Copies ------------------------- #
    def add_copies(self, count: int) -> None:
        if count < 0:
            return
        self.total_copies += count
        self.available_copies += count

    def check_out(self) -> bool:
        if self.available_copies <= 0:
            return False
        self.available_copies -= 1
        return True

    def return_copy(self) -> bool:
        if self.available_copies >= self.total_copies:
            return False
        self.available_copies += 1
        return True

    @property
    def is_available(self) -> bool:
        return self.available_copies > 0

    @property
    def copies_on_loan(self) -> int:
        return self.total_copies - self.available_copies

    # ------------------------- Rendering ------------------------- #
    def authors_display(self) -> str:
        return "[" + ", ".join(sorted(self.authors)) + "]"

    def genres_display(self) -> str:
        return "[" + ", ".join(sorted(self.genres)) + "]"

    def __str__(self) -> str:
        authors = self.authors_display() if self.authors else "Unknown"
        genres = self.genres_display() if self.genres else "Unknown"
        return f"Title: {self.title}, Author(s): {authors}, Genre(s): {genres}, Total Copies: {self.total_copies}"

    def __eq__(self, other: object) -> bool:
        # same title and same authors
        if not isinstance(other, Book):
            return NotImplemented
        return self.title == other.title and self.authors == other.authors

    def __hash__(self) -> int:
        return hash(self.title)

    def to_dict(self) -> dict:
        return {
            "title": self.title,
            "authors": sorted(self.authors),
            "genres": sorted(self.genres),
            "total_copies": self.total_copies,
            "available_copies": self.available_copies,
        }
