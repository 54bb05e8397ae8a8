import logging
from typing import List, Optional

from author import Author
from book import Book
from catalog import Catalog
from directory import Directory
from outcomes import Outcome
from user import User
from utils.normalizer import canonicalize
from utils.validators import TextValidator

logger = logging.getLogger(__name__)

NO_INFORMATION = "There is no information currently available."


class LibraryManager:
    """Entry point for the catalog, the user directory and circulation.

    Build one per session and hand it to whatever needs it (CLI, loader,
    tests). Lookups always canonicalize their key first.
    """

    def __init__(self, catalog: Optional[Catalog] = None, directory: Optional[Directory] = None) -> None:
        self.catalog = catalog if catalog is not None else Catalog()
        self.directory = directory if directory is not None else Directory()

    # ------------------------- Catalog ------------------------- #
    def add_book(self, title: Optional[str], authors: Optional[str], genres: Optional[str], copies: int) -> Outcome:
        return self.catalog.add_book(title, authors, genres, copies)

    def add_author(self, name: Optional[str], birth_date: Optional[str] = None) -> Outcome:
        return self.catalog.add_author(name, birth_date)

    def remove_book(self, title: Optional[str]) -> Outcome:
        return self.catalog.remove_book(title)

    def remove_author(self, name: Optional[str]) -> Outcome:
        return self.catalog.remove_author(name)

    def find_book(self, title: Optional[str]) -> Optional[Book]:
        return self.catalog.find_book(title)

    def find_author(self, name: Optional[str]) -> Optional[Author]:
        return self.catalog.find_author(name)

    @property
    def unique_book_count(self) -> int:
        return self.catalog.book_count

    @property
    def unique_author_count(self) -> int:
        return self.catalog.author_count

    # ------------------------- Users ------------------------- #
    def register_user(self, name: Optional[str], password: Optional[str]) -> Optional[User]:
        return self.directory.register(name, password)

    def login(self, user_id: Optional[str], name: Optional[str], password: Optional[str]) -> Optional[User]:
        """Return the user for valid credentials, None otherwise."""
        if name is None:
            return None
        if not self.directory.authenticate(user_id, canonicalize(name.strip()), password):
            logger.warning("Invalid login information for id %r", user_id)
            return None
        return self.directory.user_by_id(user_id)

    def user_by_id(self, user_id: Optional[str]) -> Optional[User]:
        return self.directory.user_by_id(user_id)

    def set_checkout_limit(self, user: Optional[User], limit: int) -> Outcome:
        if user is None:
            return Outcome.INVALID_INPUT
        if limit <= 0:
            logger.warning("Checkout limit must be positive, got %d", limit)
            return Outcome.INVALID_INPUT
        if not user.set_checkout_limit(limit):
            logger.warning(Outcome.LIMIT_BELOW_CHECKED_OUT.message())
            return Outcome.LIMIT_BELOW_CHECKED_OUT
        return Outcome.OK

    @property
    def total_users(self) -> int:
        return self.directory.user_count

    # ------------------------- Circulation ------------------------- #
    def checkout(self, user: Optional[User], title: Optional[str]) -> Outcome:
        """Lend one copy of a title to a user.

        Every check happens before anything is changed, so a rejected
        checkout leaves both the user and the book untouched.
        """
        if user is None or TextValidator.is_null_or_empty(title):
            return Outcome.INVALID_INPUT

        if not user.can_check_out_more():
            logger.warning(Outcome.LIMIT_REACHED.message())
            return Outcome.LIMIT_REACHED

        title = canonicalize(title)
        book = self.catalog.find_book(title)
        if book is None:
            logger.warning(Outcome.NOT_FOUND.message(title))
            return Outcome.NOT_FOUND
        if user.has_checked_out(title):
            logger.warning(Outcome.ALREADY_CHECKED_OUT.message(title))
            return Outcome.ALREADY_CHECKED_OUT
        if not book.is_available:
            logger.warning(Outcome.UNAVAILABLE.message(title))
            return Outcome.UNAVAILABLE

        user.check_out(title)
        book.check_out()
        logger.info("User %s checked out %s", user.id, title)
        return Outcome.OK

    def return_book(self, user: Optional[User], title: Optional[str]) -> Outcome:
        """Take a copy back. Titles the user never checked out are refused."""
        if user is None or TextValidator.is_null_or_empty(title):
            return Outcome.INVALID_INPUT

        title = canonicalize(title)
        book = self.catalog.find_book(title)
        if book is None:
            logger.warning(Outcome.NOT_FOUND.message(title))
            return Outcome.NOT_FOUND
        if not user.has_checked_out(title):
            logger.warning(Outcome.NOT_CHECKED_OUT.message(title))
            return Outcome.NOT_CHECKED_OUT

        book.return_copy()
        user.return_title(title)
        logger.info("User %s returned %s", user.id, title)
        return Outcome.OK

    # ------------------------- Queries ------------------------- #
    def book_info(self, title: Optional[str]) -> str:
        book = self.catalog.find_book(title)
        return str(book) if book is not None else f"Sorry invalid search for {title}"

    def author_info(self, name: Optional[str]) -> str:
        author = self.catalog.find_author(name)
        return str(author) if author is not None else f"Sorry invalid search for {name}"

    @staticmethod
    def user_info(user: User) -> str:
        return str(user)

    @staticmethod
    def books_checked_out(user: User) -> str:
        return user.checked_out_display()

    def books_by_genre(self, genre: Optional[str]) -> str:
        return self._join(self.catalog.books_by_genre(genre))

    def all_book_titles(self) -> str:
        return self._join(self.catalog.all_book_titles())

    def all_author_names(self) -> str:
        return self._join(self.catalog.all_author_names())

    def get_statistics(self) -> dict:
        books = self.catalog.books.values()
        return {
            "unique_books": self.unique_book_count,
            "unique_authors": self.unique_author_count,
            "total_users": self.total_users,
            "total_copies": sum(b.total_copies for b in books),
            "copies_on_loan": sum(b.copies_on_loan for b in books),
        }

    @staticmethod
    def _join(keys: List[str]) -> str:
        if not keys:
            return NO_INFORMATION
        return ", ".join(keys)
