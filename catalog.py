import logging
from typing import Dict, List, Optional

from author import Author
from book import Book
from outcomes import Outcome
from utils.normalizer import canonicalize, split_canonical
from utils.validators import TextValidator

logger = logging.getLogger(__name__)


class Catalog:
    """Books keyed by canonical title and authors keyed by canonical name.

    Both maps live here so that the book -> author and author -> book links
    are always changed together.
    """

    def __init__(self) -> None:
        self.books: Dict[str, Book] = {}
        self.authors: Dict[str, Author] = {}

    @property
    def book_count(self) -> int:
        return len(self.books)

    @property
    def author_count(self) -> int:
        return len(self.authors)

    # ------------------------- Books ------------------------- #
    def add_book(self, title: Optional[str], authors: Optional[str], genres: Optional[str], copies: int) -> Outcome:
        """Add a new title or more copies of an existing one.

        A known title with copies > 0 only gains copies; its authors and
        genres are left alone. With copies == 0 the authors and genres are
        merged into the existing book instead.
        """
        author_names = split_canonical(authors)
        genre_names = split_canonical(genres)
        if (TextValidator.is_null_or_empty(title) or not canonicalize(title)
                or not author_names or not genre_names or copies < 0):
            logger.warning("Invalid Book Arguments when adding book to library: %r", title)
            return Outcome.INVALID_INPUT

        title = canonicalize(title)
        book = self.books.get(title)
        if book is None:
            book = Book(title, total_copies=copies)
            self.books[title] = book
            logger.info("Added book %s with %d copies", title, copies)
        elif copies > 0:
            book.add_copies(copies)
            logger.info("Added %d copies of %s", copies, title)
            return Outcome.OK

        for genre in genre_names:
            book.add_genre(genre)
        for name in author_names:
            self._link(book, self._get_or_create_author(name))
        return Outcome.OK

    def find_book(self, title: Optional[str]) -> Optional[Book]:
        return self.books.get(canonicalize(title))

    def remove_book(self, title: Optional[str]) -> Outcome:
        """Remove a title unless some of its copies are out on loan."""
        book = self.find_book(title)
        if book is None:
            return Outcome.NOT_FOUND
        if book.available_copies != book.total_copies:
            logger.warning("Can't remove book: %s there are copies currently checked out.", book.title)
            return Outcome.COPIES_ON_LOAN
        for name in list(book.authors):
            author = self.authors.get(name)
            if author is not None:
                self._unlink(book, author)
        del self.books[book.title]
        logger.info("Removed book %s", book.title)
        return Outcome.OK

    def books_by_genre(self, genre: Optional[str]) -> List[str]:
        """Sorted titles carrying the genre; every title when genre is empty."""
        genre = canonicalize(genre)
        if not genre:
            return self.all_book_titles()
        return sorted(title for title, book in self.books.items() if genre in book.genres)

    def all_book_titles(self) -> List[str]:
        return sorted(self.books)

    # ------------------------- Authors ------------------------- #
    def add_author(self, name: Optional[str], birth_date: Optional[str] = None) -> Outcome:
        if TextValidator.is_null_or_empty(name) or not canonicalize(name):
            logger.warning("Invalid name when trying to add author to system.")
            return Outcome.INVALID_INPUT

        name = canonicalize(name)
        author = self.authors.get(name)
        if author is None:
            self.authors[name] = Author(name, birth_date)
            logger.info("Added author %s", name)
        elif author.patch_birth_date(birth_date):
            logger.info("Set birth date of %s to %s", name, birth_date)
        return Outcome.OK

    def find_author(self, name: Optional[str]) -> Optional[Author]:
        return self.authors.get(canonicalize(name))

    def remove_author(self, name: Optional[str]) -> Outcome:
        author = self.find_author(name)
        if author is None:
            return Outcome.NOT_FOUND
        for title in list(author.books_written):
            book = self.books.get(title)
            if book is not None:
                self._unlink(book, author)
        del self.authors[author.name]
        logger.info("Removed author %s", author.name)
        return Outcome.OK

    def all_author_names(self) -> List[str]:
        return sorted(self.authors)

    # ------------------------- Cross references ------------------------- #
    def _get_or_create_author(self, name: str) -> Author:
        author = self.authors.get(name)
        if author is None:
            author = Author(name)
            self.authors[name] = author
            logger.info("Added author %s", name)
        return author

    @staticmethod
    def _link(book: Book, author: Author) -> None:
        book.add_author(author.name)
        author.add_book_written(book.title)

    @staticmethod
    def _unlink(book: Book, author: Author) -> None:
        book.remove_author(author.name)
        author.remove_book_written(book.title)
