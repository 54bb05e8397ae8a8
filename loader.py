"""Seed data loader.

Reads the flat text files the library starts up with. One record per line,
fields separated by " - ":

    title - author1, author2 - genre1, genre2 - totalCopies
    name - birthDate

Authors are loaded before books so that birth dates are already known when
the books link their authors in.
"""
import logging
from pathlib import Path
from typing import Iterator, Optional, Tuple, Union

from library import LibraryManager

logger = logging.getLogger(__name__)

FIELD_SEPARATOR = " - "

PathLike = Union[str, Path]


class SeedDataError(ValueError):
    pass


def parse_book_line(line: str) -> Tuple[str, str, str, int]:
    parts = line.strip().split(FIELD_SEPARATOR)
    if len(parts) != 4:
        raise SeedDataError(f"Expected 4 fields in book line, got {len(parts)}: {line.strip()!r}")
    title, authors, genres, copies = parts
    try:
        total = int(copies.strip())
    except ValueError as e:
        raise SeedDataError(f"Invalid copy count {copies!r} for {title!r}") from e
    if total < 0:
        raise SeedDataError(f"Negative copy count {total} for {title!r}")
    return title.strip(), authors.strip(), genres.strip(), total


def parse_author_line(line: str) -> Tuple[str, Optional[str]]:
    """A missing or malformed birth date is left for the Author to treat as unknown."""
    parts = line.strip().split(FIELD_SEPARATOR)
    if len(parts) == 1:
        return parts[0].strip(), None
    if len(parts) != 2:
        raise SeedDataError(f"Expected 2 fields in author line, got {len(parts)}: {line.strip()!r}")
    name, birth_date = parts
    return name.strip(), birth_date.strip()


def _read_lines(path: PathLike) -> Iterator[Tuple[int, str]]:
    """Yield (line number, line) for non-blank lines; unreadable files raise SeedDataError."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            for lineno, line in enumerate(f, 1):
                if line.strip():
                    yield lineno, line
    except UnicodeDecodeError as e:
        raise SeedDataError(f"{path} is not valid UTF-8: {e.reason}") from e
    except OSError as e:
        raise SeedDataError(f"Cannot read {path}: {e.strerror or e}") from e


def load_books(path: PathLike, manager: LibraryManager, strict: bool = False) -> int:
    loaded = 0
    for lineno, line in _read_lines(path):
        try:
            title, authors, genres, copies = parse_book_line(line)
        except SeedDataError as e:
            if strict:
                raise
            logger.warning("Skipping %s:%d: %s", path, lineno, e)
            continue
        if manager.add_book(title, authors, genres, copies).ok:
            loaded += 1
    logger.info("Loaded %d books from %s", loaded, path)
    return loaded


def load_authors(path: PathLike, manager: LibraryManager, strict: bool = False) -> int:
    loaded = 0
    for lineno, line in _read_lines(path):
        try:
            name, birth_date = parse_author_line(line)
        except SeedDataError as e:
            if strict:
                raise
            logger.warning("Skipping %s:%d: %s", path, lineno, e)
            continue
        if manager.add_author(name, birth_date).ok:
            loaded += 1
    logger.info("Loaded %d authors from %s", loaded, path)
    return loaded


def load_seed_data(manager: LibraryManager, books_path: Optional[PathLike] = None,
                   authors_path: Optional[PathLike] = None, strict: bool = False) -> Tuple[int, int]:
    """Load authors then books. Returns (books, authors) loaded."""
    authors = load_authors(authors_path, manager, strict) if authors_path else 0
    books = load_books(books_path, manager, strict) if books_path else 0
    return books, authors
