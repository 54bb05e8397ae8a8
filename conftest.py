import pytest

from library import LibraryManager

BOOK_LINES = [
    "the cat in the hat - dr. suess - picture, children, fiction - 5",
    "my side of the mountain - jean craighed george - adventure, fiction - 3",
    "the great gatsby - F. Scott Fitzgerald - Historical Fiction, American, Romance - 4",
    "Where the Red Fern Grows - Wilson rawls - adventure, fiction - 2",
    "Frog and Toad are Friends - Arnold Lobel - Fiction, Picture, Children - 4",
]

AUTHOR_LINES = [
    "F. Scott Fitzgerald - 09/24/1996",
    "Robert C. Martin - 12/05/1952",
    "Dr. Suess - 03/02/1904",
]

@pytest.fixture
def lib():
    # Fresh manager per test, seeded the same way the loader would
    manager = LibraryManager()
    for line in BOOK_LINES:
        title, authors, genres, copies = line.split(" - ")
        manager.add_book(title, authors, genres, int(copies))
    for line in AUTHOR_LINES:
        name, birth_date = line.split(" - ")
        manager.add_author(name, birth_date)
    return manager

@pytest.fixture
def seed_files(tmp_path):
    books = tmp_path / "books.txt"
    authors = tmp_path / "authors.txt"
    books.write_text("\n".join(BOOK_LINES) + "\n", encoding="utf-8")
    authors.write_text("\n".join(AUTHOR_LINES) + "\n", encoding="utf-8")
    return books, authors
