import logging
import os
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.prompt import Prompt

from config import settings
from library import LibraryManager
from loader import SeedDataError, load_seed_data
from outcomes import Outcome
from user import User
from utils.normalizer import canonicalize
from utils.ui_helpers import set_output_mode, print_record, print_listing, print_outcome, print_stats_result

APP_NAME = "Library CLI"

SYSTEM_COMMANDS = (
    "To Search: (search/s), To check user info: (info/i), To Checkout: (checkout/c), "
    "To return book: (return/r), To logout: (logout/l), To quit: (quit/q)"
)

console = Console()
logger = logging.getLogger(__name__)

# Detect the test environment
def _is_test_env() -> bool:
    return ("PYTEST_CURRENT_TEST" in os.environ) or (os.environ.get("LIB_CLI_TEST_MODE") == "1")

def _seed_path(raw: Optional[str]) -> Optional[Path]:
    if not raw:
        return None
    path = Path(raw)
    if not path.exists():
        logger.warning("Seed file not found: %s", path)
        return None
    return path

def build_manager(books_file: Optional[str], authors_file: Optional[str]) -> LibraryManager:
    """Create a LibraryManager and fill it from the seed files that exist."""
    manager = LibraryManager()
    try:
        load_seed_data(manager, _seed_path(books_file), _seed_path(authors_file))
    except SeedDataError as e:
        print(f"Error while loading seed data: {e}")
    return manager

def _manager(ctx: typer.Context) -> LibraryManager:
    if ctx.obj is None:
        ctx.obj = {}
    if "manager" not in ctx.obj:
        ctx.obj["manager"] = build_manager(ctx.obj.get("books_file"), ctx.obj.get("authors_file"))
    return ctx.obj["manager"]

# --- Typer CLI application ---
app = typer.Typer(help=APP_NAME)

@app.callback()
def _global_options(
    ctx: typer.Context,
    output: Optional[str] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output format: plain | json | rich (default: plain)",
    ),
    books_file: str = typer.Option(settings.books_file, "--books", "-b", help="Book seed file"),
    authors_file: str = typer.Option(settings.authors_file, "--authors", "-a", help="Author seed file"),
):
    """Global options for the CLI (output mode, seed files)."""
    logging.basicConfig(level=getattr(logging, settings.log_level, logging.WARNING))
    if output:
        set_output_mode(output)
    ctx.obj = {"books_file": books_file, "authors_file": authors_file}

@app.command("titles")
def cli_titles(ctx: typer.Context):
    """List every book title in the catalog."""
    lib = _manager(ctx)
    print_listing("Titles", lib.catalog.all_book_titles(), lib.all_book_titles())

@app.command("authors")
def cli_authors(ctx: typer.Context):
    """List every author name in the catalog."""
    lib = _manager(ctx)
    print_listing("Authors", lib.catalog.all_author_names(), lib.all_author_names())

@app.command("genre")
def cli_genre(ctx: typer.Context, genre: str = typer.Argument("", help="Genre to look for (empty = all titles)")):
    """List the titles that carry a genre."""
    lib = _manager(ctx)
    print_listing(genre or "Titles", lib.catalog.books_by_genre(genre), lib.books_by_genre(genre))

@app.command("book")
def cli_book(ctx: typer.Context, title: str = typer.Argument(..., help="Book title")):
    """Show a book by title."""
    lib = _manager(ctx)
    print_record(lib.book_info(title), lib.find_book(title), title="📖 Book")

@app.command("author")
def cli_author(ctx: typer.Context, name: str = typer.Argument(..., help="Author name")):
    """Show an author by name."""
    lib = _manager(ctx)
    print_record(lib.author_info(name), lib.find_author(name), title="✍️  Author")

@app.command("stats")
def cli_stats(ctx: typer.Context):
    """Show catalog statistics."""
    print_stats_result(_manager(ctx).get_statistics())

# --- Interactive session ---
def _ask(prompt: str, choices: Optional[list] = None, password: bool = False) -> str:
    return Prompt.ask(prompt, choices=choices, password=password, console=console).strip()

def _login(lib: LibraryManager) -> Optional[User]:
    """Ask for credentials or register a new account.

    Registering does not log in: the new id is shown and the user is asked
    to log in with it. Raises typer.Exit when the user chooses to quit.
    """
    answer = _ask("Would you like to create a new user? (y/n, q to quit)", choices=["y", "n", "q"])
    if answer == "q":
        raise typer.Exit()

    if answer == "y":
        console.print("Attempting to create new user.")
        name = _ask("Please enter your name.")
        password = _ask("Please enter your password.", password=not _is_test_env())
        user = lib.register_user(name, password)
        if user is None:
            print(
                f"Invalid user information. Passwords must be between "
                f"{settings.password_min_length} - {settings.password_max_length} characters.\n"
            )
        else:
            print(f"Successfully Created new user. Your id is: {user.id}\n")
        return None

    name = _ask("Please enter your name.")
    user_id = _ask("Please enter your id.")
    password = _ask("Please enter your password.", password=not _is_test_env())
    user = lib.login(user_id, name, password)
    if user is None:
        print("Invalid login information!\n")
    return user

def _search(lib: LibraryManager) -> None:
    kind = _ask("Would you like to search for an author or a book? (a/b)", choices=["a", "b"])
    if kind == "a":
        name = _ask("Enter name of author to search for.")
        print_record(lib.author_info(name), lib.find_author(name), title="✍️  Author")
        return

    by = _ask("Would you like to search for book by title or genre? (t/g)", choices=["t", "g"])
    if by == "t":
        title = _ask("Enter the title of the book you want to search for.")
        print_record(lib.book_info(title), lib.find_book(title), title="📖 Book")
    else:
        genre = _ask("Enter the genre you're looking for")
        print_listing(genre or "Titles", lib.catalog.books_by_genre(genre), lib.books_by_genre(genre))

def _user_info(lib: LibraryManager, user: User) -> None:
    what = _ask("What would you like to look up? (i: info, b: books checked out)", choices=["i", "b"])
    if what == "i":
        print_record(lib.user_info(user), user, title="👤 User")
    else:
        print_listing("Checked Out", sorted(user.checked_out), lib.books_checked_out(user))

@app.command("session")
def cli_session(ctx: typer.Context):
    """Start an interactive session (search, checkout, return, info, logout, quit)."""
    lib = _manager(ctx)
    print("Starting up Library system.")
    user: Optional[User] = None
    try:
        while True:
            while user is None:
                user = _login(lib)

            print(SYSTEM_COMMANDS)
            command = _ask("Command").lower()

            if command in ("quit", "q"):
                break
            if command in ("logout", "l"):
                user = None
            elif command in ("search", "s"):
                _search(lib)
            elif command in ("checkout", "c"):
                if not user.can_check_out_more():
                    print_outcome(Outcome.LIMIT_REACHED)
                    continue
                title = canonicalize(_ask("What book would you like to check out? (enter the book title)"))
                print_outcome(lib.checkout(user, title), title, f"Checked out: {title}")
            elif command in ("info", "i"):
                _user_info(lib, user)
            elif command in ("return", "r"):
                title = canonicalize(_ask("What is the title of the book you would like to return?"))
                print_outcome(lib.return_book(user, title), title, f"Returned: {title}")
            else:
                print(f"Unknown command: {command}")
    except typer.Exit:
        pass
    except (EOFError, KeyboardInterrupt):
        print()
    print("Shutting down library system.")

if __name__ == "__main__":
    app()
