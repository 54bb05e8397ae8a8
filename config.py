import os
from dataclasses import dataclass
from dotenv import load_dotenv

load_dotenv()

@dataclass
class Settings:
    # Seed data
    books_file: str = os.getenv("LIBRARY_BOOKS_FILE", "books.txt")
    authors_file: str = os.getenv("LIBRARY_AUTHORS_FILE", "authors.txt")

    # Circulation
    default_checkout_limit: int = int(os.getenv("DEFAULT_CHECKOUT_LIMIT", "5"))

    # Accounts
    password_min_length: int = int(os.getenv("PASSWORD_MIN_LENGTH", "6"))
    password_max_length: int = int(os.getenv("PASSWORD_MAX_LENGTH", "20"))
    user_id_length: int = int(os.getenv("USER_ID_LENGTH", "12"))

    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "WARNING").upper()

    # Application
    app_name: str = os.getenv("APP_NAME", "Library Catalog Manager")
    app_version: str = os.getenv("APP_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "False").lower() in ("true", "1", "yes")


settings = Settings()
