import re
from typing import Optional

from config import settings

DATE_PATTERN = re.compile(r"(0[1-9]|1[0-2])/(0[1-9]|[12][0-9]|3[01])/([12][0-9]{3})")


class TextValidator:
    """Format checks for names and dates entered by users or seed files."""

    @staticmethod
    def is_null_or_empty(text: Optional[str]) -> bool:
        return text is None or text == ""

    @staticmethod
    def is_valid_date_format(date: Optional[str]) -> bool:
        """MM/DD/YYYY with month 01-12, day 01-31 and year 1000-2999.

        Only the shape is checked, so 02/31/2024 passes. The whole string
        must match, trailing newlines included.
        """
        if not date:
            return False
        return DATE_PATTERN.fullmatch(date) is not None

    @staticmethod
    def is_alphabetic_with_spaces(text: Optional[str]) -> bool:
        if not text:
            return False
        # repeated spaces produce empty words, which are allowed
        return all(word.isalpha() or word == "" for word in text.split(" "))


class PasswordValidator:

    @staticmethod
    def is_valid_password(password: Optional[str], min_length: Optional[int] = None,
                          max_length: Optional[int] = None) -> bool:
        """Length check against the configured bounds unless others are given."""
        if not password:
            return False
        low = settings.password_min_length if min_length is None else min_length
        high = settings.password_max_length if max_length is None else max_length
        return low <= len(password) <= high
