from __future__ import annotations

import secrets
import string
from typing import List, Optional, Protocol

ID_ALPHABET = string.digits + string.ascii_lowercase
ID_LENGTH = 12


class RandomSource(Protocol):
    def choice(self, seq: str) -> str: ...


_system_random = secrets.SystemRandom()


def capitalize(token: Optional[str]) -> Optional[str]:
    """Uppercase the first character of a single word if it is a letter."""
    if not token:
        return token
    first = token[0]
    if not first.isalpha():
        return token
    return first.upper() + token[1:]


def is_canonical(text: Optional[str]) -> bool:
    """True when every space-delimited word already starts with an uppercase char."""
    if not text:
        return False
    for token in text.split(" "):
        if not token or not token[0].isupper():
            return False
    return True


def canonicalize(text: Optional[str]) -> str:
    """Title-case a title, name or genre so it can be used as a lookup key.

    Words are split on single spaces and only their first letter is touched,
    so "dr. suess" becomes "Dr. Suess" and "-nothing to say" becomes
    "-nothing To Say". Empty or None input gives "".
    """
    if not text:
        return ""
    if is_canonical(text):
        return text
    return " ".join(capitalize(tok) for tok in text.split(" ")).strip()


def split_canonical(csv: Optional[str]) -> List[str]:
    """Split a comma separated list into canonical, de-duplicated entries."""
    if not csv:
        return []
    result: List[str] = []
    for piece in csv.split(","):
        name = canonicalize(piece.strip())
        if name and name not in result:
            result.append(name)
    return result


def generate_identifier(rng: Optional[RandomSource] = None, length: int = ID_LENGTH) -> str:
    """Random lowercase alphanumeric id. Callers must check for collisions."""
    source = rng if rng is not None else _system_random
    return "".join(source.choice(ID_ALPHABET) for _ in range(length))
