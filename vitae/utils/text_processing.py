"""Small text helpers shared by the migration and export code."""

import hashlib
from typing import Any, Iterable, List


def split_comma_list(text: str, drop_empty: bool = True) -> List[str]:
    """
    Split a comma-delimited string into trimmed tokens.

    Args:
        text: Delimited string (e.g., "Python, SQL, ,Go")
        drop_empty: Drop tokens that are empty after trimming

    Returns:
        List of tokens in their original order

    Examples:
        >>> split_comma_list("Python, SQL, ,Go")
        ['Python', 'SQL', 'Go']
        >>> split_comma_list("a, ,b", drop_empty=False)
        ['a', '', 'b']
    """
    tokens = [token.strip() for token in text.split(",")]
    if drop_empty:
        return [token for token in tokens if token]
    return tokens


def join_present(values: Iterable[str], separator: str = " | ") -> str:
    """Join the non-empty values with separator ("" if none are present)."""
    return separator.join(value for value in values if value)


def underline(heading: str, char: str = "-") -> str:
    """Return a rule of char with the same length as heading."""
    return char * len(heading)


def sha256_hex(text: str) -> str:
    """Computes SHA256 hash of a string."""
    return hashlib.sha256(text.encode("utf-8")).hexdigest()


def as_text(value: Any) -> str:
    """
    Coerce a stored scalar to str.

    Numbers (YAML parses unquoted 2019 or 5551234 as int) keep their text form;
    anything else that is not a string becomes "".

    Examples:
        >>> as_text(2019)
        '2019'
        >>> as_text(None)
        ''
        >>> as_text(True)
        ''
    """
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return ""
