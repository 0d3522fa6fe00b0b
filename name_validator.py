from constants import MAX_NAME_LEN, MIN_NAME_LEN, FORBIDDEN_NAME_CHARS
from errors import (
    EmptyNameError, TooShortError, TooLongError, InvalidCharactersError,
)


def validate_category_name(name):
    """Validate a proposed category name.

    Rules are checked in order and the first failure is raised as a
    ValidationError subclass. Length is measured on the raw input while
    emptiness is checked after trimming, so "  a  " passes the length rule.
    """
    if not name or not name.strip():
        raise EmptyNameError("Name cannot be empty")
    if len(name) < MIN_NAME_LEN:
        raise TooShortError(f"Name must be at least {MIN_NAME_LEN} characters long")
    if len(name) > MAX_NAME_LEN:
        raise TooLongError(f"Name cannot exceed {MAX_NAME_LEN} characters")
    if any(c in FORBIDDEN_NAME_CHARS for c in name):
        raise InvalidCharactersError("Name should not contain special characters")

