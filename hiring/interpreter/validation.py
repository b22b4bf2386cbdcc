"""Argument checks shared by the command handlers."""

import re
from collections.abc import Sequence

from .errors import EmailValidationError, ShapeError

# local-part@label.label...tld, no empty parts and no extra "@"
EMAIL_PATTERN = re.compile(r"[^@]+@(?:[^@.]+\.)+[^@.]+")


def is_email(value: str) -> bool:
    return EMAIL_PATTERN.fullmatch(value) is not None


def require_email(value: str) -> str:
    """Return the email unchanged or raise EmailValidationError."""
    if not is_email(value):
        raise EmailValidationError()
    return value


def require_arg_count(tokens: Sequence[str], minimum: int, maximum: int | None = None) -> None:
    """Check the number of arguments following the keyword.

    Args:
        tokens: Full command tokens, keyword first.
        minimum: Fewest arguments allowed.
        maximum: Most arguments allowed, or None for no upper bound.

    Raises:
        ShapeError: If the argument count is out of range.
    """
    count = len(tokens) - 1
    if count < minimum or (maximum is not None and count > maximum):
        raise ShapeError()
