"""Enumeration types for the hiring pipeline models."""

from enum import Enum


class CommandKind(str, Enum):
    """Recognized command keywords, one handler per member."""

    DEFINE = "DEFINE"
    CREATE = "CREATE"
    ADVANCE = "ADVANCE"
    DECIDE = "DECIDE"
    STATS = "STATS"

    @classmethod
    def from_token(cls, token: str | None) -> "CommandKind | None":
        """Resolve a keyword token, or None if it is not a known command."""
        try:
            return cls(token)
        except ValueError:
            return None


class Outcome(str, Enum):
    """Terminal decision for an applicant."""

    HIRED = "Hired"
    REJECTED = "Rejected"


class DecisionCode(str, Enum):
    """Decision codes accepted by DECIDE."""

    REJECT = "0"
    HIRE = "1"
