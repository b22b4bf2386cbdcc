"""Pytest configuration and fixtures."""

import pytest

from hiring.interpreter import CommandInterpreter


@pytest.fixture
def interpreter() -> CommandInterpreter:
    """Fresh interpreter with no stages or applicants."""
    return CommandInterpreter()


@pytest.fixture
def two_stage_interpreter(interpreter: CommandInterpreter) -> CommandInterpreter:
    """Interpreter with ManualReview -> BackgroundCheck and one applicant at stage 0."""
    interpreter.process_line("DEFINE ManualReview BackgroundCheck")
    interpreter.process_line("CREATE john.doe@example.com")
    return interpreter


@pytest.fixture
def sample_commands() -> str:
    """Sample command file covering every command kind."""
    return """DEFINE ManualReview PhoneInterview BackgroundCheck DocumentSigning
CREATE a@b.com
CREATE a@b.com
CREATE not-an-email
ADVANCE a@b.com
ADVANCE a@b.com DocumentSigning
ADVANCE a@b.com
DECIDE a@b.com 1
CREATE c@d.org
DECIDE c@d.org 1
DECIDE c@d.org 0
ADVANCE missing@example.com
HIRE a@b.com
STATS
"""


@pytest.fixture
def sample_transcript() -> list[str]:
    """Expected responses for sample_commands, line for line."""
    return [
        "DEFINE ManualReview PhoneInterview BackgroundCheck DocumentSigning",
        "CREATE a@b.com",
        "Duplicate applicant",
        "Error: Command CREATE not-an-email is invalid. Email is invalid.",
        "ADVANCE a@b.com",
        "ADVANCE a@b.com DocumentSigning",
        "Already in DocumentSigning",
        "Hired a@b.com",
        "CREATE c@d.org",
        "Failed to decide for c@d.org",
        "Rejected c@d.org",
        "Error: Command ADVANCE missing@example.com is invalid. Email does not exist in database.",
        "Command not found for HIRE a@b.com",
        "ManualReview 0 PhoneInterview 0 BackgroundCheck 0 DocumentSigning 0 Hired 1 Rejected 1",
    ]
