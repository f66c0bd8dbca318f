"""Test configuration and fixtures.

Settings are read when ``src.config.settings`` is first imported, so the
test environment is loaded here before any application module.
"""

from pathlib import Path

import pytest
from dotenv import load_dotenv

# Load test environment variables
test_env_path = Path(__file__).parent.parent / ".env.test"
load_dotenv(test_env_path, override=True)


# Payload Factories


@pytest.fixture
def timestamps() -> dict[str, str]:
    """ISO-8601 creation and update timestamps as sent over the wire."""
    return {"createdAt": "2024-05-01T12:00:00Z", "updatedAt": "2024-05-02T08:30:00+00:00"}


@pytest.fixture
def make_signup_payload():
    """Factory fixture to build password sign-up payloads.

    Usage:
        payload = make_signup_payload()                       # password fields only
        payload = make_signup_payload(email="a@example.com")  # with an identifier
        payload = make_signup_payload(password=None)          # drop both password keys

    Keyword arguments set to None are removed from the payload.
    """

    def _factory(password="SecurePass123", password_confirmation=None, **fields) -> dict:
        payload = {
            "password": password,
            "passwordConfirmation": password if password_confirmation is None else password_confirmation,
            **fields,
        }
        return {key: value for key, value in payload.items() if value is not None}

    return _factory


@pytest.fixture
def user_payload(timestamps) -> dict[str, str]:
    """A well-formed user record."""
    return {"id": "usr_01", "email": "testuser@example.com", **timestamps}


@pytest.fixture
def password_identity_payload(timestamps) -> dict[str, str]:
    """A well-formed password identity record."""
    return {
        "id": "idt_01",
        "type": "password",
        "userId": "usr_01",
        "passwordHash": "$argon2id$v=19$m=65536,t=3,p=4$c2FsdA$aGFzaA",
        "email": "testuser@example.com",
        **timestamps,
    }
