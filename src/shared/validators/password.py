"""Password validation functions."""

from src.config.settings import settings


def validate_password_strength(password: str) -> str:
    """Validate password strength requirements.

    Requirements:
    - At least ``settings.password_min_length`` characters
    - At least one uppercase letter (A-Z)
    - At least one lowercase letter (a-z)
    - At least one digit (0-9)

    This is a policy for wrapping validators. The credential schema itself
    only requires the password to be non-empty.

    Args:
        password: Password string to validate

    Returns:
        The validated password string

    Raises:
        ValueError: If password doesn't meet strength requirements

    Examples:
        >>> validate_password_strength("SecurePass123")
        'SecurePass123'
        >>> validate_password_strength("weakpass")
        Traceback (most recent call last):
        ...
        ValueError: Password must contain at least one uppercase letter

    """
    if len(password) < settings.password_min_length:
        raise ValueError(f"Password must be at least {settings.password_min_length} characters")
    if not any(c.isupper() for c in password):
        raise ValueError("Password must contain at least one uppercase letter")
    if not any(c.islower() for c in password):
        raise ValueError("Password must contain at least one lowercase letter")
    if not any(c.isdigit() for c in password):
        raise ValueError("Password must contain at least one digit")
    return password


def validate_password_confirmation(password: str, confirmation: str) -> str:
    """Validate that the confirmation repeats the password exactly."""
    if password != confirmation:
        raise ValueError("Passwords do not match")
    return confirmation
