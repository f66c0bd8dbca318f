"""Phone number validation functions."""

import re
from typing import Annotated

from pydantic import AfterValidator
from pydantic_core import PydanticCustomError

# E.164: optional "+", then 2-15 ASCII digits, no leading zero
PHONE_PATTERN = re.compile(r"^\+?[1-9][0-9]{1,14}$")

INVALID_PHONE_MESSAGE = "Invalid phone number"


def validate_phone_number(phone: str) -> str:
    """Validate that a phone number follows the E.164 digit layout.

    Args:
        phone: Phone number string to validate

    Returns:
        The validated phone number string

    Raises:
        PydanticCustomError: If the phone number does not match the pattern

    Examples:
        >>> validate_phone_number("+12345678901")
        '+12345678901'

    """
    if not PHONE_PATTERN.fullmatch(phone):
        raise PydanticCustomError("invalid_phone_number", INVALID_PHONE_MESSAGE)
    return phone


PhoneNumber = Annotated[str, AfterValidator(validate_phone_number)]
