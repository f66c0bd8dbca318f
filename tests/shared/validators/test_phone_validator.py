"""Tests for the shared phone validator."""

import pytest
from pydantic import TypeAdapter, ValidationError
from pydantic_core import PydanticCustomError

from src.shared.validators.phone import INVALID_PHONE_MESSAGE, PhoneNumber, validate_phone_number


class TestPhoneValidation:
    """Test phone number validation."""

    @pytest.mark.parametrize("phone", ["+12345678901", "12345678901", "44", "+999999999999999"])
    def test_valid_numbers(self, phone):
        """Test numbers with 2-15 digits and no leading zero pass."""
        assert validate_phone_number(phone) == phone

    @pytest.mark.parametrize("phone", ["0123", "+0123", "1", "+1234567890123456", "++123", "123-456", " 123", "+1٢٣٤٥"])
    def test_invalid_numbers(self, phone):
        """Test numbers outside the pattern fail."""
        with pytest.raises(PydanticCustomError):
            validate_phone_number(phone)

    def test_trailing_newline_rejected(self):
        """Test the whole string must match, including the end."""
        with pytest.raises(PydanticCustomError):
            validate_phone_number("12345\n")

    def test_annotated_type_message(self):
        """Test PhoneNumber reports the fixed message through pydantic."""
        adapter = TypeAdapter(PhoneNumber)

        with pytest.raises(ValidationError) as exc_info:
            adapter.validate_python("0123")

        assert exc_info.value.errors()[0]["msg"] == INVALID_PHONE_MESSAGE
        assert exc_info.value.errors()[0]["type"] == "invalid_phone_number"
