"""Tests for the shared password validators."""

import pytest

from src.config.settings import settings
from src.shared.validators.password import validate_password_confirmation, validate_password_strength


class TestPasswordValidation:
    """Test password strength validation."""

    def test_valid_password_with_all_requirements(self):
        """Test password with all requirements passes validation."""
        result = validate_password_strength("SecurePass123")
        assert result == "SecurePass123"

    def test_valid_password_with_special_characters(self):
        """Test password with special characters passes validation."""
        result = validate_password_strength("Secure@Pass123!")
        assert result == "Secure@Pass123!"

    def test_password_too_short_fails(self):
        """Test password below the configured minimum length fails validation."""
        with pytest.raises(ValueError, match=f"at least {settings.password_min_length} characters"):
            validate_password_strength("Abcd123")

    def test_minimum_length_follows_settings(self, monkeypatch):
        """Test the minimum length is read from settings at call time."""
        monkeypatch.setattr(settings, "password_min_length", 3)
        assert validate_password_strength("Ab1") == "Ab1"

    def test_password_without_uppercase_fails(self):
        """Test password without uppercase letter fails validation."""
        with pytest.raises(ValueError, match="Password must contain at least one uppercase letter"):
            validate_password_strength("securepass123")

    def test_password_without_lowercase_fails(self):
        """Test password without lowercase letter fails validation."""
        with pytest.raises(ValueError, match="Password must contain at least one lowercase letter"):
            validate_password_strength("SECUREPASS123")

    def test_password_without_digit_fails(self):
        """Test password without digit fails validation."""
        with pytest.raises(ValueError, match="Password must contain at least one digit"):
            validate_password_strength("SecurePassword")

    def test_password_with_spaces(self):
        """Test password with spaces passes if requirements are met."""
        result = validate_password_strength("Secure Pass 123")
        assert result == "Secure Pass 123"

    def test_password_with_unicode_characters(self):
        """Test password with unicode characters passes if requirements are met."""
        result = validate_password_strength("Sécure123")
        assert result == "Sécure123"

    def test_password_very_long(self):
        """Test very long password passes validation."""
        long_password = "SecurePassword123" * 10
        result = validate_password_strength(long_password)
        assert result == long_password


class TestPasswordConfirmation:
    """Test password confirmation matching."""

    def test_matching_confirmation(self):
        """Test identical password and confirmation pass."""
        assert validate_password_confirmation("SecurePass123", "SecurePass123") == "SecurePass123"

    def test_mismatched_confirmation_fails(self):
        """Test different password and confirmation fail."""
        with pytest.raises(ValueError, match="Passwords do not match"):
            validate_password_confirmation("SecurePass123", "SecurePass124")

    def test_comparison_is_case_sensitive(self):
        """Test confirmation differing only in case fails."""
        with pytest.raises(ValueError):
            validate_password_confirmation("SecurePass123", "securepass123")
