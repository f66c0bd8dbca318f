"""Shared validators package for the application.

This package contains reusable validation functions and the common
validation outcome type used across features.

Available validators:
- password.py: Password strength validation
- phone.py: Phone number validation
- result.py: ValidationResult returned by every validator
"""
