"""Validation outcome shared by every validator."""

from typing import Self

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel


class ValidationResult(BaseModel):
    """Result of a validation operation.

    The error message is carried as-is. In sign-up flows it should be a
    generic text that does not reveal whether an account already exists.
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    is_valid: bool
    error: str | None = None

    @model_validator(mode="after")
    def error_only_on_failure(self) -> Self:
        """Reject an error message attached to a passing result."""
        if self.is_valid and self.error is not None:
            raise ValueError("A valid result cannot carry an error message")
        return self

    @classmethod
    def success(cls) -> "ValidationResult":
        return cls(is_valid=True)

    @classmethod
    def failure(cls, error: str | None = None) -> "ValidationResult":
        return cls(is_valid=False, error=error)
