"""User validator contract and the shape-only implementation."""

import logging
from typing import Any, Protocol, TypeVar, runtime_checkable

from pydantic import ValidationError

from src.config.settings import settings
from src.shared.validators.result import ValidationResult

from .models import User

logger = logging.getLogger(__name__)


PayloadT = TypeVar("PayloadT")


@runtime_checkable
class UserValidator(Protocol[PayloadT]):
    """Capability to judge a user payload.

    Implementations may await external state (consistency or uniqueness
    checks). A payload that fails validation is reported through the
    returned ValidationResult; exceptions are reserved for faults that kept
    the check from running at all and must propagate to the caller.
    """

    async def validate(self, user: PayloadT) -> ValidationResult: ...


class UserShapeValidator:
    """Check that a payload has the shape of a User."""

    def __init__(self, error_message: str | None = None):
        self.error_message = error_message or settings.generic_validation_error

    async def validate(self, user: Any) -> ValidationResult:
        if isinstance(user, User):
            return ValidationResult.success()

        try:
            User.model_validate(user)
        except ValidationError as exc:
            fields = sorted({".".join(str(part) for part in err["loc"]) or "<root>" for err in exc.errors()})
            logger.debug(f"User payload rejected, invalid fields: {fields}")
            return ValidationResult.failure(self.error_message)

        return ValidationResult.success()
