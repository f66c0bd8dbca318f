"""Password identity validator built on a credential schema."""

import logging
from collections.abc import Awaitable, Callable, Sequence
from typing import Any

from src.config.settings import settings
from src.shared.validators.password import validate_password_confirmation, validate_password_strength
from src.shared.validators.result import ValidationResult

from .schemas import PasswordIdentitySchema

logger = logging.getLogger(__name__)

PasswordPolicy = Callable[[str], Any]
IdentityCheck = Callable[[Any], Awaitable[ValidationResult]]


class PasswordIdentityValidator:
    """Validate password sign-up payloads.

    Runs, in order: the schema's shape check, the password confirmation
    match, the password policy, then each async check against the parsed
    payload. The first failure is returned with the generic error message so
    that responses do not reveal which rule or which account matched.

    Async checks are where collaborators plug in external state such as
    uniqueness lookups. Their exceptions are not caught.
    """

    def __init__(
        self,
        schema: PasswordIdentitySchema,
        *,
        confirm_password: bool | None = None,
        password_policy: PasswordPolicy | None = None,
        checks: Sequence[IdentityCheck] = (),
        error_message: str | None = None,
    ):
        self.schema = schema
        self.confirm_password = (
            settings.require_password_confirmation if confirm_password is None else confirm_password
        )
        if password_policy is None and settings.enforce_password_strength:
            password_policy = validate_password_strength
        self.password_policy = password_policy
        self.checks = tuple(checks)
        self.error_message = error_message or settings.generic_validation_error

    async def validate(self, identity: Any) -> ValidationResult:
        outcome = self.schema.check(identity)
        if not outcome.is_valid:
            logger.debug(f"Password identity rejected, invalid fields: {sorted(outcome.field_errors)}")
            return outcome.to_result(self.error_message)

        data = outcome.data

        if self.confirm_password:
            try:
                validate_password_confirmation(data.password, data.password_confirmation)
            except ValueError:
                logger.debug("Password identity rejected, confirmation does not match")
                return ValidationResult.failure(self.error_message)

        if self.password_policy is not None:
            try:
                self.password_policy(data.password)
            except ValueError:
                logger.debug("Password identity rejected by password policy")
                return ValidationResult.failure(self.error_message)

        for check in self.checks:
            result = await check(data)
            if not result.is_valid:
                logger.debug(f"Password identity rejected by check {getattr(check, '__name__', check)!r}")
                return ValidationResult.failure(self.error_message)

        return ValidationResult.success()
