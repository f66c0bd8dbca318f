"""Identity validator contract."""

from typing import Protocol, TypeVar, runtime_checkable

from src.shared.validators.result import ValidationResult


PayloadT = TypeVar("PayloadT")


@runtime_checkable
class IdentityValidator(Protocol[PayloadT]):
    """Capability to judge a candidate identity payload.

    Each implementation declares the payload shape it expects and checks it
    before reading fields. Rejections are returned as a failed
    ValidationResult; an exception means the validation could not run
    (for example a uniqueness lookup was unreachable) and is left to
    propagate, as are cancellation and timeouts.
    """

    async def validate(self, identity: PayloadT) -> ValidationResult: ...
