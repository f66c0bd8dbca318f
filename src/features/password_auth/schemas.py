"""Password sign-up schemas built from the identifiers a caller supports.

A caller that only signs users in by email should neither ask for nor
tolerate a username, so the payload schema is assembled per caller:

    >>> schema = create_password_identity_schema(["email"])
    >>> sorted(schema.shape)
    ['email', 'password', 'passwordConfirmation']
    >>> schema.check({"password": "x", "passwordConfirmation": "x", "email": "nope"}).is_valid
    False

"""

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field
from enum import StrEnum
from types import MappingProxyType
from typing import Annotated, Any, get_origin

from pydantic import (
    AfterValidator,
    BaseModel,
    ConfigDict,
    EmailStr,
    Field,
    StringConstraints,
    ValidationError,
    create_model,
)
from pydantic_core import PydanticCustomError

from src.config.settings import settings
from src.shared.validators.phone import PhoneNumber
from src.shared.validators.result import ValidationResult

from .exceptions import (
    DuplicateIdentifierError,
    InvalidOverrideRuleError,
    UnsupportedIdentifierError,
    UnsupportedOverrideError,
)

# A field rule is a string type annotation pydantic can validate against,
# e.g. ``EmailStr`` or ``Annotated[str, StringConstraints(min_length=10)]``,
# or a predicate over text such as ``lambda value: len(value) >= 10``.
FieldRule = Any

NonEmptyStr = Annotated[str, StringConstraints(min_length=1)]

ROOT_ERROR_KEY = "__root__"


class IdentifierType(StrEnum):
    """Identifiers a user can sign in with alongside a password.

    Declaration order is the order fields appear in a built schema.
    """

    EMAIL = "email"
    USERNAME = "username"
    PHONE = "phone"


DEFAULT_IDENTIFIER_RULES: Mapping[IdentifierType, FieldRule] = MappingProxyType(
    {
        IdentifierType.EMAIL: EmailStr,
        IdentifierType.USERNAME: str,
        IdentifierType.PHONE: PhoneNumber,
    }
)

PASSWORD_FIELD = "password"
PASSWORD_CONFIRMATION_FIELD = "passwordConfirmation"


@dataclass(frozen=True)
class SchemaCheck:
    """Outcome of applying a schema to one payload.

    ``field_errors`` maps each failing payload key to its first error message.
    Errors not tied to a field (e.g. a payload that is not a mapping) are
    reported under ``ROOT_ERROR_KEY``.
    """

    data: BaseModel | None
    field_errors: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))

    @property
    def is_valid(self) -> bool:
        return not self.field_errors

    def to_result(self, error: str | None = None) -> ValidationResult:
        """Collapse the per-field outcome into a ValidationResult.

        The failure message defaults to ``settings.generic_validation_error``;
        field messages are never copied into it.
        """
        if self.is_valid:
            return ValidationResult.success()
        return ValidationResult.failure(error or settings.generic_validation_error)


@dataclass(frozen=True)
class PasswordIdentitySchema:
    """Validation schema for a password sign-up payload.

    Attributes:
        identifiers: Identifier kinds the schema declares
        shape: Payload key to field rule, in field order
        model: Generated pydantic model enforcing ``shape``

    """

    identifiers: frozenset[IdentifierType]
    shape: Mapping[str, FieldRule] = field(hash=False)
    model: type[BaseModel] = field(compare=False, repr=False)

    def parse(self, payload: Any) -> BaseModel:
        """Validate a payload, raising pydantic's ValidationError on failure."""
        return self.model.model_validate(payload)

    def check(self, payload: Any) -> SchemaCheck:
        """Validate a payload and report per-field failures without raising."""
        try:
            data = self.model.model_validate(payload)
        except ValidationError as exc:
            return SchemaCheck(data=None, field_errors=collect_field_errors(exc))
        return SchemaCheck(data=data)


def collect_field_errors(exc: ValidationError) -> Mapping[str, str]:
    """Map each failing payload key to the first error message reported for it."""
    errors: dict[str, str] = {}
    for error in exc.errors():
        key = str(error["loc"][0]) if error["loc"] else ROOT_ERROR_KEY
        errors.setdefault(key, error["msg"])
    return MappingProxyType(errors)


def _select_identifiers(identifiers: Iterable[IdentifierType | str]) -> frozenset[IdentifierType]:
    # A bare string is iterable too; "email" must not be read as five letters
    if isinstance(identifiers, str):
        raise UnsupportedIdentifierError(identifiers)

    selected: set[IdentifierType] = set()
    for identifier in identifiers:
        try:
            kind = IdentifierType(identifier)
        except ValueError as exc:
            raise UnsupportedIdentifierError(identifier) from exc
        if kind in selected:
            raise DuplicateIdentifierError(kind.value)
        selected.add(kind)
    return frozenset(selected)


def _normalize_overrides(overrides: Mapping[IdentifierType | str, FieldRule] | None) -> dict[IdentifierType, FieldRule]:
    if not overrides:
        return {}

    normalized: dict[IdentifierType, FieldRule] = {}
    for key, rule in overrides.items():
        try:
            kind = IdentifierType(key)
        except ValueError as exc:
            raise UnsupportedOverrideError(key) from exc
        # None means "keep the default"
        if rule is None:
            continue
        if not _is_type_annotation(rule) and not callable(rule):
            raise InvalidOverrideRuleError(kind.value, rule)
        normalized[kind] = rule
    return normalized


def _is_type_annotation(rule: FieldRule) -> bool:
    # Annotated aliases are callable too, so check for a typing origin first
    return isinstance(rule, type) or get_origin(rule) is not None


def _predicate_rule(kind: IdentifierType, predicate: Callable[[str], Any]) -> FieldRule:
    """Turn a text predicate into a string type annotation."""

    def check(value: str) -> str:
        if not predicate(value):
            raise PydanticCustomError("invalid_identifier", "Invalid {identifier}", {"identifier": kind.value})
        return value

    return Annotated[str, AfterValidator(check)]


def create_password_identity_schema(
    identifiers: Iterable[IdentifierType | str],
    overrides: Mapping[IdentifierType | str, FieldRule] | None = None,
) -> PasswordIdentitySchema:
    """Build the sign-up payload schema for a set of identifier kinds.

    ``password`` and ``passwordConfirmation`` are always required and must be
    non-empty. Each selected identifier adds an optional field validated by
    its override rule when one is given, otherwise by its default rule.
    Identifiers that are not selected are left out of the schema entirely,
    and overrides for them are ignored.

    Args:
        identifiers: Distinct identifier kinds, in any order. May be empty.
        overrides: Replacement field rules keyed by identifier kind. A rule is a
            string type annotation or a predicate over text; None keeps the default.

    Returns:
        An immutable PasswordIdentitySchema

    Raises:
        UnsupportedIdentifierError: If an identifier is not a known kind
        DuplicateIdentifierError: If an identifier is selected twice
        UnsupportedOverrideError: If an override key is not a known kind
        InvalidOverrideRuleError: If an override is neither a type annotation nor a predicate

    """
    selected = _select_identifiers(identifiers)
    rules = DEFAULT_IDENTIFIER_RULES | _normalize_overrides(overrides)

    shape: dict[str, FieldRule] = {
        PASSWORD_FIELD: NonEmptyStr,
        PASSWORD_CONFIRMATION_FIELD: NonEmptyStr,
    }
    model_fields: dict[str, Any] = {
        "password": (NonEmptyStr, ...),
        "password_confirmation": (NonEmptyStr, Field(..., alias=PASSWORD_CONFIRMATION_FIELD)),
    }

    for kind in IdentifierType:
        if kind not in selected:
            continue
        rule = rules[kind]
        shape[kind.value] = rule
        if not _is_type_annotation(rule):
            rule = _predicate_rule(kind, rule)
        # Defaults are not validated, so an absent key passes but an explicit null fails the rule
        model_fields[kind.value] = (rule, Field(default=None))

    model = create_model(
        "PasswordIdentityPayload",
        __config__=ConfigDict(frozen=True, populate_by_name=True, extra="ignore"),
        **model_fields,
    )

    return PasswordIdentitySchema(identifiers=selected, shape=MappingProxyType(shape), model=model)


def create_password_identity_schema_from_settings(
    overrides: Mapping[IdentifierType | str, FieldRule] | None = None,
) -> PasswordIdentitySchema:
    """Build the schema for the identifiers configured in ``settings.default_identifiers``."""
    return create_password_identity_schema(settings.get_default_identifiers(), overrides)
