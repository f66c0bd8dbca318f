"""Identity domain models.

An identity is one authentication method bound to a user. Each kind of
identity is its own model, and ``Identity`` is the union of all of them
discriminated by ``type``.
"""

from datetime import datetime
from enum import StrEnum
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, EmailStr, Field, TypeAdapter
from pydantic.alias_generators import to_camel

from src.shared.validators.phone import PhoneNumber


class IdentityType(StrEnum):
    """Authentication methods an identity can represent."""

    PASSWORD = "password"
    OAUTH = "oauth"


class IdentityBase(BaseModel):
    """Fields shared by every identity.

    ``user_id`` references the owning user; a user may have many
    identities. Referential integrity is enforced by the persistence layer.
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    id: str
    user_id: str
    created_at: datetime
    updated_at: datetime


class PasswordIdentity(IdentityBase):
    """Password credential with the identifiers the user signs in with."""

    type: Literal["password"] = IdentityType.PASSWORD.value
    password_hash: str = Field(..., min_length=1)
    email: EmailStr | None = None
    username: str | None = None
    phone: PhoneNumber | None = None


class OAuthIdentity(IdentityBase):
    """Identity delegated to an external OAuth provider."""

    type: Literal["oauth"] = IdentityType.OAUTH.value
    provider: str = Field(..., min_length=1)
    provider_subject: str = Field(..., min_length=1)
    email: EmailStr | None = None


Identity = Annotated[PasswordIdentity | OAuthIdentity, Field(discriminator="type")]

identity_adapter: TypeAdapter[Identity] = TypeAdapter(Identity)


def parse_identity(data: Any) -> PasswordIdentity | OAuthIdentity:
    """Validate a raw identity record into its concrete variant.

    Raises:
        ValidationError: If ``type`` is unknown or the variant's fields are invalid.

    """
    return identity_adapter.validate_python(data)
