"""User domain models."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr
from pydantic.alias_generators import to_camel


class User(BaseModel):
    """A user of the platform.

    Users are created and updated by the account service; this package only
    describes and validates them. A user carries no credential material:
    passwords and other authentication methods live on identities.
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    id: str
    email: EmailStr
    created_at: datetime
    updated_at: datetime
