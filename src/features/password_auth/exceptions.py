"""Password credential schema configuration exceptions."""


class SchemaConfigurationError(Exception):
    """Raised when a credential schema is requested with invalid arguments."""

    def __init__(self, detail: str = "Invalid credential schema configuration"):
        self.detail = detail
        super().__init__(detail)


class UnsupportedIdentifierError(SchemaConfigurationError):
    """Raised when an identifier kind is outside the supported set."""

    def __init__(self, identifier: object):
        super().__init__(detail=f"Unsupported identifier: {identifier!r}")


class DuplicateIdentifierError(SchemaConfigurationError):
    """Raised when the same identifier kind is selected more than once."""

    def __init__(self, identifier: str):
        super().__init__(detail=f"Identifier selected more than once: {identifier}")


class UnsupportedOverrideError(SchemaConfigurationError):
    """Raised when a field override is keyed by an unknown identifier kind."""

    def __init__(self, key: object):
        super().__init__(detail=f"Override for unsupported identifier: {key!r}")


class InvalidOverrideRuleError(SchemaConfigurationError):
    """Raised when a field override is neither a type annotation nor a predicate."""

    def __init__(self, identifier: str, rule: object):
        super().__init__(detail=f"Unusable override rule for {identifier}: {rule!r}")
