"""Domain layer errors."""

from enum import Enum


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class InvalidIdentifierError(ValidationError):
    """Raised when an identifier is not a well-formed UUID."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Invalid identifier: {value}")


class NotAuthorizedError(DomainError):
    """Raised when a user attempts to modify content they don't own."""

    def __init__(self, resource: str, resource_id: str, user_id: str):
        self.resource = resource
        self.resource_id = resource_id
        super().__init__(
            f"User {user_id} is not authorized to modify {resource} {resource_id}"
        )


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class AlreadyExistsError(DomainError):
    """Raised when a unique attribute is already taken."""

    def __init__(self, resource: str, field: str, value: str):
        self.resource = resource
        self.field = field
        super().__init__(f"{resource} with {field} '{value}' already exists")


class CredentialFailure(str, Enum):
    """Why a request could not be authenticated."""

    MISSING = "missing_credential"
    INVALID = "invalid_credential"


class AuthenticationError(DomainError):
    """Raised when a caller cannot be identified."""

    def __init__(self, kind: CredentialFailure, message: str):
        self.kind = kind
        super().__init__(message)


class DatabaseError(DomainError):
    """Raised when the store fails to execute an operation."""

    def __init__(self, message: str, cause: str | None = None):
        self.cause = cause
        super().__init__(message)
